"""Pydantic schemas for the electronics store API."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class QuoteRequest(BaseModel):
    skus: list[str] = Field(default_factory=list, max_length=500)


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ItemResponse(BaseModel):
    sku: str
    name: str
    price: Decimal


class RuleResponse(BaseModel):
    name: str
    mode: str
    kind: str
    receive_sku: str
    period: Optional[dict] = None


class AppliedRule(BaseModel):
    name: str
    amount: Decimal
    message: str


class QuoteResponse(BaseModel):
    skus: list[str]
    gross: Decimal
    discount: Decimal
    total: Decimal
    applied_rules: list[AppliedRule] = Field(default_factory=list)
