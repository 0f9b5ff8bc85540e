"""Pydantic schemas for rule configuration.

Each section of a rule is its own frozen model, so a rule's shape is
validated once at configuration time instead of probed key by key while
pricing a cart.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DiscountKind(str, Enum):
    """How discounted items are priced. Declared in priority order."""

    DISCOUNT = "discount"  # flat amount off per unit
    FIXED = "fixed"        # per-unit price reduced by a flat amount
    PERCENT = "percent"    # fraction of summed price
    FREE = "free"          # full price waived


# ---------------------------------------------------------------------------
# Rule sections
# ---------------------------------------------------------------------------

class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Period(_Section):
    """Inclusive validity window; dates are day/month/year strings."""

    start: str
    end: str


class BulkConfig(_Section):
    """Threshold: at least `qty` units of `sku` must be in the cart."""

    sku: str
    qty: int = Field(1, ge=1)


class BatchConfig(_Section):
    """Repeating group: every `qty` units of `sku` earn one receive."""

    sku: str
    qty: int = Field(1, ge=1)


class ReceiveConfig(_Section):
    """Which items get discounted and how."""

    sku: str
    qty: Optional[int] = Field(None, ge=0)
    discount: Optional[Decimal] = None
    fixed: Optional[Decimal] = None
    percent: Optional[Decimal] = None

    @property
    def kind(self) -> DiscountKind:
        if self.discount is not None:
            return DiscountKind.DISCOUNT
        if self.fixed is not None:
            return DiscountKind.FIXED
        if self.percent is not None:
            return DiscountKind.PERCENT
        return DiscountKind.FREE
