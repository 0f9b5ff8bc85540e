"""Electronics store API router — catalog, rules and cart quotes.

Every quote prices a fresh Checkout injected through FastAPI Depends, so
requests never share a cart.
"""

from fastapi import APIRouter, Depends, HTTPException

from pricing import Checkout, ConfigurationError, UnknownSkuError
from pricing.observability.logging_setup import get_logger
from stores.electronics.catalog import get_item, list_items, new_checkout
from stores.electronics.models.schemas import (
    AppliedRule,
    ItemResponse,
    QuoteRequest,
    QuoteResponse,
    RuleResponse,
)

logger = get_logger(__name__)

router = APIRouter()


def get_checkout() -> Checkout:
    return new_checkout()


# ============================================================================
# Catalog Endpoints
# ============================================================================

@router.get("/catalog", response_model=list[ItemResponse])
async def get_catalog():
    """List every item the store sells."""
    return [ItemResponse(sku=i.sku, name=i.name, price=i.price) for i in list_items()]


@router.get("/rules", response_model=list[RuleResponse])
async def get_rules(checkout: Checkout = Depends(get_checkout)):
    """List the pricing rules currently configured."""
    return [
        RuleResponse(
            name=rule.label,
            mode=rule.mode.value,
            kind=rule.receive.kind.value,
            receive_sku=rule.receive.sku,
            period=rule.period.model_dump() if rule.period else None,
        )
        for rule in checkout.rules
    ]


# ============================================================================
# Quote Endpoint
# ============================================================================

@router.post("/quote", response_model=QuoteResponse)
async def quote(
    request: QuoteRequest,
    checkout: Checkout = Depends(get_checkout),
):
    """Scan the given SKUs in order and price the cart."""
    try:
        for sku in request.skus:
            checkout.scan(get_item(sku))
    except UnknownSkuError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    try:
        breakdown = checkout.breakdown()
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    logger.info(
        "Quoted %d items: total=%s discount=%s",
        len(request.skus), breakdown.total, breakdown.discount,
    )
    return QuoteResponse(
        skus=request.skus,
        gross=breakdown.gross,
        discount=breakdown.discount,
        total=breakdown.total,
        applied_rules=[
            AppliedRule(name=r.rule_name, amount=r.amount, message=r.message)
            for r in breakdown.applied
            if r.amount != 0
        ],
    )
