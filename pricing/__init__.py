"""Checkout pricing engine.

Prices a cart of scanned items against declarative promotional rules:
- Bulk rules unlock a discount once a threshold quantity is in the cart
- Batch rules discount a number of items per complete group scanned
- Rules are pure functions of the indexed cart; discounts are additive
"""

from pricing.engine.checkout import Checkout, DiscountBreakdown
from pricing.engine.rules import Rule, RuleMode, RuleResult, index_items
from pricing.errors import ConfigurationError, PricingError, UnknownSkuError
from pricing.models.item import Item
from pricing.models.schemas import (
    BatchConfig,
    BulkConfig,
    DiscountKind,
    Period,
    ReceiveConfig,
)

__all__ = [
    "BatchConfig",
    "BulkConfig",
    "Checkout",
    "ConfigurationError",
    "DiscountBreakdown",
    "DiscountKind",
    "Item",
    "Period",
    "PricingError",
    "ReceiveConfig",
    "Rule",
    "RuleMode",
    "RuleResult",
    "UnknownSkuError",
    "index_items",
]
