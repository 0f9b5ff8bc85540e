"""Electronics catalog and pricing rules.

In-memory for the reference store; rule sets are plain mappings so they
read the same as a rules file would.
"""

from decimal import Decimal

from pricing import Checkout, Item, Rule, UnknownSkuError

# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

IPD = "ipd"
MBP = "mbp"
ATV = "atv"
VGA = "vga"

_CATALOG: dict[str, Item] = {
    IPD: Item(sku=IPD, name="Super iPad", price=Decimal("549.99")),
    MBP: Item(sku=MBP, name="MacBook Pro", price=Decimal("1399.99")),
    ATV: Item(sku=ATV, name="Apple TV", price=Decimal("109.50")),
    VGA: Item(sku=VGA, name="VGA adapter", price=Decimal("30.00")),
}

# ---------------------------------------------------------------------------
# Pricing rules
# ---------------------------------------------------------------------------

RULE_CONFIGS: list[dict] = [
    {
        "name": "3 Apple TVs for the price of 2",
        "batch": {"sku": ATV, "qty": 3},
        "receive": {"sku": ATV},
    },
    {
        "name": "Free VGA adapter with every MacBook Pro",
        "batch": {"sku": MBP},
        "receive": {"sku": VGA},
    },
    {
        "name": "Super iPad bulk price $499.99",
        "bulk": {"sku": IPD, "qty": 4},
        "receive": {"sku": IPD, "fixed": "499.99"},
    },
]


def get_item(sku: str) -> Item:
    """Look up a catalog item. Raises UnknownSkuError for unsold SKUs."""
    try:
        return _CATALOG[sku]
    except KeyError:
        raise UnknownSkuError(sku) from None


def list_items() -> list[Item]:
    return list(_CATALOG.values())


def pricing_rules() -> list[Rule]:
    return [Rule.from_config(config) for config in RULE_CONFIGS]


def new_checkout() -> Checkout:
    """A fresh checkout session priced with the store's rules."""
    return Checkout(pricing_rules())
