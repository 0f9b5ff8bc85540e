"""Item value type.

Many Item instances may share a SKU; grouping is always by SKU, never by
item identity.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Item:
    """A product as scanned at the till.

    Usage::

        mbp = Item(sku="mbp", name="MacBook Pro", price=Decimal("1399.99"))
    """

    sku: str
    name: str
    price: Decimal

    def __post_init__(self):
        # Route floats through str so 109.50 and "109.50" are the same amount.
        try:
            price = self.price if isinstance(self.price, Decimal) else Decimal(str(self.price))
        except InvalidOperation:
            raise ValueError(f"Item {self.sku} has invalid price {self.price!r}") from None
        if not price.is_finite():
            raise ValueError(f"Item {self.sku} has invalid price {self.price!r}")
        if price < 0:
            raise ValueError(f"Item {self.sku} has negative price {price}")
        object.__setattr__(self, "price", price)
