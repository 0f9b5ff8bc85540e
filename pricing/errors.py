"""Pricing error taxonomy."""


class PricingError(Exception):
    """Base class for all pricing engine errors."""


class ConfigurationError(PricingError, ValueError):
    """A rule is malformed: bad structure or an unparseable period date."""


class UnknownSkuError(PricingError, KeyError):
    """A store was asked for a SKU it does not sell."""

    def __init__(self, sku: str):
        super().__init__(sku)
        self.sku = sku

    def __str__(self) -> str:
        return f"Unknown SKU: {self.sku}"
