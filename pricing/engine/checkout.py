"""Checkout session: scan items, price the cart against a fixed rule set.

The cart is append-only until cleared. Discounts are never cached; every
query re-indexes the cart and re-evaluates each rule, so the answer always
reflects what has been scanned so far.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from pricing.engine.rules import Rule, RuleResult, index_items
from pricing.errors import ConfigurationError
from pricing.models.item import Item
from pricing.observability.logging_setup import get_logger
from pricing.observability.otel_setup import get_tracer

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass
class DiscountBreakdown:
    """Priced cart: gross, discount, total and what each rule contributed."""

    gross: Decimal
    discount: Decimal
    total: Decimal
    results: list[RuleResult]
    applied: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.applied = [r for r in self.results if r.applied]


class Checkout:
    """A single checkout session.

    Usage::

        co = Checkout(pricing_rules)
        co.scan(atv)
        co.scan(atv)
        co.scan(atv)
        co.total()  # two Apple TVs charged
    """

    def __init__(self, rules: Iterable[Rule]):
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._cart: list[Item] = []

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def cart(self) -> tuple[Item, ...]:
        return tuple(self._cart)

    def scan(self, item: Item) -> None:
        self._cart.append(item)
        logger.debug("Scanned %s (%s) at %s", item.sku, item.name, item.price)

    def clear(self) -> None:
        self._cart = []
        logger.debug("Cart cleared")

    def indexed_items(self) -> dict[str, list[Item]]:
        return index_items(self._cart)

    def breakdown(self, now: Optional[datetime] = None) -> DiscountBreakdown:
        """Evaluate every rule against the current cart.

        Discounts are additive and rules do not see each other's results.
        A rule with an unparseable period aborts the whole computation.
        """
        with tracer.start_as_current_span(
            "checkout.discount",
            attributes={
                "checkout.cart_size": len(self._cart),
                "checkout.rule_count": len(self._rules),
            },
        ) as span:
            indexed = self.indexed_items()
            try:
                results = [rule.evaluate(indexed, now) for rule in self._rules]
            except ConfigurationError as exc:
                logger.warning("Pricing aborted: %s", exc)
                raise

            gross = sum((item.price for item in self._cart), Decimal("0"))
            discount = sum((r.amount for r in results if r.applied), Decimal("0"))
            breakdown = DiscountBreakdown(
                gross=gross,
                discount=discount,
                total=gross - discount,
                results=results,
            )
            span.set_attribute("checkout.discount", str(discount))
            span.set_attribute("checkout.rules_applied", len(breakdown.applied))

        logger.debug(
            "Priced %d items: gross=%s discount=%s (%d rules applied)",
            len(self._cart), gross, discount, len(breakdown.applied),
        )
        return breakdown

    def discount(self, now: Optional[datetime] = None) -> Decimal:
        return self.breakdown(now).discount

    def total(self, now: Optional[datetime] = None) -> Decimal:
        if not self._cart:
            return Decimal("0")
        return self.breakdown(now).total
