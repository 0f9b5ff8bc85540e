"""Pure-function pricing rules.

A rule is configuration plus two pure operations over an indexed cart
(SKU -> items of that SKU, in scan order):
- applies(): is the rule active for this cart right now?
- calc(): how much does it take off the cart?

Rules hold no cart state, so one rule set can price any number of carts
and every evaluation is deterministic for a given cart and moment.

Example::

    rule = Rule.from_config({
        "batch": {"sku": "atv", "qty": 3},
        "receive": {"sku": "atv"},
    })
    indexed = index_items(cart)
    if rule.applies(indexed):
        discount += rule.calc(indexed)
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from pricing.errors import ConfigurationError
from pricing.models.item import Item
from pricing.models.schemas import (
    BatchConfig,
    BulkConfig,
    DiscountKind,
    Period,
    ReceiveConfig,
)

DATE_FORMAT = "%d/%m/%Y"

IndexedCart = Mapping[str, Sequence[Item]]

_ZERO = Decimal("0")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def index_items(items: Iterable[Item]) -> dict[str, list[Item]]:
    """Group items by SKU, keeping scan order within each group."""
    indexed: dict[str, list[Item]] = {}
    for item in items:
        indexed.setdefault(item.sku, []).append(item)
    return indexed


def parse_date(value: str) -> datetime:
    """Parse a day/month/year date string to midnight of that day."""
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Invalid period date {value!r}, expected DD/MM/YYYY"
        ) from exc


def _local_moment(now: Optional[datetime]) -> datetime:
    """Naive local time, comparable with parsed period dates."""
    if now is None:
        return datetime.now()
    if now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

class RuleMode(str, Enum):
    BULK = "bulk"
    BATCH = "batch"


@dataclass
class RuleResult:
    """Outcome of evaluating one rule against a cart."""

    applied: bool
    rule_name: str
    amount: Decimal
    message: str
    details: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Rule
# ---------------------------------------------------------------------------

class Rule(BaseModel):
    """A declarative discount.

    Bulk mode (``bulk`` set, ``batch`` not): once ``bulk.qty`` units of
    ``bulk.sku`` are in the cart, the first ``receive.qty`` items of
    ``receive.sku`` (all of them when unset) are discounted.

    Batch mode (``batch`` set): every complete group of ``batch.qty`` units
    of ``batch.sku`` discounts ``receive.qty`` (default 1) items of
    ``receive.sku``. ``batch`` wins when both are given.

    With neither, the first ``receive.qty`` (default 1) items of
    ``receive.sku`` are discounted whenever the rule is in period.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    period: Optional[Period] = None
    bulk: Optional[BulkConfig] = None
    batch: Optional[BatchConfig] = None
    receive: ReceiveConfig

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Rule":
        """Build a rule from a nested mapping of plain values."""
        try:
            return cls.model_validate(config)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid rule configuration: {exc}") from exc

    @property
    def mode(self) -> RuleMode:
        if self.batch is None and self.bulk is not None:
            return RuleMode.BULK
        return RuleMode.BATCH

    @property
    def label(self) -> str:
        """Human-readable name, derived from the configuration when unnamed."""
        if self.name:
            return self.name
        receive = f"{self.receive.sku} {self.receive.kind.value}"
        if self.mode is RuleMode.BULK:
            return f"bulk {self.bulk.qty}+ {self.bulk.sku} -> {receive}"
        if self.batch is not None:
            return f"batch {self.batch.qty}x {self.batch.sku} -> {receive}"
        return f"always -> {receive}"

    # -- Applicability --

    def in_period(self, now: Optional[datetime] = None) -> bool:
        """Check the validity window. Raises ConfigurationError on bad dates."""
        if self.period is None:
            return True
        start = parse_date(self.period.start)
        end = parse_date(self.period.end)
        return start <= _local_moment(now) <= end

    def applies(self, indexed: IndexedCart, now: Optional[datetime] = None) -> bool:
        if not self.in_period(now):
            return False
        if self.mode is not RuleMode.BULK:
            return True
        return len(indexed.get(self.bulk.sku, ())) >= self.bulk.qty

    # -- Calculation --

    def discounted_count(self, indexed: IndexedCart) -> Optional[int]:
        """How many receive items are discounted; None means all of them."""
        if self.mode is RuleMode.BULK:
            return self.receive.qty
        per_batch = 1 if self.receive.qty is None else self.receive.qty
        if self.batch is None:
            return per_batch
        batches = len(indexed.get(self.batch.sku, ())) // self.batch.qty
        return batches * per_batch

    def discounted_items(self, indexed: IndexedCart) -> list[Item]:
        """The first N receive items, in scan order."""
        candidates = list(indexed.get(self.receive.sku, ()))
        count = self.discounted_count(indexed)
        if count is None:
            return candidates
        return candidates[:count]

    def calc(self, indexed: IndexedCart) -> Decimal:
        return self._amount(self.discounted_items(indexed))

    def _amount(self, discounted: Sequence[Item]) -> Decimal:
        if not discounted:
            return _ZERO

        receive = self.receive
        units = len(discounted)
        subtotal = sum((item.price for item in discounted), _ZERO)
        kind = receive.kind

        if kind is DiscountKind.DISCOUNT:
            return units * receive.discount
        if kind is DiscountKind.FIXED:
            return subtotal - units * receive.fixed
        if kind is DiscountKind.PERCENT:
            # percent is the fraction charged, so this returns the remainder
            return subtotal * (1 - receive.percent)
        return subtotal

    # -- Evaluation --

    def evaluate(self, indexed: IndexedCart, now: Optional[datetime] = None) -> RuleResult:
        """Run applies() and calc() and explain the outcome."""
        now = now or datetime.now()
        details: dict[str, Any] = {"mode": self.mode.value, "kind": self.receive.kind.value}

        if not self.in_period(now):
            return RuleResult(
                applied=False,
                rule_name=self.label,
                amount=_ZERO,
                message="Outside promotion period",
                details=details,
            )

        if not self.applies(indexed, now):
            scanned = len(indexed.get(self.bulk.sku, ()))
            details.update({"scanned": scanned, "threshold": self.bulk.qty})
            return RuleResult(
                applied=False,
                rule_name=self.label,
                amount=_ZERO,
                message=(
                    f"Bulk threshold not reached: {scanned} of {self.bulk.qty} "
                    f"{self.bulk.sku}"
                ),
                details=details,
            )

        discounted = self.discounted_items(indexed)
        amount = self._amount(discounted)
        details["discounted_units"] = len(discounted)
        return RuleResult(
            applied=True,
            rule_name=self.label,
            amount=amount,
            message=f"{len(discounted)} x {self.receive.sku} discounted",
            details=details,
        )
