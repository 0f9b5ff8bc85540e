"""Test the reference checkout scenarios end to end."""
import pytest
from datetime import datetime
from decimal import Decimal

from pricing import Checkout, Item, Rule
from stores.electronics import catalog

MBP = Item(sku="mbp", name="MacBook Pro", price=Decimal("1399.99"))
IPD = Item(sku="ipd", name="Super iPad", price=Decimal("549.99"))
ATV = Item(sku="atv", name="Apple TV", price=Decimal("109.50"))
VGA = Item(sku="vga", name="VGA adapter", price=Decimal("30.00"))

# Inside the iPad promotion window below.
PROMO_DAY = datetime(2020, 6, 1)


@pytest.fixture
def checkout():
    rules = [
        Rule.from_config({"batch": {"sku": "atv", "qty": 3}, "receive": {"sku": "atv"}}),
        Rule.from_config({"batch": {"sku": "mbp"}, "receive": {"sku": "vga"}}),
        Rule.from_config({
            "period": {"start": "25/01/2020", "end": "25/01/2021"},
            "bulk": {"sku": "ipd", "qty": 4},
            "receive": {"sku": "ipd", "fixed": "499.99"},
        }),
    ]
    return Checkout(rules)


def scan_all(checkout, items):
    for item in items:
        checkout.scan(item)


def test_example_scenario_one(checkout):
    scan_all(checkout, [ATV, ATV, ATV, VGA])
    assert checkout.total(now=PROMO_DAY) == Decimal("249.00")


def test_example_scenario_two(checkout):
    scan_all(checkout, [ATV, IPD, IPD, ATV, IPD, IPD, IPD])
    assert checkout.total(now=PROMO_DAY) == Decimal("2718.95")


def test_example_scenario_two_after_promotion_ends(checkout):
    scan_all(checkout, [ATV, IPD, IPD, ATV, IPD, IPD, IPD])
    assert checkout.total(now=datetime(2021, 6, 1)) == Decimal("2968.95")


def test_example_scenario_three(checkout):
    scan_all(checkout, [MBP, VGA, IPD])
    assert checkout.total(now=PROMO_DAY) == Decimal("1949.98")


def test_example_scenario_empty_cart(checkout):
    assert checkout.total(now=PROMO_DAY) == 0


@pytest.mark.parametrize("skus, expected", [
    (["atv", "atv", "atv", "vga"], "249.00"),
    (["atv", "ipd", "ipd", "atv", "ipd", "ipd", "ipd"], "2718.95"),
    (["mbp", "vga", "ipd"], "1949.98"),
    ([], "0"),
])
def test_electronics_store_rules(skus, expected):
    co = catalog.new_checkout()
    scan_all(co, [catalog.get_item(sku) for sku in skus])
    assert co.total() == Decimal(expected)
