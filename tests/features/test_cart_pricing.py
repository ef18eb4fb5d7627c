"""BDD tests for cart pricing using pytest-bdd."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from cart_pricing.catalog import SAMPLE_CATALOG
from cart_pricing.errors import CartError
from cart_pricing.store import CartStore

scenarios("cart_pricing.feature")


class CartTestContext:
    """Test context for cart pricing scenarios."""

    def __init__(self):
        self.store = CartStore(cart_id="bdd")
        self.error = None


@pytest.fixture
def ctx():
    return CartTestContext()


def product(name: str):
    item = SAMPLE_CATALOG.find_by_name(name)
    assert item is not None, f"no sample product named {name!r}"
    return item


# --- Given steps ---


@given("an empty cart")
def empty_cart(ctx):
    ctx.store.clear()


@given(parsers.parse('the customer is "{tier}"'))
def customer_tier(ctx, tier):
    ctx.store.set_loyalty_tier(tier)


# --- When steps ---


@when(parsers.parse('I add {quantity:d} of "{name}"'))
def add_item(ctx, quantity, name):
    ctx.store.add_item(product(name), quantity)


@when(parsers.parse('I try to add {quantity:d} of "{name}"'))
def try_add_item(ctx, quantity, name):
    try:
        ctx.store.add_item(product(name), quantity)
    except CartError as e:
        ctx.error = e


@when(parsers.parse('I set the quantity of "{name}" to {quantity:d}'))
def set_quantity(ctx, name, quantity):
    ctx.store.update_quantity(product(name).id, quantity)


@when(parsers.parse('I remove "{name}"'))
def remove_item(ctx, name):
    ctx.store.remove_item(product(name).id)


@when(parsers.parse('the customer changes to "{tier}"'))
def change_tier(ctx, tier):
    ctx.store.set_loyalty_tier(tier)


# --- Then steps ---


@then(parsers.parse("the subtotal is {amount}"))
def subtotal_is(ctx, amount):
    assert ctx.store.breakdown().subtotal == Decimal(amount)


@then(parsers.parse("the total tax is {amount}"))
def total_tax_is(ctx, amount):
    assert ctx.store.breakdown().total_tax == Decimal(amount)


@then(parsers.parse("the item discounts are {amount}"))
def item_discounts_are(ctx, amount):
    assert ctx.store.breakdown().total_item_discounts == Decimal(amount)


@then(parsers.parse("the bulk discount is {amount}"))
def bulk_discount_is(ctx, amount):
    assert ctx.store.breakdown().bulk_discount == Decimal(amount)


@then(parsers.parse("the loyalty discount is {amount}"))
def loyalty_discount_is(ctx, amount):
    assert ctx.store.breakdown().loyalty_discount == Decimal(amount)


@then(parsers.parse("the final total is {amount}"))
def final_total_is(ctx, amount):
    assert ctx.store.breakdown().final_total == Decimal(amount)


@then(parsers.parse("the cart has {count:d} line items"))
def line_item_count(ctx, count):
    assert len(ctx.store.line_items()) == count


@then(parsers.parse('the request is rejected with "{message}"'))
def request_rejected(ctx, message):
    assert ctx.error is not None
    assert message in str(ctx.error)
