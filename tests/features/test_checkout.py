"""pytest-bdd scenarios for the checkout flow."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from storefront.cart import ShoppingCart
from storefront.delay import no_delay
from storefront.identity import SequentialIdGenerator

scenarios("checkout.feature")


class CheckoutTestContext:
    """Test context for checkout scenarios."""

    def __init__(self):
        self.cart = ShoppingCart(id_generator=SequentialIdGenerator(), sleeper=no_delay)
        self.discount_accepted = None
        self.status = None


@pytest.fixture
def ctx():
    return CheckoutTestContext()


# --- Given steps ---

@given("an empty shopping cart")
def empty_cart(ctx):
    assert ctx.cart.get_items() == []


@given("the cart contains:")
def cart_contains(ctx, datatable):
    headers = datatable[0]
    for row in datatable[1:]:
        row_dict = dict(zip(headers, row))
        ctx.cart.add_item(row_dict["product"], row_dict["price"], int(row_dict["quantity"]))


# --- When steps ---

@when(parsers.parse('I apply the discount code "{code}"'))
def apply_code(ctx, code):
    ctx.discount_accepted = ctx.cart.apply_discount(code)


@when(parsers.parse('I check out as "{email}" paying with "{method}"'))
def check_out(ctx, email, method):
    ctx.status = ctx.cart.checkout(email, method)


# --- Then steps ---

@then("the discount is accepted")
def discount_accepted(ctx):
    assert ctx.discount_accepted is True


@then("the discount is rejected")
def discount_rejected(ctx):
    assert ctx.discount_accepted is False


@then(parsers.parse('the applied discount code is "{code}"'))
def applied_code(ctx, code):
    assert ctx.cart.get_applied_discount_code() == code


@then(parsers.parse("the subtotal is {amount}"))
def subtotal_is(ctx, amount):
    assert ctx.cart.calculate_subtotal() == Decimal(amount)


@then(parsers.parse("the discount amount is {amount}"))
def discount_is(ctx, amount):
    assert ctx.cart.calculate_discount_amount() == Decimal(amount)


@then(parsers.parse("the total is {amount}"))
def total_is(ctx, amount):
    assert ctx.cart.calculate_total() == Decimal(amount)


@then(parsers.parse('the checkout status is "{status}"'))
def checkout_status(ctx, status):
    assert ctx.status.value == status


@then(parsers.parse('the order id starts with "{prefix}"'))
def order_id_prefix(ctx, prefix):
    assert ctx.cart.get_order_id().startswith(prefix)


@then(parsers.parse('the payment succeeded with a transaction id starting with "{prefix}"'))
def payment_succeeded(ctx, prefix):
    result = ctx.cart.get_last_payment_result()
    assert result.success is True
    assert result.transaction_id.startswith(prefix)


@then(parsers.parse('the payment failed with message "{message}"'))
def payment_failed(ctx, message):
    result = ctx.cart.get_last_payment_result()
    assert result.success is False
    assert result.transaction_id is None
    assert result.message == message


@then(parsers.parse('a confirmation email was sent to "{email}"'))
def email_sent(ctx, email):
    assert ctx.cart.get_email_sent_to() == email
