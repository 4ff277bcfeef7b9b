"""Command-line demo of the checkout and registration flows."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

from .cart import ShoppingCart
from .config import load_settings
from .delay import no_delay
from .errors import ConfigError
from .log import configure_logging
from .registration import UserRegistration

DEMO_ITEMS = [
    ("Laptop", "999.99", 1),
    ("Wireless Mouse", "29.99", 2),
    ("USB-C Cable", "19.99", 1),
]


def _sleeper(args):
    return no_delay if args.no_delay else time.sleep


def run_checkout(args, settings) -> int:
    cart = ShoppingCart(settings, sleeper=_sleeper(args))

    for name, price, quantity in DEMO_ITEMS:
        cart.add_item(name, price, quantity)

    if args.discount and not cart.apply_discount(args.discount):
        print(f"Unknown discount code: {args.discount}")

    cart.checkout(args.email, args.method)

    print(cart.email_handler.last_body or "")
    print()
    result = cart.get_last_payment_result()
    print(f"Order {cart.get_order_id()}: {result.message}")
    return 0 if result.success else 1


def run_register(args, settings) -> int:
    registration = UserRegistration(settings, sleeper=_sleeper(args))

    result = registration.register_user(args.email, args.password)
    print(result.message)
    if not result.success:
        return 1

    if not registration.activate_account(args.email, result.verification_token):
        print("Activation failed")
        return 1

    print(f"Account activated: {args.email}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Storefront checkout and registration demo")
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip simulated payment and email latency",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    checkout = subparsers.add_parser("checkout", help="Check out a sample cart")
    checkout.add_argument(
        "--discount",
        default="SUMMER10",
        help="Discount code to apply (default: SUMMER10)",
    )
    checkout.add_argument(
        "--email",
        default="customer@example.com",
        help="Confirmation recipient (default: customer@example.com)",
    )
    checkout.add_argument(
        "--method",
        default="CREDIT_CARD",
        help="Payment method (default: CREDIT_CARD)",
    )

    register = subparsers.add_parser("register", help="Register and activate a user")
    register.add_argument("--email", required=True, help="Account email")
    register.add_argument("--password", required=True, help="Account password")

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(settings)

    if args.command == "checkout":
        return run_checkout(args, settings)
    return run_register(args, settings)


if __name__ == "__main__":
    sys.exit(main())
