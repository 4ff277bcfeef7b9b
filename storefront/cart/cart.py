"""Shopping cart orchestration.

``ShoppingCart`` keeps the line items and delegates everything else to its
collaborators:

    add_item / apply_discount  ->  DiscountService
    checkout                   ->  OrderIdGenerator -> PaymentProcessor -> EmailHandler

Checkout never rolls back. A failed payment still leaves an order id behind
and, unless ``Settings.notify_on_failed_payment`` is off, still sends the
confirmation email.
"""

from __future__ import annotations

import time
from decimal import Decimal
from typing import Optional

import structlog

from ..config import Settings
from ..delay import Sleeper
from ..errors import errmsg
from ..identity import IdGenerator, random_id
from .discounts import DiscountService
from .email import EmailHandler
from .models import ZERO, CheckoutStatus, LineItem, Money, PaymentResult, to_decimal
from .orders import OrderIdGenerator
from .payment import PaymentProcessor
from .service import ShoppingCartService


class ShoppingCart(ShoppingCartService):
    """Cart that holds line items and runs checkout through its collaborators."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        discount_service: Optional[DiscountService] = None,
        payment_processor: Optional[PaymentProcessor] = None,
        order_ids: Optional[OrderIdGenerator] = None,
        email_handler: Optional[EmailHandler] = None,
        id_generator: IdGenerator = random_id,
        sleeper: Sleeper = time.sleep,
    ) -> None:
        self.settings = settings or Settings()
        self._items: list[LineItem] = []
        self._status = CheckoutStatus.BUILDING

        self.discount_service = discount_service or DiscountService()
        self.payment_processor = payment_processor or PaymentProcessor(
            id_generator=id_generator,
            sleeper=sleeper,
            delay_ms=self.settings.payment_delay_ms,
        )
        self.order_ids = order_ids or OrderIdGenerator(id_generator=id_generator)
        self.email_handler = email_handler or EmailHandler(
            sleeper=sleeper, delay_ms=self.settings.email_delay_ms
        )

        self._log = structlog.get_logger().bind(component="cart")

    @property
    def status(self) -> CheckoutStatus:
        return self._status

    # Cart management

    def add_item(self, product_name: str, price: Money, quantity: int) -> None:
        price = to_decimal(price)
        if self.settings.strict_items:
            if not price.is_finite() or price < 0:
                raise ValueError(errmsg.NEGATIVE_PRICE)
            if quantity <= 0:
                raise ValueError(errmsg.QUANTITY_POSITIVE)

        self._items.append(LineItem(product_name, price, quantity))
        self._log.info("added_item", product_name=product_name, quantity=quantity)

    def get_items(self) -> list[LineItem]:
        return list(self._items)

    # Price calculations

    def calculate_subtotal(self) -> Decimal:
        return sum((item.line_total for item in self._items), ZERO)

    def calculate_discount_amount(self) -> Decimal:
        return self.discount_service.calculate_discount_amount(
            self.calculate_subtotal()
        )

    def calculate_total(self) -> Decimal:
        return self.calculate_subtotal() - self.calculate_discount_amount()

    # Discounts

    def apply_discount(self, discount_code: str) -> bool:
        return self.discount_service.apply_discount(discount_code)

    def get_applied_discount_code(self) -> Optional[str]:
        return self.discount_service.get_applied_discount_code()

    # Orders

    def generate_order_id(self) -> str:
        return self.order_ids.generate_order_id()

    def get_order_id(self) -> Optional[str]:
        return self.order_ids.get_order_id()

    def checkout(self, customer_email: str, payment_method: str) -> CheckoutStatus:
        order_id = self.generate_order_id()
        total = self.calculate_total()

        result = self.process_payment(payment_method, total)

        if result.success or self.settings.notify_on_failed_payment:
            self.send_order_confirmation_email(customer_email)
        else:
            self._log.warning(
                "confirmation_skipped", order_id=order_id, reason=result.message
            )

        self._status = (
            CheckoutStatus.COMPLETED if result.success else CheckoutStatus.FAILED
        )
        self._log.info(
            "checkout_completed",
            order_id=order_id,
            total=str(total),
            status=self._status.value,
        )
        return self._status

    # Payment

    def process_payment(self, payment_method: str, amount: Money) -> PaymentResult:
        return self.payment_processor.process_payment(
            payment_method, to_decimal(amount)
        )

    def get_last_payment_result(self) -> Optional[PaymentResult]:
        return self.payment_processor.get_last_payment_result()

    # Email

    def send_order_confirmation_email(self, customer_email: str) -> None:
        subtotal = self.calculate_subtotal()
        discount_amount = self.discount_service.calculate_discount_amount(subtotal)
        self.email_handler.send_order_confirmation_email(
            customer_email,
            self.get_order_id(),
            self.get_items(),
            self.get_applied_discount_code(),
            subtotal - discount_amount,
            subtotal,
            discount_amount,
            self.get_last_payment_result(),
        )

    def get_email_sent_to(self) -> Optional[str]:
        return self.email_handler.get_email_sent_to()
