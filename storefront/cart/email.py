"""Order confirmation emails."""

from __future__ import annotations

import time
from collections.abc import Sequence
from decimal import Decimal
from typing import Optional

import structlog

from ..delay import Sleeper, pause
from .models import LineItem, PaymentResult


def format_order_subject(order_id: Optional[str]) -> str:
    return f"Order Confirmation - {order_id}"


def format_order_confirmation(
    order_id: Optional[str],
    items: Sequence[LineItem],
    applied_discount_code: Optional[str],
    subtotal: Decimal,
    discount_amount: Decimal,
    total: Decimal,
    payment_result: Optional[PaymentResult] = None,
) -> str:
    """Render the confirmation body.

    The discount line appears only when a code is applied and the
    transaction line only when ``payment_result`` succeeded.
    """
    lines = []

    lines.append("Thank you for your order!")
    lines.append("")
    lines.append(f"Order ID: {order_id}")
    lines.append("")
    lines.append("Items:")
    for item in items:
        lines.append(f"- {item.product_name} x{item.quantity} - ${item.price:.2f}")

    lines.append("")
    lines.append(f"Subtotal: ${subtotal:.2f}")
    if applied_discount_code is not None:
        lines.append(f"Discount ({applied_discount_code}): -${discount_amount:.2f}")
    lines.append(f"Total: ${total:.2f}")

    if payment_result is not None and payment_result.success:
        lines.append("")
        lines.append(f"Transaction ID: {payment_result.transaction_id}")

    return "\n".join(lines)


class EmailHandler:
    """Sends order confirmations. Sending is logged, never delivered."""

    def __init__(self, sleeper: Sleeper = time.sleep, delay_ms: int = 50) -> None:
        self._sleeper = sleeper
        self._delay_ms = delay_ms
        self._email_sent_to: Optional[str] = None
        self.last_subject: Optional[str] = None
        self.last_body: Optional[str] = None
        self._log = structlog.get_logger().bind(component="email")

    @property
    def email_sent_to(self) -> Optional[str]:
        return self._email_sent_to

    def get_email_sent_to(self) -> Optional[str]:
        return self._email_sent_to

    def send_order_confirmation_email(
        self,
        customer_email: str,
        order_id: Optional[str],
        items: Sequence[LineItem],
        applied_discount_code: Optional[str],
        total: Decimal,
        subtotal: Decimal,
        discount_amount: Decimal,
        payment_result: Optional[PaymentResult] = None,
    ) -> None:
        subject = format_order_subject(order_id)
        body = format_order_confirmation(
            order_id,
            items,
            applied_discount_code,
            subtotal,
            discount_amount,
            total,
            payment_result,
        )

        self._log.info("sending_email", to=customer_email, subject=subject, body=body)

        pause(self._sleeper, self._delay_ms, self._log)

        self.last_subject = subject
        self.last_body = body
        self._email_sent_to = customer_email
        self._log.info("email_sent", to=customer_email)
