"""Simulated payment processing."""

from __future__ import annotations

import time
from decimal import Decimal
from typing import Optional

import structlog

from ..delay import Sleeper, pause
from ..errors import errmsg
from ..identity import (
    TRANSACTION_PREFIX,
    TRANSACTION_SUFFIX_LENGTH,
    IdGenerator,
    random_id,
)
from .models import PaymentResult


class PaymentProcessor:
    """Stand-in for a payment gateway.

    Any positive amount succeeds after a short simulated delay; a zero or
    negative amount fails immediately. The payment method is not validated.
    Every result, successful or not, becomes the last payment result.
    """

    def __init__(
        self,
        id_generator: IdGenerator = random_id,
        sleeper: Sleeper = time.sleep,
        delay_ms: int = 100,
    ) -> None:
        self._id_generator = id_generator
        self._sleeper = sleeper
        self._delay_ms = delay_ms
        self._last_result: Optional[PaymentResult] = None
        self._log = structlog.get_logger().bind(component="payment")

    @property
    def last_payment_result(self) -> Optional[PaymentResult]:
        return self._last_result

    def get_last_payment_result(self) -> Optional[PaymentResult]:
        return self._last_result

    def process_payment(self, payment_method: str, amount: Decimal) -> PaymentResult:
        if not amount.is_finite() or amount <= 0:
            self._log.warning(
                "payment_rejected", method=payment_method, amount=str(amount)
            )
            self._last_result = PaymentResult(False, None, errmsg.INVALID_AMOUNT)
            return self._last_result

        transaction_id = self._id_generator(
            TRANSACTION_PREFIX, TRANSACTION_SUFFIX_LENGTH
        )
        self._log.info("processing_payment", method=payment_method, amount=str(amount))

        pause(self._sleeper, self._delay_ms, self._log)

        self._last_result = PaymentResult(
            True, transaction_id, errmsg.PAYMENT_SUCCESSFUL
        )
        self._log.info("payment_processed", transaction_id=transaction_id)
        return self._last_result
