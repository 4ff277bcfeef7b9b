"""Tests for the payment simulator."""

import re
from decimal import Decimal
from unittest.mock import Mock

import pytest

from storefront.cart import PaymentProcessor, PaymentResult
from storefront.delay import no_delay


class TestProcessPayment:
    def test_positive_amount_succeeds(self, ids) -> None:
        processor = PaymentProcessor(id_generator=ids, sleeper=no_delay)
        result = processor.process_payment("CREDIT_CARD", Decimal("10.00"))
        assert result == PaymentResult(True, "TXN-00000001", "Payment successful")

    def test_random_transaction_id_format(self) -> None:
        processor = PaymentProcessor(sleeper=no_delay)
        result = processor.process_payment("PAYPAL", Decimal("1"))
        assert re.fullmatch(r"TXN-[A-Z0-9]{8}", result.transaction_id)

    @pytest.mark.parametrize("amount", ["0", "-0.01", "-100"])
    def test_non_positive_amount_fails(self, amount) -> None:
        sleeper = Mock()
        processor = PaymentProcessor(sleeper=sleeper)
        result = processor.process_payment("CREDIT_CARD", Decimal(amount))
        assert result.success is False
        assert result.transaction_id is None
        assert result.message == "Invalid amount"
        sleeper.assert_not_called()

    @pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_amount_fails(self, amount) -> None:
        """Amounts that cannot be compared are rejected, not raised."""
        processor = PaymentProcessor(sleeper=no_delay)
        result = processor.process_payment("CREDIT_CARD", Decimal(amount))
        assert result == PaymentResult(False, None, "Invalid amount")
        assert processor.get_last_payment_result() is result

    def test_method_is_not_validated(self) -> None:
        processor = PaymentProcessor(sleeper=no_delay)
        assert processor.process_payment("", Decimal("5")).success is True

    def test_last_result_tracks_every_outcome(self) -> None:
        processor = PaymentProcessor(sleeper=no_delay)
        assert processor.get_last_payment_result() is None

        ok = processor.process_payment("CREDIT_CARD", Decimal("5"))
        assert processor.last_payment_result is ok

        failed = processor.process_payment("CREDIT_CARD", Decimal("0"))
        assert processor.get_last_payment_result() is failed

    def test_simulated_delay(self) -> None:
        sleeper = Mock()
        processor = PaymentProcessor(sleeper=sleeper, delay_ms=100)
        processor.process_payment("CREDIT_CARD", Decimal("5"))
        sleeper.assert_called_once_with(0.1)

    def test_interrupted_delay_still_completes(self) -> None:
        processor = PaymentProcessor(sleeper=Mock(side_effect=InterruptedError()))
        result = processor.process_payment("CREDIT_CARD", Decimal("5"))
        assert result.success is True
        assert processor.get_last_payment_result() is result
