"""Discount code catalog and resolution."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

import structlog

from .models import ZERO, Discount

DEFAULT_DISCOUNTS = (
    Discount("SUMMER10", Decimal("10")),
    Discount("WELCOME20", Decimal("20")),
    Discount("VIP30", Decimal("30")),
)


class DiscountService:
    """Holds the discount catalog and the currently applied code.

    Codes match exactly and case-sensitively. Applying an unknown code leaves
    the active code untouched.
    """

    def __init__(self, discounts: Iterable[Discount] = DEFAULT_DISCOUNTS) -> None:
        self._discounts = {d.code: d for d in discounts}
        self._applied_code: Optional[str] = None
        self._log = structlog.get_logger().bind(component="discounts")

    @property
    def available_discounts(self) -> Mapping[str, Discount]:
        return MappingProxyType(self._discounts)

    @property
    def applied_discount_code(self) -> Optional[str]:
        return self._applied_code

    def get_applied_discount_code(self) -> Optional[str]:
        return self._applied_code

    def get_discount(self, code: Optional[str]) -> Optional[Discount]:
        if code is None:
            return None
        return self._discounts.get(code)

    def apply_discount(self, code: str) -> bool:
        discount = self.get_discount(code)
        if discount is None:
            self._log.warning("invalid_discount_code", code=code)
            return False

        self._applied_code = code
        self._log.info(
            "applied_discount", code=code, percentage=str(discount.percentage)
        )
        return True

    def calculate_discount_amount(self, subtotal: Decimal) -> Decimal:
        """Return the applied discount for ``subtotal``, or 0 with no code applied."""
        discount = self.get_discount(self._applied_code)
        if discount is None:
            return ZERO
        return subtotal * discount.percentage / Decimal(100)
