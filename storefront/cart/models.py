"""Checkout value types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

Money = Union[Decimal, int, float, str]

ZERO = Decimal("0")


def to_decimal(value: Money) -> Decimal:
    """Convert a price to ``Decimal``; floats go through ``str`` to keep 999.99 exact."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class LineItem:
    product_name: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class Discount:
    code: str
    percentage: Decimal


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a simulated payment. ``transaction_id`` is set iff ``success``."""

    success: bool
    transaction_id: Optional[str]
    message: str


class CheckoutStatus(Enum):
    BUILDING = "building"
    COMPLETED = "completed"
    FAILED = "failed"
