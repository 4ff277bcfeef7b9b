"""Public contract for shopping cart implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from .models import LineItem, Money, PaymentResult


class ShoppingCartService(ABC):
    """Operations every shopping cart exposes, whatever its internal split."""

    # Cart management
    @abstractmethod
    def add_item(self, product_name: str, price: Money, quantity: int) -> None: ...

    @abstractmethod
    def get_items(self) -> list[LineItem]: ...

    # Price calculations
    @abstractmethod
    def calculate_subtotal(self) -> Decimal: ...

    @abstractmethod
    def calculate_discount_amount(self) -> Decimal: ...

    @abstractmethod
    def calculate_total(self) -> Decimal: ...

    # Discounts
    @abstractmethod
    def apply_discount(self, discount_code: str) -> bool: ...

    @abstractmethod
    def get_applied_discount_code(self) -> Optional[str]: ...

    # Orders
    @abstractmethod
    def checkout(self, customer_email: str, payment_method: str): ...

    @abstractmethod
    def get_order_id(self) -> Optional[str]: ...

    @abstractmethod
    def generate_order_id(self) -> str: ...

    # Payment
    @abstractmethod
    def process_payment(self, payment_method: str, amount: Money) -> PaymentResult: ...

    @abstractmethod
    def get_last_payment_result(self) -> Optional[PaymentResult]: ...

    # Email
    @abstractmethod
    def send_order_confirmation_email(self, customer_email: str) -> None: ...

    @abstractmethod
    def get_email_sent_to(self) -> Optional[str]: ...
