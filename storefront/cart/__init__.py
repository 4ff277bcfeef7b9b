"""Shopping cart checkout flow."""

from .cart import ShoppingCart
from .discounts import DEFAULT_DISCOUNTS, DiscountService
from .email import EmailHandler, format_order_confirmation, format_order_subject
from .models import CheckoutStatus, Discount, LineItem, PaymentResult
from .orders import OrderIdGenerator
from .payment import PaymentProcessor
from .service import ShoppingCartService

__all__ = [
    "ShoppingCart",
    "ShoppingCartService",
    "DiscountService",
    "DEFAULT_DISCOUNTS",
    "PaymentProcessor",
    "OrderIdGenerator",
    "EmailHandler",
    "format_order_confirmation",
    "format_order_subject",
    "CheckoutStatus",
    "Discount",
    "LineItem",
    "PaymentResult",
]
