"""Shopping cart checkout and user registration flows."""

from .cart import CheckoutStatus, LineItem, PaymentResult, ShoppingCart, ShoppingCartService
from .config import Settings, load_settings
from .errors import ConfigError
from .log import configure_logging
from .registration import RegistrationResult, UserRegistration, UserRegistrationService

__version__ = "0.1.0"

__all__ = [
    "ShoppingCart",
    "ShoppingCartService",
    "CheckoutStatus",
    "LineItem",
    "PaymentResult",
    "UserRegistration",
    "UserRegistrationService",
    "RegistrationResult",
    "Settings",
    "load_settings",
    "ConfigError",
    "configure_logging",
]
