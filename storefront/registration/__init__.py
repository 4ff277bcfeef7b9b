"""User registration flow."""

from .email import RegistrationEmailer, format_verification_email, format_welcome_email
from .hashing import hash_password, string_hash, verify_password
from .models import RegistrationResult, User, VerificationToken
from .registration import UserRegistration
from .service import UserRegistrationService
from .tokens import TokenStore
from .validation import is_valid_email, is_valid_password

__all__ = [
    "UserRegistration",
    "UserRegistrationService",
    "TokenStore",
    "RegistrationEmailer",
    "format_verification_email",
    "format_welcome_email",
    "hash_password",
    "string_hash",
    "verify_password",
    "is_valid_email",
    "is_valid_password",
    "RegistrationResult",
    "User",
    "VerificationToken",
]
