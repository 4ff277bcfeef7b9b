"""Public contract for user registration implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .models import RegistrationResult, User, VerificationToken


class UserRegistrationService(ABC):
    # Registration
    @abstractmethod
    def register_user(self, email: str, password: str) -> RegistrationResult: ...

    # Validation
    @abstractmethod
    def is_valid_email(self, email: Optional[str]) -> bool: ...

    @abstractmethod
    def is_valid_password(self, password: Optional[str]) -> bool: ...

    # Users
    @abstractmethod
    def user_exists(self, email: str) -> bool: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def get_all_users(self) -> list[User]: ...

    @abstractmethod
    def initialize_user_profile(self, user: User) -> None: ...

    # Passwords
    @abstractmethod
    def hash_password(self, password: str) -> str: ...

    @abstractmethod
    def verify_password(self, password: str, hashed_password: str) -> bool: ...

    # Tokens
    @abstractmethod
    def generate_verification_token(self, email: str) -> str: ...

    @abstractmethod
    def get_verification_token(self, token: str) -> Optional[VerificationToken]: ...

    @abstractmethod
    def verify_token(self, token: str, email: str) -> bool: ...

    # Activation
    @abstractmethod
    def activate_account(self, email: str, token: str) -> bool: ...

    @abstractmethod
    def is_account_activated(self, email: str) -> bool: ...

    # Email
    @abstractmethod
    def send_verification_email(self, email: str, token: str) -> None: ...

    @abstractmethod
    def send_welcome_email(self, email: str) -> None: ...

    @abstractmethod
    def get_last_verification_email_sent_to(self) -> Optional[str]: ...

    @abstractmethod
    def get_last_welcome_email_sent_to(self) -> Optional[str]: ...

    # Audit
    @abstractmethod
    def get_registration_logs(self) -> list[str]: ...
