"""In-memory user registration.

register_user:   validate email -> reject duplicates -> validate password
                 -> hash -> create user with default profile -> issue token
                 -> send verification email
activate_account: verify token -> mark user activated -> consume token
                 -> send welcome email

Failures come back as ``RegistrationResult`` or ``False``; nothing is raised.
"""

from __future__ import annotations

import time
from typing import Optional

import structlog

from ..config import Settings
from ..delay import Sleeper
from ..errors import errmsg
from ..identity import IdGenerator, random_id
from . import hashing, validation
from .email import RegistrationEmailer
from .models import RegistrationResult, User, VerificationToken
from .service import UserRegistrationService
from .tokens import Clock, TokenStore, utc_now

DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEZONE = "UTC"


class UserRegistration(UserRegistrationService):
    """Registers, verifies and activates users held in memory."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        tokens: Optional[TokenStore] = None,
        emailer: Optional[RegistrationEmailer] = None,
        id_generator: IdGenerator = random_id,
        sleeper: Sleeper = time.sleep,
        clock: Clock = utc_now,
    ) -> None:
        self.settings = settings or Settings()
        self._clock = clock
        self._users: list[User] = []
        self._registration_logs: list[str] = []
        self.tokens = tokens or TokenStore(
            expiry_hours=self.settings.token_expiry_hours,
            id_generator=id_generator,
            clock=clock,
        )
        self.emailer = emailer or RegistrationEmailer(
            sleeper=sleeper, delay_ms=self.settings.email_delay_ms
        )
        self._log = structlog.get_logger().bind(component="registration")

    def _log_event(self, event: str) -> None:
        entry = f"[{self._clock().isoformat()}] {event}"
        self._registration_logs.append(entry)
        self._log.info("registration_event", entry=entry)

    # Registration

    def register_user(self, email: str, password: str) -> RegistrationResult:
        self._log_event(f"Registration attempt for email: {email}")

        if not self.is_valid_email(email):
            self._log_event("Registration failed: Invalid email format")
            return RegistrationResult(False, errmsg.INVALID_EMAIL, email)

        if self.user_exists(email):
            self._log_event("Registration failed: Email already exists")
            return RegistrationResult(False, errmsg.EMAIL_REGISTERED, email)

        if not self.is_valid_password(password):
            self._log_event("Registration failed: Password does not meet requirements")
            return RegistrationResult(False, errmsg.WEAK_PASSWORD, email)

        user = User(
            email=email,
            password_hash=self.hash_password(password),
            registration_date=self._clock(),
        )
        self.initialize_user_profile(user)
        self._users.append(user)

        token = self.generate_verification_token(email)
        self.send_verification_email(email, token)

        self._log_event(f"User registered successfully: {email}")
        return RegistrationResult(True, errmsg.REGISTRATION_SUCCESSFUL, email, token)

    # Validation

    def is_valid_email(self, email: Optional[str]) -> bool:
        return validation.is_valid_email(email)

    def is_valid_password(self, password: Optional[str]) -> bool:
        return validation.is_valid_password(password)

    # Users

    def user_exists(self, email: str) -> bool:
        return self.get_user_by_email(email) is not None

    def get_user_by_email(self, email: str) -> Optional[User]:
        wanted = (email or "").lower()
        return next((u for u in self._users if u.email.lower() == wanted), None)

    def get_all_users(self) -> list[User]:
        return list(self._users)

    def initialize_user_profile(self, user: User) -> None:
        user.profile_language = DEFAULT_LANGUAGE
        user.profile_timezone = DEFAULT_TIMEZONE
        user.email_notifications_enabled = True
        self._log.info("initialized_profile", email=user.email)

    # Passwords

    def hash_password(self, password: str) -> str:
        return hashing.hash_password(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return hashing.verify_password(password, hashed_password)

    # Tokens

    def generate_verification_token(self, email: str) -> str:
        return self.tokens.issue(email)

    def get_verification_token(self, token: str) -> Optional[VerificationToken]:
        return self.tokens.get(token)

    def verify_token(self, token: str, email: str) -> bool:
        return self.tokens.verify(token, email)

    # Activation

    def activate_account(self, email: str, token: str) -> bool:
        self._log_event(f"Account activation attempt for: {email}")

        if not self.verify_token(token, email):
            self._log_event("Account activation failed: Invalid or expired token")
            return False

        user = self.get_user_by_email(email)
        if user is None:
            self._log_event("Account activation failed: User not found")
            return False

        user.activated = True
        self.tokens.mark_used(token)
        self.send_welcome_email(email)

        self._log_event(f"Account activated successfully: {email}")
        return True

    def is_account_activated(self, email: str) -> bool:
        user = self.get_user_by_email(email)
        return user is not None and user.activated

    # Email

    def send_verification_email(self, email: str, token: str) -> None:
        self.emailer.send_verification(email, token, self.tokens.expiry_hours)

    def send_welcome_email(self, email: str) -> None:
        user = self.get_user_by_email(email)
        if user is None:
            return
        self.emailer.send_welcome(user)

    def get_last_verification_email_sent_to(self) -> Optional[str]:
        return self.emailer.last_verification_email_sent_to

    def get_last_welcome_email_sent_to(self) -> Optional[str]:
        return self.emailer.last_welcome_email_sent_to

    # Audit

    def get_registration_logs(self) -> list[str]:
        return list(self._registration_logs)
