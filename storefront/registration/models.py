"""Registration value types."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class User:
    email: str
    password_hash: str
    registration_date: datetime
    activated: bool = False
    profile_language: str = ""
    profile_timezone: str = ""
    email_notifications_enabled: bool = False


@dataclass
class VerificationToken:
    token: str
    email: str
    created_at: datetime
    expires_at: datetime
    used: bool = False

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at


@dataclass(frozen=True)
class RegistrationResult:
    success: bool
    message: str
    email: Optional[str]
    verification_token: Optional[str] = None
