"""Verification and welcome emails for new accounts."""

from __future__ import annotations

import time
from typing import Optional

import structlog

from ..delay import Sleeper, pause
from .models import User

VERIFY_URL = "https://example.com/verify"

VERIFICATION_SUBJECT = "Verify Your Account"
WELCOME_SUBJECT = "Welcome to Our Platform!"


def verification_link(email: str, token: str) -> str:
    return f"{VERIFY_URL}?token={token}&email={email}"


def format_verification_email(email: str, token: str, expiry_hours: int) -> str:
    lines = [
        "Hello,",
        "",
        "Thank you for registering with us!",
        "",
        "Please verify your email address by clicking the link below:",
        verification_link(email, token),
        "",
        f"Or use this verification code: {token}",
        "",
        f"This link will expire in {expiry_hours} hours.",
        "",
        "If you did not create an account, please ignore this email.",
        "",
        "Best regards,",
        "The Team",
    ]
    return "\n".join(lines)


def format_welcome_email(user: User) -> str:
    notifications = "Enabled" if user.email_notifications_enabled else "Disabled"
    lines = [
        f"Welcome {user.email}!",
        "",
        "Your account has been successfully activated.",
        "",
        "Your account details:",
        f"- Email: {user.email}",
        f"- Registration Date: {user.registration_date.isoformat()}",
        f"- Language: {user.profile_language}",
        f"- Timezone: {user.profile_timezone}",
        f"- Email Notifications: {notifications}",
        "",
        "Thank you for joining us!",
        "",
        "Best regards,",
        "The Team",
    ]
    return "\n".join(lines)


class RegistrationEmailer:
    """Logs account emails and remembers the last recipient of each kind."""

    def __init__(self, sleeper: Sleeper = time.sleep, delay_ms: int = 50) -> None:
        self._sleeper = sleeper
        self._delay_ms = delay_ms
        self.last_verification_email_sent_to: Optional[str] = None
        self.last_welcome_email_sent_to: Optional[str] = None
        self._log = structlog.get_logger().bind(component="registration_email")

    def _send(self, to: str, subject: str, body: str) -> None:
        self._log.info("sending_email", to=to, subject=subject, body=body)
        pause(self._sleeper, self._delay_ms, self._log)
        self._log.info("email_sent", to=to, subject=subject)

    def send_verification(self, email: str, token: str, expiry_hours: int) -> None:
        body = format_verification_email(email, token, expiry_hours)
        self._send(email, VERIFICATION_SUBJECT, body)
        self.last_verification_email_sent_to = email

    def send_welcome(self, user: User) -> None:
        self._send(user.email, WELCOME_SUBJECT, format_welcome_email(user))
        self.last_welcome_email_sent_to = user.email
