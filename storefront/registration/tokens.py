"""Verification token issuing and lookup."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog

from ..identity import (
    VERIFICATION_PREFIX,
    VERIFICATION_SUFFIX_LENGTH,
    IdGenerator,
    random_id,
)
from .models import VerificationToken

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenStore:
    """Issues verification tokens and answers whether one is still usable."""

    def __init__(
        self,
        expiry_hours: int = 24,
        id_generator: IdGenerator = random_id,
        clock: Clock = utc_now,
    ) -> None:
        self.expiry_hours = expiry_hours
        self._id_generator = id_generator
        self._clock = clock
        self._tokens: list[VerificationToken] = []
        self._log = structlog.get_logger().bind(component="tokens")

    def issue(self, email: str) -> str:
        token = self._id_generator(VERIFICATION_PREFIX, VERIFICATION_SUFFIX_LENGTH)
        now = self._clock()
        self._tokens.append(
            VerificationToken(
                token=token,
                email=email,
                created_at=now,
                expires_at=now + timedelta(hours=self.expiry_hours),
            )
        )
        self._log.info("generated_verification_token", email=email)
        return token

    def get(self, token: str) -> Optional[VerificationToken]:
        return next((t for t in self._tokens if t.token == token), None)

    def verify(self, token: str, email: str) -> bool:
        """True when ``token`` exists, is unused, unexpired and belongs to ``email``."""
        found = self.get(token)
        if found is None or found.used:
            return False
        if found.is_expired(self._clock()):
            return False
        return found.email.lower() == (email or "").lower()

    def mark_used(self, token: str) -> None:
        found = self.get(token)
        if found is not None:
            found.used = True
