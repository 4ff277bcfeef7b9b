"""Runtime settings loaded from the environment.

Environment variables:
    STOREFRONT_PAYMENT_DELAY_MS: simulated payment latency (default 100)
    STOREFRONT_EMAIL_DELAY_MS: simulated email latency (default 50)
    STOREFRONT_TOKEN_EXPIRY_HOURS: verification token lifetime (default 24)
    STOREFRONT_NOTIFY_ON_FAILED_PAYMENT: email even when payment fails (default true)
    STOREFRONT_STRICT_ITEMS: reject negative prices and non-positive quantities (default false)
    STOREFRONT_LOG_LEVEL: debug, info, warning or error (default info)
    STOREFRONT_LOG_FORMAT: json or console (default json)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError

ENV_PREFIX = "STOREFRONT_"

LOG_LEVELS = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "error": 40,
}

LOG_FORMATS = ("json", "console")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    payment_delay_ms: int = 100
    email_delay_ms: int = 50
    token_expiry_hours: int = 24
    notify_on_failed_payment: bool = True
    strict_items: bool = False
    log_level: str = "info"
    log_format: str = "json"

    @property
    def log_level_number(self) -> int:
        return LOG_LEVELS[self.log_level]


def _get_int(environ: Mapping[str, str], name: str, default: int) -> int:
    variable = ENV_PREFIX + name
    raw = environ.get(variable)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(variable, raw, "an integer") from None
    if value < 0:
        raise ConfigError(variable, raw, "a non-negative integer")
    return value


def _get_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    variable = ENV_PREFIX + name
    raw = environ.get(variable)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigError(variable, raw, "a boolean")


def _get_choice(
    environ: Mapping[str, str], name: str, default: str, choices
) -> str:
    variable = ENV_PREFIX + name
    raw = environ.get(variable)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered not in choices:
        raise ConfigError(variable, raw, "one of " + ", ".join(choices))
    return lowered


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    return Settings(
        payment_delay_ms=_get_int(environ, "PAYMENT_DELAY_MS", 100),
        email_delay_ms=_get_int(environ, "EMAIL_DELAY_MS", 50),
        token_expiry_hours=_get_int(environ, "TOKEN_EXPIRY_HOURS", 24),
        notify_on_failed_payment=_get_bool(
            environ, "NOTIFY_ON_FAILED_PAYMENT", True
        ),
        strict_items=_get_bool(environ, "STRICT_ITEMS", False),
        log_level=_get_choice(environ, "LOG_LEVEL", "info", tuple(LOG_LEVELS)),
        log_format=_get_choice(environ, "LOG_FORMAT", "json", LOG_FORMATS),
    )
