"""Simulated latency for stand-in I/O calls."""

from __future__ import annotations

from typing import Callable

import structlog

Sleeper = Callable[[float], None]


def no_delay(seconds: float) -> None:
    """Sleeper that returns immediately."""


def pause(sleeper: Sleeper, milliseconds: int, log: structlog.BoundLogger) -> None:
    """Block for ``milliseconds`` using ``sleeper``.

    An interrupted pause ends early; the caller carries on as if the full
    delay had elapsed.
    """
    if milliseconds <= 0:
        return
    try:
        sleeper(milliseconds / 1000)
    except InterruptedError:
        log.warning("delay_interrupted", milliseconds=milliseconds)
