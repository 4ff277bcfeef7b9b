"""Prefixed identifier generation.

Order ids, payment transaction ids and verification tokens all share one
shape: a fixed human-readable prefix followed by an uppercase random suffix.
Components take an ``IdGenerator`` so tests can substitute deterministic ids.
"""

from __future__ import annotations

import uuid
from typing import Callable

ORDER_PREFIX = "ORD-"
TRANSACTION_PREFIX = "TXN-"
VERIFICATION_PREFIX = "VERIFY-"

ORDER_SUFFIX_LENGTH = 8
TRANSACTION_SUFFIX_LENGTH = 8
VERIFICATION_SUFFIX_LENGTH = 16

IdGenerator = Callable[[str, int], str]


def random_id(prefix: str, length: int) -> str:
    """Return ``prefix`` plus ``length`` uppercase hex characters of a UUID4."""
    if not 0 < length <= 32:
        raise ValueError(f"suffix length must be 1-32, got {length}")
    return prefix + uuid.uuid4().hex[:length].upper()


class SequentialIdGenerator:
    """Deterministic ``IdGenerator`` numbering ids per prefix.

    ``SequentialIdGenerator()("ORD-", 8)`` yields ``ORD-00000001``, then
    ``ORD-00000002`` and so on.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}

    def __call__(self, prefix: str, length: int) -> str:
        count = self._counters.get(prefix, 0) + 1
        self._counters[prefix] = count
        return f"{prefix}{count:0{length}d}"

    def issued(self, prefix: str) -> int:
        """Return how many ids were generated for ``prefix``."""
        return self._counters.get(prefix, 0)
