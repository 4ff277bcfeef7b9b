"""Order id generation."""

from __future__ import annotations

from typing import Optional

import structlog

from ..identity import ORDER_PREFIX, ORDER_SUFFIX_LENGTH, IdGenerator, random_id


class OrderIdGenerator:
    """Generates order ids and remembers the most recent one."""

    def __init__(self, id_generator: IdGenerator = random_id) -> None:
        self._id_generator = id_generator
        self._order_id: Optional[str] = None
        self._log = structlog.get_logger().bind(component="orders")

    @property
    def order_id(self) -> Optional[str]:
        return self._order_id

    def get_order_id(self) -> Optional[str]:
        return self._order_id

    def generate_order_id(self) -> str:
        self._order_id = self._id_generator(ORDER_PREFIX, ORDER_SUFFIX_LENGTH)
        self._log.info("generated_order_id", order_id=self._order_id)
        return self._order_id
