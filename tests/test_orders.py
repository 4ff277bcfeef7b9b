"""Tests for order id generation."""

import re

from storefront.cart import OrderIdGenerator


class TestOrderIdGenerator:
    def test_format(self) -> None:
        order_id = OrderIdGenerator().generate_order_id()
        assert re.fullmatch(r"ORD-[A-Z0-9]{8}", order_id)

    def test_unset_before_generation(self) -> None:
        assert OrderIdGenerator().get_order_id() is None

    def test_each_call_overwrites(self, ids) -> None:
        generator = OrderIdGenerator(id_generator=ids)
        assert generator.generate_order_id() == "ORD-00000001"
        assert generator.generate_order_id() == "ORD-00000002"
        assert generator.get_order_id() == "ORD-00000002"
        assert generator.order_id == "ORD-00000002"

    def test_random_ids_do_not_collide(self) -> None:
        generator = OrderIdGenerator()
        assert generator.generate_order_id() != generator.generate_order_id()
