"""Shared pytest fixtures for storefront tests."""

from datetime import datetime, timezone

import pytest

from storefront.cart import ShoppingCart
from storefront.config import Settings
from storefront.delay import no_delay
from storefront.identity import SequentialIdGenerator
from storefront.registration import UserRegistration


class FakeClock:
    """Clock returning a fixed instant until advanced."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def ids():
    return SequentialIdGenerator()


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def cart(settings, ids):
    return ShoppingCart(settings, id_generator=ids, sleeper=no_delay)


@pytest.fixture
def registration(settings, ids, clock):
    return UserRegistration(settings, id_generator=ids, sleeper=no_delay, clock=clock)
