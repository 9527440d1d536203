"""Shared pytest fixtures."""

from datetime import datetime

import pytest

from parlor.models import Flavor, OrderHistory, OrderNumberSequence, Topping

FIXED_NOW = datetime(2024, 7, 14, 15, 30, 45)


@pytest.fixture
def fixed_clock():
    """A clock that always reports the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def history(fixed_clock) -> OrderHistory:
    """A fresh session history with its own order numbering."""
    return OrderHistory(sequence=OrderNumberSequence(), clock=fixed_clock)


@pytest.fixture
def vanilla() -> Flavor:
    return Flavor("Vanilla")


@pytest.fixture
def caramel() -> Topping:
    return Topping("Caramel", 1.5)
