"""Shared test fixtures."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from coffee_order.domain.models import Beverage
from coffee_order.services.factory import ServiceFactory

BeverageFactory = Callable[..., Beverage]


def make_beverage(**overrides: object) -> Beverage:
    """Plain hot Tall latte with no add-ons (3.00), overridable per field."""
    fields: dict[str, object] = {
        "base_drink": "Latte",
        "size": "Tall",
        "temp": "Hot",
    }
    fields.update(overrides)
    return Beverage(**fields)


@pytest.fixture
def beverage() -> BeverageFactory:
    return make_beverage


@pytest.fixture
def oat_latte() -> Beverage:
    """Tall hot oat latte, 2 shots, 1 syrup: 5.40."""
    return make_beverage(plant_milk="Oat", shots=2, syrups=["Vanilla"])


@pytest.fixture
def grande_tea() -> Beverage:
    """Grande hot decaf tea, no add-ons: 3.50."""
    return make_beverage(base_drink="Tea", size="Grande", is_decaf=True)


@pytest.fixture
def created_at() -> datetime:
    return datetime(2025, 9, 26, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def reset_services(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COFFEE_ORDER_NOTIFY_LATENCY_SECONDS", "0")
    ServiceFactory.reset()
    logging.getLogger("coffee_order").handlers.clear()
