"""Tests for per-beverage and order pricing."""

from decimal import Decimal

import pytest

from coffee_order.domain.models import Beverage, PriceBreakdown
from coffee_order.domain.money import format_money, round2
from coffee_order.domain.pricing import (
    StandardPricingStrategy,
    calculate_beverage_subtotal,
    calculate_order_subtotal,
)
from tests.conftest import BeverageFactory


def test_tall_oat_latte_breakdown(oat_latte: Beverage) -> None:
    bd = calculate_beverage_subtotal(oat_latte)

    assert bd.base_price == Decimal("3.00")
    assert bd.shots == Decimal("1.50")
    assert bd.syrups == Decimal("0.30")
    assert bd.plant_milk == Decimal("0.60")
    assert bd.toppings == Decimal("0.00")
    assert bd.subtotal == Decimal("5.40")


def test_venti_chocolate_with_everything(beverage: BeverageFactory) -> None:
    bev = beverage(
        base_drink="Chocolate",
        size="Venti",
        temp="Iced",
        milk="2%",
        shots=4,
        syrups=["a", "b", "c", "d", "e"],
        toppings=["x", "y", "z"],
    )

    bd = calculate_beverage_subtotal(bev)

    assert bd == PriceBreakdown(
        base_price=Decimal("4.00"),
        shots=Decimal("3.00"),
        syrups=Decimal("1.50"),
        plant_milk=Decimal("0.00"),
        toppings=Decimal("0.75"),
        subtotal=Decimal("9.25"),
    )


def test_grande_plain_is_base_only(grande_tea: Beverage) -> None:
    assert calculate_beverage_subtotal(grande_tea).subtotal == Decimal("3.50")


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        ("Tall", "3.00"),
        ("  grande ", "3.50"),
        ("VENTI", "4.00"),
        ("MegaMega", "3.00"),
        ("", "3.00"),
        ("   ", "3.00"),
        (None, "3.00"),
    ],
)
def test_base_price_by_size(beverage: BeverageFactory, size: str | None, expected: str) -> None:
    bd = calculate_beverage_subtotal(beverage(size=size))
    assert bd.base_price == Decimal(expected)
    assert bd.subtotal == Decimal(expected)


@pytest.mark.parametrize(("shots", "expected"), [(0, "0.00"), (1, "0.75"), (3, "2.25"), (7, "5.25"), (-2, "0.00")])
def test_shots_cost(beverage: BeverageFactory, shots: int, expected: str) -> None:
    assert calculate_beverage_subtotal(beverage(shots=shots)).shots == Decimal(expected)


def test_plant_milk_surcharge_is_flat_and_ignores_dairy(beverage: BeverageFactory) -> None:
    assert calculate_beverage_subtotal(beverage(plant_milk="Almond")).plant_milk == Decimal("0.60")
    assert calculate_beverage_subtotal(beverage(plant_milk="Soy")).plant_milk == Decimal("0.60")
    assert calculate_beverage_subtotal(beverage(plant_milk="  ")).plant_milk == Decimal("0.00")
    assert calculate_beverage_subtotal(beverage(milk="Whole")).plant_milk == Decimal("0.00")


def test_null_lists_price_as_empty(beverage: BeverageFactory) -> None:
    bd = calculate_beverage_subtotal(beverage(syrups=None, toppings=None))
    assert bd.syrups == Decimal("0.00")
    assert bd.toppings == Decimal("0.00")


def test_order_subtotal_sums_items(oat_latte: Beverage, grande_tea: Beverage) -> None:
    assert calculate_order_subtotal([oat_latte, grande_tea]) == Decimal("8.90")
    assert calculate_order_subtotal([grande_tea, oat_latte]) == Decimal("8.90")


def test_order_subtotal_empty_and_none() -> None:
    assert calculate_order_subtotal([]) == Decimal("0.00")
    assert calculate_order_subtotal(None) == Decimal("0.00")


def test_custom_strategy_is_used(beverage: BeverageFactory) -> None:
    class HalfPriceShots(StandardPricingStrategy):
        SHOT_PRICE = Decimal("0.375")

    bd = calculate_beverage_subtotal(beverage(shots=1), HalfPriceShots())

    assert bd.shots == Decimal("0.38")
    # Subtotal rounds the raw sum: 3.00 + 0.375 = 3.375 -> 3.38
    assert bd.subtotal == Decimal("3.38")


def test_round2_is_half_away_from_zero() -> None:
    assert round2(Decimal("0.005")) == Decimal("0.01")
    assert round2(Decimal("0.015")) == Decimal("0.02")
    assert round2(Decimal("-0.005")) == Decimal("-0.01")
    assert round2(Decimal("1.004")) == Decimal("1.00")


def test_format_money() -> None:
    assert format_money(Decimal("5.4")) == "$5.40"
    assert format_money(Decimal("1234.567")) == "$1,234.57"
    assert format_money(Decimal("0")) == "$0.00"
