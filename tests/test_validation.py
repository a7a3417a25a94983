"""Tests for beverage validation."""

import pytest

from coffee_order.domain.models import Beverage
from coffee_order.domain.validation import validate
from tests.conftest import BeverageFactory


def test_valid_beverage(oat_latte: Beverage) -> None:
    result = validate(oat_latte)

    assert result.is_valid
    assert result.errors == ()
    assert result.warnings == ()


def test_missing_base_drink(beverage: BeverageFactory) -> None:
    result = validate(beverage(base_drink="  "))

    assert not result.is_valid
    assert "base drink" in "|".join(result.errors)


def test_missing_size_and_temp(beverage: BeverageFactory) -> None:
    result = validate(beverage(size=None, temp=""))

    assert not result.is_valid
    assert "A size selection is required." in result.errors
    assert "Temperature (Hot/Iced) must be selected." in result.errors


def test_temperature_outside_allowed_set(beverage: BeverageFactory) -> None:
    result = validate(beverage(temp="Lukewarm"))

    assert not result.is_valid
    assert "Hot/Iced" in "|".join(result.errors)


@pytest.mark.parametrize("temp", ["Hot", "iced", "ExtraHot"])
def test_allowed_temperatures(beverage: BeverageFactory, temp: str) -> None:
    assert validate(beverage(temp=temp)).is_valid


def test_dairy_and_plant_milk_is_invalid(beverage: BeverageFactory) -> None:
    result = validate(beverage(milk="2%", plant_milk="Almond"))

    assert not result.is_valid
    assert "Milk selection invalid" in "|".join(result.errors)
    # The allergen warning still comes back alongside the error.
    assert "tree nuts" in "|".join(result.warnings)


@pytest.mark.parametrize("shots", [-1, 5])
def test_shots_out_of_range(beverage: BeverageFactory, shots: int) -> None:
    result = validate(beverage(shots=shots))

    assert not result.is_valid
    assert "Shots must be between 0 and 4 inclusive." in result.errors


def test_too_many_syrups(beverage: BeverageFactory) -> None:
    result = validate(beverage(syrups=["a"] * 6))

    assert not result.is_valid
    assert "Syrups" in "|".join(result.errors)


def test_blank_syrup_entry(beverage: BeverageFactory) -> None:
    result = validate(beverage(syrups=["Vanilla", "  "]))

    assert not result.is_valid
    assert "Syrups" in "|".join(result.errors)


def test_almond_milk_warns_but_stays_valid(beverage: BeverageFactory) -> None:
    result = validate(beverage(plant_milk=" almond ", shots=1))

    assert result.is_valid
    assert result.warnings == ("Allergen: contains tree nuts (almond).",)


def test_oat_milk_has_no_warning(beverage: BeverageFactory) -> None:
    result = validate(beverage(plant_milk="Oat"))

    assert result.is_valid
    assert result.warnings == ()
