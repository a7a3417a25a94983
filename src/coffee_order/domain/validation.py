"""Beverage validation: hard errors plus informational warnings.

Validation is independent of pricing. An invalid beverage still gets a price;
the receipt only uses the warnings.
"""

from coffee_order.domain.models import Beverage, ValidationResult

MAX_SHOTS = 4
MAX_SYRUPS = 5
ALLOWED_TEMPS = {"hot", "iced", "extrahot"}
TREE_NUT_MILKS = {"almond"}


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate(beverage: Beverage) -> ValidationResult:
    """Check one beverage against the ordering rules."""
    errors: list[str] = []
    warnings: list[str] = []

    if _blank(beverage.base_drink):
        errors.append("A base drink is required.")
    if _blank(beverage.size):
        errors.append("A size selection is required.")
    if _blank(beverage.temp):
        errors.append("Temperature (Hot/Iced) must be selected.")
    elif beverage.temp.strip().lower() not in ALLOWED_TEMPS:
        errors.append("Temperature must be one of Hot/Iced/ExtraHot.")

    # Dairy XOR plant milk
    if not _blank(beverage.milk) and not _blank(beverage.plant_milk):
        errors.append("Milk selection invalid: choose dairy OR plant milk, not both.")

    if not 0 <= beverage.shots <= MAX_SHOTS:
        errors.append(f"Shots must be between 0 and {MAX_SHOTS} inclusive.")
    if len(beverage.syrups) > MAX_SYRUPS or any(_blank(s) for s in beverage.syrups):
        errors.append(f"Syrups must contain 0..{MAX_SYRUPS} non-empty entries.")

    if not _blank(beverage.plant_milk) and beverage.plant_milk.strip().lower() in TREE_NUT_MILKS:
        warnings.append(f"Allergen: contains tree nuts ({beverage.plant_milk.strip().lower()}).")

    if errors:
        return ValidationResult.fail_with_warnings(errors, warnings)
    if warnings:
        return ValidationResult.ok_with_warnings(warnings)
    return ValidationResult.ok()
