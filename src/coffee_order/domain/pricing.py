"""
Pricing strategies (Strategy pattern).

Callers hold a `PricingStrategy` (a Protocol) and call `breakdown()`. To add
a new price list, implement the protocol and pass it to `apply_promotions`.

Pricing is pure: no I/O, no randomness, no clock. The order workflow runs it
directly instead of in an activity, so it has to stay deterministic.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol

from coffee_order.domain.models import Beverage, PriceBreakdown
from coffee_order.domain.money import ZERO, round2


class PricingStrategy(Protocol):
    """Interface for pricing a single beverage.

    Any class with a `breakdown(beverage) -> PriceBreakdown` method satisfies
    this protocol (structural subtyping, no explicit inheritance needed).
    """

    def breakdown(self, beverage: Beverage) -> PriceBreakdown: ...


class StandardPricingStrategy:
    """Default pricing: base price by size plus per-add-on charges.

    Examples:
        - Tall latte, oat milk, 2 shots, 1 syrup:  3.00 + 0.60 + 1.50 + 0.30 = 5.40
        - Venti chocolate, 4 shots, 5 syrups, 3 toppings:  4.00 + 3.00 + 1.50 + 0.75 = 9.25
    """

    BASE_PRICES: dict[str, Decimal] = {
        "tall": Decimal("3.00"),
        "grande": Decimal("3.50"),
        "venti": Decimal("4.00"),
    }
    # Null, blank and unknown sizes are all priced as Tall.
    FALLBACK_SIZE: str = "tall"

    SHOT_PRICE: Decimal = Decimal("0.75")
    SYRUP_PRICE: Decimal = Decimal("0.30")
    PLANT_MILK_PRICE: Decimal = Decimal("0.60")  # flat, whichever plant milk
    TOPPING_PRICE: Decimal = Decimal("0.25")

    def base_price(self, size: str | None) -> Decimal:
        key = (size or "").strip().lower()
        return self.BASE_PRICES.get(key, self.BASE_PRICES[self.FALLBACK_SIZE])

    def breakdown(self, beverage: Beverage) -> PriceBreakdown:
        base = self.base_price(beverage.size)
        # Validation rejects negative shots; clamp here for direct callers.
        shots = self.SHOT_PRICE * max(0, beverage.shots)
        syrups = self.SYRUP_PRICE * len(beverage.syrups)
        plant_milk = self.PLANT_MILK_PRICE if (beverage.plant_milk or "").strip() else ZERO
        toppings = self.TOPPING_PRICE * len(beverage.toppings)

        return PriceBreakdown(
            base_price=round2(base),
            shots=round2(shots),
            syrups=round2(syrups),
            plant_milk=round2(plant_milk),
            toppings=round2(toppings),
            # Rounded once over the raw components, not over the rounded ones.
            subtotal=round2(base + shots + syrups + plant_milk + toppings),
        )


_DEFAULT_STRATEGY = StandardPricingStrategy()


def calculate_beverage_subtotal(
    beverage: Beverage, pricing: PricingStrategy | None = None
) -> PriceBreakdown:
    """Price one beverage and return its breakdown."""
    return (pricing or _DEFAULT_STRATEGY).breakdown(beverage)


def calculate_order_subtotal(
    beverages: Iterable[Beverage] | None, pricing: PricingStrategy | None = None
) -> Decimal:
    """Sum of per-item subtotals, rounded to 2 dp. ``None`` prices as 0.00."""
    if beverages is None:
        return ZERO
    total = sum(
        (calculate_beverage_subtotal(b, pricing).subtotal for b in beverages),
        start=ZERO,
    )
    return round2(total)
