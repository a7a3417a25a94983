"""Label a beverage as caffeinated/decaf, dairy-free, vegan-friendly, kid-safe."""

from coffee_order.domain.models import Beverage, BeverageLabels


def classify(beverage: Beverage) -> BeverageLabels:
    has_shots = beverage.shots > 0
    is_dairy_free = not (beverage.milk or "").strip()
    is_extra_hot = (beverage.temp or "").lower() == "extrahot"

    return BeverageLabels(
        is_decaf=beverage.is_decaf,
        is_caffeinated=has_shots and not beverage.is_decaf,
        is_dairy_free=is_dairy_free,
        # Toppings like honey are not modelled, so vegan == dairy-free.
        is_vegan_friendly=is_dairy_free,
        is_kid_safe=(beverage.is_decaf or not has_shots) and not is_extra_hot,
    )
