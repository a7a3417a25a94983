"""
Thin facade over the receipt pipeline.

Lets a UI, the demo CLI or the Temporal client build an order and get receipt
text without knowing about pricing, promotions or validation.
"""

from collections.abc import Iterable
from datetime import datetime

from coffee_order.domain.models import Beverage
from coffee_order.services.receipt import ReceiptFormatter


def build_receipt(
    beverages: Iterable[Beverage],
    promo_codes: Iterable[str],
    author_name: str,
    created_at: datetime,
) -> str:
    """Return the receipt text for an order. Nothing is printed."""
    return ReceiptFormatter().format(beverages, promo_codes, author_name, created_at)


def build_sample_order() -> tuple[list[Beverage], list[str]]:
    """A small known order: hot oat latte + hot decaf tea, with HAPPYHOUR."""
    latte = Beverage(
        base_drink="Latte",
        size="Tall",
        temp="Hot",
        plant_milk="Oat",
        shots=2,
        syrups=("Vanilla",),
    )
    tea = Beverage(
        base_drink="Tea",
        size="Grande",
        temp="Hot",
        is_decaf=True,
    )
    return [latte, tea], ["HAPPYHOUR"]
