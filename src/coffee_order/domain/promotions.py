"""
Promotion engine: HAPPYHOUR then BOGO.

Stacking order is fixed and load-bearing:
  1. HAPPYHOUR takes 20% off every Hot drink, per item.
  2. BOGO frees one item, chosen from the post-HAPPYHOUR prices.

Running BOGO first would pick a different item and change the totals.
Like pricing, this module is pure and safe to call from inside a workflow.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal
from enum import Enum

from coffee_order.domain.models import (
    Beverage,
    DiscountLine,
    PriceBreakdown,
    PromotionItemTotal,
    PromotionResult,
)
from coffee_order.domain.money import ZERO, round2
from coffee_order.domain.pricing import PricingStrategy, calculate_beverage_subtotal

logger = logging.getLogger(__name__)


class PromoCode(str, Enum):
    """Promotion codes the engine understands. Anything else is ignored."""

    HAPPYHOUR = "HAPPYHOUR"
    BOGO = "BOGO"


HAPPY_HOUR_RATE = Decimal("0.20")
HAPPY_HOUR_REASON = "HAPPYHOUR: 20% off Hot drinks"
BOGO_REASON = "BOGO: free item (once per order)"


def normalize_codes(promo_codes: Iterable[str | None] | None) -> frozenset[str]:
    """Trim and upper-case codes, dropping blanks. Duplicates collapse."""
    if promo_codes is None:
        return frozenset()
    return frozenset(code.strip().upper() for code in promo_codes if code and code.strip())


def is_hot(temp: str | None) -> bool:
    """Only an exact (case-insensitive) "Hot" counts; "ExtraHot" does not."""
    return temp is not None and temp.lower() == "hot"


def apply_promotions(
    beverages: Iterable[Beverage] | None,
    promo_codes: Iterable[str | None] | None,
    pricing: PricingStrategy | None = None,
) -> PromotionResult:
    """Apply promotion codes to an order.

    Returns one `PromotionItemTotal` per beverage in input order, the order
    totals, and a summary `DiscountLine` for every promotion that took money
    off. Never raises for empty input or unknown codes.
    """
    codes = normalize_codes(promo_codes)
    drinks = list(beverages or [])
    breakdowns = [calculate_beverage_subtotal(b, pricing) for b in drinks]
    items = [PromotionItemTotal(original=bd.subtotal) for bd in breakdowns]
    lines: list[DiscountLine] = []

    if PromoCode.HAPPYHOUR.value in codes:
        _apply_happy_hour(drinks, breakdowns, items, lines)

    if PromoCode.BOGO.value in codes and len(items) >= 2:
        _apply_bogo(items, lines)

    total_discount = round2(sum((it.discount for it in items), start=ZERO))
    final_order_total = round2(sum((it.final for it in items), start=ZERO))
    logger.debug(
        "Promotions %s on %d item(s): discount=%s total=%s",
        sorted(codes),
        len(items),
        total_discount,
        final_order_total,
    )
    return PromotionResult(
        items=items,
        total_discount=total_discount,
        final_order_total=final_order_total,
        lines=lines,
    )


def _happy_hour_discount(subtotal: Decimal) -> Decimal:
    return round2(subtotal * HAPPY_HOUR_RATE)


def _apply_happy_hour(
    drinks: list[Beverage],
    breakdowns: list[PriceBreakdown],
    items: list[PromotionItemTotal],
    lines: list[DiscountLine],
) -> None:
    for drink, item in zip(drinks, items):
        if not is_hot(drink.temp):
            continue
        discount = _happy_hour_discount(item.original)
        if discount > 0:
            item.discount = round2(item.discount + discount)

    # Summed from the breakdowns, so the line reflects HAPPYHOUR alone.
    amount = round2(
        sum(
            (
                _happy_hour_discount(bd.subtotal)
                for drink, bd in zip(drinks, breakdowns)
                if is_hot(drink.temp)
            ),
            start=ZERO,
        )
    )
    if amount > 0:
        lines.append(DiscountLine(reason=HAPPY_HOUR_REASON, amount=amount))


def _apply_bogo(items: list[PromotionItemTotal], lines: list[DiscountLine]) -> None:
    effective = [it.final for it in items]
    # Price descending, input index ascending on ties.
    ranked = sorted(range(len(effective)), key=lambda idx: (-effective[idx], idx))

    # Of the top two, the second-ranked is the cheaper one, or the later one on a tie.
    free_idx = ranked[1]
    amount = round2(effective[free_idx])
    if amount > 0:
        items[free_idx].discount = round2(items[free_idx].discount + amount)
        lines.append(DiscountLine(reason=BOGO_REASON, amount=amount))
