"""
Receipt service.

Builds the plain-text receipt for an order. The output is a pure function of
its arguments: the creation time is passed in rather than read from the
clock, so the same order always renders to the same text.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from coffee_order.domain.models import Beverage
from coffee_order.domain.money import format_money
from coffee_order.domain.pricing import PricingStrategy, calculate_beverage_subtotal, calculate_order_subtotal
from coffee_order.domain.promotions import apply_promotions
from coffee_order.domain.validation import validate

logger = logging.getLogger(__name__)

TITLE = "=== Coffee Shop Receipt ==="


class ReceiptFormatter:
    """Renders an order (beverages + promo codes) as receipt text.

    Layout, top to bottom: header, one line per item with its warnings
    indented below, the discount summary (only when a promotion applied),
    and the order totals.
    """

    def __init__(self, pricing: PricingStrategy | None = None) -> None:
        self.pricing = pricing

    def format(
        self,
        beverages: Iterable[Beverage] | None,
        promo_codes: Iterable[str] | None,
        author_name: str,
        created_at: datetime,
    ) -> str:
        items = list(beverages or [])
        codes = list(promo_codes or [])

        originals = [calculate_beverage_subtotal(b, self.pricing).subtotal for b in items]
        promo = apply_promotions(items, codes, self.pricing)
        subtotal = calculate_order_subtotal(items, self.pricing)

        lines = [
            TITLE,
            f"Author: {author_name}",
            f"Created: {created_at:%Y-%m-%d %H:%M} UTC",
            "",
            "Items:",
        ]
        for number, (bev, original, totals) in enumerate(zip(items, originals, promo.items), start=1):
            lines.append(
                f"{number}) {bev.base_drink or ''} {bev.size or ''} {bev.temp or ''} - "
                f"Original: {format_money(original)} | "
                f"Discounts: {format_money(totals.discount)} | "
                f"Final: {format_money(totals.final)}"
            )
            lines.extend(f"   ! {warning}" for warning in validate(bev).warnings)
        lines.append("")

        if promo.lines:
            lines.append("Discounts:")
            lines.extend(f" - {dl.reason}: {format_money(dl.amount)}" for dl in promo.lines)
            lines.append("")

        lines.append(f"Subtotal (before promos): {format_money(subtotal)}")
        lines.append(f"Total Discounts:           {format_money(promo.total_discount)}")
        lines.append(f"Total Due:                 {format_money(promo.final_order_total)}")

        logger.debug("Rendered receipt with %d item(s) for %s", len(items), author_name)
        return "\n".join(lines)
