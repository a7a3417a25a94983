"""Money helpers: receipt-style rounding and display."""

from decimal import ROUND_HALF_UP, Decimal

ZERO = Decimal("0.00")
_CENT = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    """Round to 2 dp, halves away from zero (0.005 -> 0.01, -0.005 -> -0.01)."""
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.56``."""
    return f"${round2(value):,.2f}"
