"""
Local demo: prints a receipt without a Temporal server.

Usage:
    # Sample order (oat latte + tea) with HAPPYHOUR:
    python -m coffee_order.demo

    # Your own beverages (JSON list of Beverage objects) and codes:
    python -m coffee_order.demo --order-file order.json --promo HAPPYHOUR --promo BOGO
"""

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path

from pydantic import TypeAdapter

from coffee_order.app_logging import configure_logging
from coffee_order.config import get_settings
from coffee_order.domain.models import Beverage
from coffee_order.driver import build_receipt, build_sample_order

logger = logging.getLogger(__name__)

_BEVERAGE_LIST = TypeAdapter(list[Beverage])


def load_order_file(path: Path) -> list[Beverage]:
    """Parse a JSON file holding a list of beverages."""
    return _BEVERAGE_LIST.validate_json(path.read_bytes())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print a coffee shop receipt")
    parser.add_argument("--author", default=None, help="Name printed in the receipt header")
    parser.add_argument(
        "--promo",
        action="append",
        default=None,
        help="Promotion code (repeatable); defaults to the sample order's codes",
    )
    parser.add_argument("--order-file", type=Path, default=None, help="JSON list of beverages")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    beverages, codes = build_sample_order()
    if args.order_file is not None:
        beverages = load_order_file(args.order_file)
        logger.info("Loaded %d beverage(s) from %s", len(beverages), args.order_file)
    if args.promo is not None:
        codes = args.promo

    receipt = build_receipt(
        beverages,
        codes,
        args.author or settings.receipt_author,
        datetime.now(timezone.utc),
    )
    print(receipt)


if __name__ == "__main__":
    main()
