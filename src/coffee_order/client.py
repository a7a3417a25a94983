"""
CLI client: starts an order workflow and optionally queries / cancels it.

Usage:
    # Start the sample order (oat latte + tea, HAPPYHOUR):
    python -m coffee_order.client --order-id 123

    # Your own beverages and codes, querying state right after start:
    python -m coffee_order.client --order-id 456 --order-file order.json --promo HAPPYHOUR --promo BOGO --query

    # Start + cancel the order after 1 second:
    python -m coffee_order.client --order-id 789 --cancel-after 1.0
"""

import argparse
import asyncio
import logging
from pathlib import Path

from temporalio.client import Client

# Must match the data_converter used by the worker (see worker.py).
from temporalio.contrib.pydantic import pydantic_data_converter

from coffee_order.app_logging import configure_logging
from coffee_order.config import Settings, get_settings
from coffee_order.demo import load_order_file
from coffee_order.domain.models import OrderRequest
from coffee_order.driver import build_sample_order
from coffee_order.workflows import OrderCoffeeWorkflow

logger = logging.getLogger(__name__)


def build_request(args: argparse.Namespace) -> OrderRequest:
    beverages, codes = build_sample_order()
    if args.order_file is not None:
        beverages = load_order_file(args.order_file)
    if args.promo is not None:
        codes = args.promo
    return OrderRequest(
        order_id=args.order_id,
        beverages=beverages,
        promo_codes=codes,
        author_name=args.author,
    )


async def run_client(args: argparse.Namespace, settings: Settings) -> None:
    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)

    req = build_request(args)
    workflow_id = f"order-{req.order_id}"
    logger.info("Starting workflow %s", workflow_id)

    handle = await client.start_workflow(
        OrderCoffeeWorkflow.run,
        req,
        id=workflow_id,               # unique workflow ID (prevents duplicate orders)
        task_queue=settings.task_queue,
    )

    if args.query:
        status = await handle.query(OrderCoffeeWorkflow.get_status)
        logger.info("Query result: %s", status)

    if args.cancel_after is not None:
        await asyncio.sleep(args.cancel_after)
        logger.info("Sending cancel signal to %s", workflow_id)
        await handle.signal(OrderCoffeeWorkflow.cancel_order)

    result = await handle.result()
    print(result.model_dump_json(indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Place a coffee order via Temporal")
    parser.add_argument("--order-id", required=True, help="Unique order identifier")
    parser.add_argument("--order-file", type=Path, default=None, help="JSON list of beverages (default: sample order)")
    parser.add_argument("--promo", action="append", default=None, help="Promotion code (repeatable)")
    parser.add_argument("--author", default=None, help="Name printed in the receipt header")
    parser.add_argument("--query", action="store_true", help="Query workflow status once after starting")
    parser.add_argument("--cancel-after", type=float, default=None, help="Seconds to wait before sending cancel signal")
    return parser


def main() -> None:
    args = build_parser().parse_args()
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(run_client(args, settings))


if __name__ == "__main__":
    main()
