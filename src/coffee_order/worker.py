"""
Temporal worker: polls the order task queue.

The worker registers the workflows and activities it can execute and then
polls the configured task queue until shut down. Several workers can poll the
same queue; Temporal delivers each task to exactly one of them.

Run with:
    python -m coffee_order.worker
"""

import asyncio
import logging

from temporalio.client import Client

# The same data_converter must be used on both the worker AND the client,
# otherwise Pydantic payloads fail to deserialize.
from temporalio.contrib.pydantic import pydantic_data_converter
from temporalio.worker import Worker

from coffee_order.activities import render_receipt, send_receipt
from coffee_order.app_logging import configure_logging
from coffee_order.config import Settings, get_settings
from coffee_order.workflows import OrderCoffeeWorkflow

logger = logging.getLogger(__name__)


async def run_worker(settings: Settings) -> None:
    client = await Client.connect(settings.temporal_address, data_converter=pydantic_data_converter)
    logger.info("Connected to Temporal at %s, starting worker on queue %r", settings.temporal_address, settings.task_queue)

    worker = Worker(
        client,
        task_queue=settings.task_queue,
        workflows=[OrderCoffeeWorkflow],
        activities=[render_receipt, send_receipt],
    )
    await worker.run()


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    asyncio.run(run_worker(settings))


if __name__ == "__main__":
    main()
