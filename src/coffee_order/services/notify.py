"""
Notification service facade.

Simulates delivering a rendered receipt to the customer (e.g. via email or
push notification). A real integration would replace the sleep with an API
call.
"""

import asyncio
import logging

from coffee_order.domain.models import NotifyInput

logger = logging.getLogger(__name__)


class NotificationService:
    """Simulates sending a receipt to the customer."""

    def __init__(self, latency_seconds: float = 0.3) -> None:
        self.latency_seconds = latency_seconds

    async def send_receipt(self, input: NotifyInput) -> bool:
        logger.info("Sending receipt for order %s (%d chars)", input.order_id, len(input.receipt))
        await asyncio.sleep(self.latency_seconds)  # Simulate network latency
        logger.info("Receipt sent for order %s", input.order_id)
        return True
