"""
Temporal activities: thin wrappers delegating to the service layer.

An **activity** is a single unit of work in a Temporal workflow. Activities are
where side-effects happen; if one raises, Temporal retries it according to the
RetryPolicy configured in the workflow.

Each activity accepts a single Pydantic model as input, serialized to JSON by
the pydantic_data_converter when the task is dispatched.
"""

import logging

from temporalio import activity

from coffee_order.config import get_settings
from coffee_order.domain.models import NotifyInput, ReceiptInput
from coffee_order.services.factory import ServiceFactory

logger = logging.getLogger(__name__)


@activity.defn
async def render_receipt(input: ReceiptInput) -> str:
    """Render the receipt text via ReceiptFormatter.

    An order without an author is stamped with the configured receipt author.
    """
    logger.info("Activity render_receipt started for order %s", input.order_id)
    author_name = input.author_name or get_settings().receipt_author
    receipt = ServiceFactory.get_receipt_formatter().format(
        input.beverages,
        input.promo_codes,
        author_name,
        input.created_at,
    )
    logger.info("Activity render_receipt completed for order %s", input.order_id)
    return receipt


@activity.defn
async def send_receipt(input: NotifyInput) -> bool:
    """Deliver the rendered receipt via NotificationService."""
    logger.info("Activity send_receipt started for order %s", input.order_id)
    result = await ServiceFactory.get_notification_service().send_receipt(input)
    logger.info("Activity send_receipt completed for order %s", input.order_id)
    return result
