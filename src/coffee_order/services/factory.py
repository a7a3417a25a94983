"""
Simple factory for service singletons.

Activities call `ServiceFactory.get_*()` instead of instantiating services
themselves. Instances are created on first use from `Settings` and cached at
class level; `reset()` drops the cache so tests can start clean.
"""

from coffee_order.config import get_settings
from coffee_order.services.notify import NotificationService
from coffee_order.services.receipt import ReceiptFormatter


class ServiceFactory:
    """Lazily creates and caches service instances (class-level singletons)."""

    _receipt: ReceiptFormatter | None = None
    _notification: NotificationService | None = None

    @classmethod
    def get_receipt_formatter(cls) -> ReceiptFormatter:
        if cls._receipt is None:
            cls._receipt = ReceiptFormatter()
        return cls._receipt

    @classmethod
    def get_notification_service(cls) -> NotificationService:
        if cls._notification is None:
            cls._notification = NotificationService(
                latency_seconds=get_settings().notify_latency_seconds,
            )
        return cls._notification

    @classmethod
    def reset(cls) -> None:
        cls._receipt = None
        cls._notification = None
