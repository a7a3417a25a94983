"""
Temporal workflow: OrderCoffeeWorkflow.

A Temporal **workflow** is a durable function that orchestrates activities.
The server persists its state at every `await` point, so a crashed worker
resumes from the last checkpoint.

Key constraints inside a workflow:
  - Must be **deterministic**: no I/O, no randomness, no system clock.
    (Use activities for side-effects; use `workflow.now()` for time.)
  - Use `workflow.logger` instead of the stdlib `logging` module.
"""

from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy

# Pydantic and our own modules use constructs the sandbox would flag, so they
# are passed through the sandbox's import interception. They are only used for
# data modelling and deterministic computation.
with workflow.unsafe.imports_passed_through():
    from coffee_order.activities import render_receipt, send_receipt
    from coffee_order.domain.classification import classify
    from coffee_order.domain.models import (
        NotifyInput,
        OrderRequest,
        OrderResult,
        OrderState,
        OrderStatus,
        PromotionResult,
        ReceiptInput,
    )
    from coffee_order.domain.pricing import calculate_order_subtotal
    from coffee_order.domain.promotions import apply_promotions


RETRY_POLICY = RetryPolicy(
    maximum_attempts=5,
    initial_interval=timedelta(seconds=1),
    backoff_coefficient=2.0,
)
ACTIVITY_TIMEOUT = timedelta(seconds=10)


@workflow.defn
class OrderCoffeeWorkflow:
    """Runs one order through pricing, promotions, receipt and delivery.

    Execution flow:
        1. Price the order and apply promotions (deterministic, in-workflow)
        2. render_receipt activity  → ReceiptFormatter
        3. send_receipt activity    → NotificationService

    Supports:
        - **Signal** `cancel_order`: stops the order before the next activity.
        - **Query** `get_status`: read-only snapshot of progress and totals.
    """

    def __init__(self) -> None:
        self.state = OrderState()
        self.request: OrderRequest | None = None
        self.promotions: PromotionResult | None = None
        self.receipt: str | None = None

    # ── Signal ────────────────────────────────────────────────────

    @workflow.signal
    async def cancel_order(self) -> None:
        self.state.cancelled = True

    # ── Query ─────────────────────────────────────────────────────

    @workflow.query
    def get_status(self) -> dict:
        return {
            "order_id": self.request.order_id if self.request else None,
            "cancelled": self.state.cancelled,
            "priced": self.state.priced,
            "receipt_rendered": self.state.receipt_rendered,
            "receipt_sent": self.state.receipt_sent,
            "total_due": str(self.promotions.final_order_total) if self.promotions else None,
        }

    # ── Helpers ──────────────────────────────────────────────────

    def _result(self, status: OrderStatus) -> OrderResult:
        """Build an OrderResult snapshot from current state."""
        result = OrderResult(
            order_id=self.request.order_id if self.request else "",
            status=status,
            receipt=self.receipt,
            receipt_sent=self.state.receipt_sent,
        )
        if self.request is not None:
            result.labels = [classify(b) for b in self.request.beverages]
        if self.request is not None and self.promotions is not None:
            result.subtotal = calculate_order_subtotal(self.request.beverages)
            result.total_discount = self.promotions.total_discount
            result.total_due = self.promotions.final_order_total
        return result

    # ── Run ──────────────────────────────────────────────────────

    @workflow.run
    async def run(self, req: OrderRequest) -> OrderResult:
        self.request = req
        self.promotions = apply_promotions(req.beverages, req.promo_codes)
        self.state.priced = True

        workflow.logger.info(
            "Starting order %s: %d item(s), codes %s, total due %s",
            req.order_id,
            len(req.beverages),
            req.promo_codes,
            self.promotions.final_order_total,
        )

        try:
            if self.state.cancelled:
                return self._result(OrderStatus.CANCELLED)
            self.receipt = await workflow.execute_activity(
                render_receipt,
                ReceiptInput(
                    order_id=req.order_id,
                    beverages=req.beverages,
                    promo_codes=req.promo_codes,
                    author_name=req.author_name,
                    created_at=workflow.now(),
                ),
                start_to_close_timeout=ACTIVITY_TIMEOUT,
                retry_policy=RETRY_POLICY,
            )
            self.state.receipt_rendered = True

            if self.state.cancelled:
                return self._result(OrderStatus.CANCELLED)
            await workflow.execute_activity(
                send_receipt,
                NotifyInput(order_id=req.order_id, receipt=self.receipt),
                start_to_close_timeout=ACTIVITY_TIMEOUT,
                retry_policy=RETRY_POLICY,
            )
            self.state.receipt_sent = True

        except Exception:
            # An activity exhausted its retries; finish with FAILED instead of
            # letting the server mark the workflow itself as failed.
            workflow.logger.exception("Order %s failed", req.order_id)
            return self._result(OrderStatus.FAILED)

        workflow.logger.info("Order %s completed successfully", req.order_id)
        return self._result(OrderStatus.COMPLETED)
