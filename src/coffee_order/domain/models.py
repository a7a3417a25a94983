"""
Domain models for the coffee order pipeline.

All models use Pydantic v2 BaseModel for validation, serialization and
deserialization. The same models travel through Temporal as JSON payloads via
the pydantic_data_converter configured on both the client and the worker.

Money is always `Decimal`. Pydantic serializes Decimal to a string in JSON
mode and parses it back losslessly, so amounts survive the round trip through
Temporal without float drift.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from coffee_order.domain.money import ZERO, round2


class Beverage(BaseModel):
    """One drink on an order.

    Every text field is optional; pricing, validation and classification each
    decide what a missing value means for them.
    """

    model_config = ConfigDict(frozen=True)

    base_drink: str | None = None  # e.g. "Latte", "Tea"
    size: str | None = None        # "Tall" / "Grande" / "Venti"
    temp: str | None = None        # "Hot" / "Iced" / "ExtraHot"
    milk: str | None = None        # dairy milk, e.g. "2%"
    plant_milk: str | None = None  # plant milk, e.g. "Oat"
    shots: int = 0                 # 0..4 when valid
    syrups: tuple[str, ...] = ()
    toppings: tuple[str, ...] = ()
    is_decaf: bool = False

    @field_validator("syrups", "toppings", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return () if value is None else value


class PriceBreakdown(BaseModel):
    """Per-beverage price pieces, each rounded to 2 dp."""

    model_config = ConfigDict(frozen=True)

    base_price: Decimal
    shots: Decimal
    syrups: Decimal
    plant_milk: Decimal
    toppings: Decimal
    subtotal: Decimal


class PromotionItemTotal(BaseModel):
    """Price of one item after promotions."""

    original: Decimal
    discount: Decimal = ZERO

    @computed_field  # type: ignore[prop-decorator]
    @property
    def final(self) -> Decimal:
        return round2(self.original - self.discount)


class DiscountLine(BaseModel):
    """A summary line explaining one promotion's total effect."""

    model_config = ConfigDict(frozen=True)

    reason: str
    amount: Decimal


class PromotionResult(BaseModel):
    """Outcome of applying promotion codes to an order."""

    items: list[PromotionItemTotal] = Field(default_factory=list)
    total_discount: Decimal = ZERO
    final_order_total: Decimal = ZERO
    lines: list[DiscountLine] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Validation verdict for one beverage.

    Errors make the beverage invalid; warnings are informational only.
    """

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def ok_with_warnings(cls, warnings: list[str]) -> "ValidationResult":
        return cls(is_valid=True, warnings=tuple(warnings))

    @classmethod
    def fail_with_warnings(cls, errors: list[str], warnings: list[str]) -> "ValidationResult":
        return cls(is_valid=False, errors=tuple(errors), warnings=tuple(warnings))


class BeverageLabels(BaseModel):
    """Simple yes/no labels stamped on a beverage."""

    model_config = ConfigDict(frozen=True)

    is_caffeinated: bool
    is_decaf: bool
    is_dairy_free: bool
    is_vegan_friendly: bool
    is_kid_safe: bool


class OrderStatus(str, Enum):
    """Terminal status of an order workflow."""

    COMPLETED = "COMPLETED"   # All activities succeeded
    FAILED = "FAILED"         # An activity failed after exhausting retries
    CANCELLED = "CANCELLED"   # A cancel signal was received before completion


# ── Workflow input / output ──────────────────────────────────────────


class OrderRequest(BaseModel):
    """Input to the order workflow."""

    order_id: str = Field(..., min_length=1)
    beverages: list[Beverage] = Field(default_factory=list)
    promo_codes: list[str] = Field(default_factory=list)
    author_name: str | None = None  # falls back to Settings.receipt_author


class OrderState(BaseModel):
    """Progress flags tracked inside the workflow, exposed via query."""

    priced: bool = False
    receipt_rendered: bool = False
    receipt_sent: bool = False
    cancelled: bool = False


class OrderResult(BaseModel):
    """Final result returned by the workflow to the client."""

    order_id: str
    status: OrderStatus
    subtotal: Decimal = ZERO
    total_discount: Decimal = ZERO
    total_due: Decimal = ZERO
    receipt: str | None = None
    receipt_sent: bool = False
    labels: list[BeverageLabels] = Field(default_factory=list)  # one per beverage, in order


# ── Activity payload models ──────────────────────────────────────────


class ReceiptInput(BaseModel):
    """Payload for the render_receipt activity."""

    order_id: str
    beverages: list[Beverage]
    promo_codes: list[str]
    author_name: str | None = None
    created_at: datetime  # taken from workflow.now()


class NotifyInput(BaseModel):
    """Payload for the send_receipt activity."""

    order_id: str
    receipt: str
