"""Pydantic DTOs for the order entry editor."""

from datetime import datetime, timezone
from typing import ClassVar
from uuid import uuid4

from pydantic import Field

from cardtrove.application.schemas.base import (
    Amount,
    OptionalText,
    RecordForm,
    RecordInput,
    RequiredText,
    WholeNumber,
    text_or_blank,
)
from cardtrove.domain.entities import (
    OrderEntry,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    UrgencyLevel,
)

PRODUCT_TYPES = ("Visiting Card", "Flex", "Standee")


class OrderEntryForm(RecordForm):
    """Editable draft of an order."""

    product_type: str = PRODUCT_TYPES[0]
    size: str = ""
    quantity: str = ""
    unit_cost: str = ""
    total_cost: str = ""
    urgency_level: UrgencyLevel = UrgencyLevel.NORMAL
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.CASH
    order_status: OrderStatus = OrderStatus.IN_PROGRESS
    includes_design: bool = False
    requires_installation: bool = False
    delivery_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    invoice_number: str = ""
    discount_code: str = ""
    delivery_address: str = ""
    notes: str = ""

    @classmethod
    def from_entity(cls, entity: OrderEntry) -> "OrderEntryForm":
        return cls(
            product_type=entity.product_type,
            size=entity.size,
            quantity=str(entity.quantity),
            unit_cost=str(entity.unit_cost),
            total_cost=str(entity.total_cost),
            urgency_level=entity.urgency_level,
            payment_status=entity.payment_status,
            payment_method=entity.payment_method,
            order_status=entity.order_status,
            includes_design=entity.includes_design,
            requires_installation=entity.requires_installation,
            delivery_date=entity.delivery_date,
            invoice_number=text_or_blank(entity.invoice_number),
            discount_code=text_or_blank(entity.discount_code),
            delivery_address=text_or_blank(entity.delivery_address),
            notes=text_or_blank(entity.notes),
        )


class OrderEntryInput(RecordInput):
    """Validated order; product type, quantity and both costs are required."""

    entity_type: ClassVar[str] = "OrderEntry"
    form_type: ClassVar[type[RecordForm]] = OrderEntryForm
    alert_message: ClassVar[str] = "Product type, quantity, and cost are required."

    product_type: RequiredText
    quantity: WholeNumber
    unit_cost: Amount
    total_cost: Amount
    size: str = ""
    urgency_level: UrgencyLevel = UrgencyLevel.NORMAL
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.CASH
    order_status: OrderStatus = OrderStatus.IN_PROGRESS
    includes_design: bool = False
    requires_installation: bool = False
    delivery_date: datetime
    invoice_number: OptionalText = None
    discount_code: OptionalText = None
    delivery_address: OptionalText = None
    notes: OptionalText = None

    def build(self, existing: OrderEntry | None, now: datetime) -> OrderEntry:
        # TODO: take client_id from a client picker once orders are linked to profiles
        return OrderEntry(
            id=existing.id if existing is not None else str(uuid4()),
            client_id=existing.client_id if existing is not None else str(uuid4()),
            order_date=existing.order_date if existing is not None else now,
            product_type=self.product_type,
            size=self.size,
            quantity=self.quantity,
            unit_cost=self.unit_cost,
            total_cost=self.total_cost,
            delivery_date=self.delivery_date,
            urgency_level=self.urgency_level,
            payment_status=self.payment_status,
            payment_method=self.payment_method,
            order_status=self.order_status,
            includes_design=self.includes_design,
            requires_installation=self.requires_installation,
            discount_code=self.discount_code,
            invoice_number=self.invoice_number,
            delivery_address=self.delivery_address,
            notes=self.notes,
        )
