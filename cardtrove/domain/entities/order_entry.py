"""Domain entity for print orders."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class UrgencyLevel(str, Enum):
    NORMAL = "Normal"
    URGENT = "Urgent"
    SAME_DAY = "Same Day"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    UPI = "UPI"
    CARD = "Card"


class OrderStatus(str, Enum):
    """Lifecycle states of an order."""

    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"


@dataclass
class OrderEntry:
    """A single print job placed by a client.

    ``client_id`` is a copied identifier; it is never resolved against the
    client store.
    """

    product_type: str          # "Visiting Card" | "Flex" | "Standee" | ...
    quantity: int
    unit_cost: float
    total_cost: float
    client_id: str = field(default_factory=lambda: str(uuid4()))
    size: str = ""
    order_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    delivery_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    urgency_level: UrgencyLevel = UrgencyLevel.NORMAL
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod = PaymentMethod.CASH
    order_status: OrderStatus = OrderStatus.IN_PROGRESS
    includes_design: bool = False
    requires_installation: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    discount_code: str | None = None
    invoice_number: str | None = None
    delivery_address: str | None = None
    notes: str | None = None

    @property
    def is_open(self) -> bool:
        """True until the order is completed or delivered."""
        return self.order_status not in (OrderStatus.COMPLETED, OrderStatus.DELIVERED)

    @property
    def is_urgent(self) -> bool:
        return self.urgency_level in (UrgencyLevel.URGENT, UrgencyLevel.SAME_DAY)
