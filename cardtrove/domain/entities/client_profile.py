"""Domain entity — a customer business the shop prints for."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class IndustryType(str, Enum):
    """Industry a client operates in."""

    SALON = "Salon"
    TECH = "Tech"
    REAL_ESTATE = "Real Estate"
    RETAIL = "Retail"
    FOOD = "Food"


class DesignStyle(str, Enum):
    """Visual style a client usually asks for."""

    MINIMAL = "Minimal"
    BOLD = "Bold"
    ELEGANT = "Elegant"
    CLASSIC = "Classic"


class CommunicationPreference(str, Enum):
    """Channel the client prefers to be contacted on."""

    WHATSAPP = "WhatsApp"
    CALL = "Call"
    EMAIL = "Email"


@dataclass
class ClientProfile:
    """Core domain entity for a client business.

    ``total_orders_placed`` is a manually maintained counter; it is not
    derived from the order store.
    """

    business_name: str
    phone_number: str
    contact_person: str = ""
    industry_type: IndustryType = IndustryType.SALON
    repeat_client: bool = False
    preferred_design_style: DesignStyle = DesignStyle.MINIMAL
    communication_preference: CommunicationPreference = CommunicationPreference.WHATSAPP
    total_orders_placed: int = 0
    id: str = field(default_factory=lambda: str(uuid4()))
    email: str | None = None
    address: str | None = None
    logo_reference: str | None = None      # local image name or asset id
    last_order_date: datetime | None = None
    gst_number: str | None = None          # for invoice generation
    social_media_handle: str | None = None
    feedback_rating: int | None = None     # 1–5
    special_instructions: str | None = None
    tags: list[str] | None = None
