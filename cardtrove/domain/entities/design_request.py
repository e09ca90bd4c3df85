"""Domain entity for artwork requests handled by the in-house designers."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ApprovalStatus(str, Enum):
    """Client approval state of a design."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REVISION_NEEDED = "Revision Needed"


class DesignStage(str, Enum):
    DRAFT = "Draft"
    FINAL = "Final"
    SENT_FOR_PRINT = "Sent for Print"


class DeliveryFormat(str, Enum):
    JPEG = "JPEG"
    PDF = "PDF"
    AI = "AI"


@dataclass
class DesignRequest:
    """A request to lay out text and artwork for a print job.

    Like orders, ``client_id`` is a plain copied value with no link to a
    stored client profile.
    """

    text_content: str
    estimated_design_hours: float
    font_preference: str = "Roboto"
    color_theme: str = "Blue"
    client_id: str = field(default_factory=lambda: str(uuid4()))
    request_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    design_stage: DesignStage = DesignStage.DRAFT
    is_urgent: bool = False
    delivery_format: DeliveryFormat = DeliveryFormat.PDF
    requires_multiple_versions: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    reference_file: str | None = None     # optional sketch or image
    assigned_designer: str | None = None
    requested_dimensions: str | None = None
    notes: str | None = None
