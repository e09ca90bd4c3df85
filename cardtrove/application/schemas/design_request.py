"""Pydantic DTOs for the design request editor."""

from datetime import datetime
from typing import ClassVar
from uuid import uuid4

from cardtrove.application.schemas.base import (
    Amount,
    OptionalText,
    RecordForm,
    RecordInput,
    RequiredText,
    text_or_blank,
)
from cardtrove.domain.entities import (
    ApprovalStatus,
    DeliveryFormat,
    DesignRequest,
    DesignStage,
)

FONTS = ("Roboto", "Playfair Display", "Montserrat", "Lato")


class DesignRequestForm(RecordForm):
    text_content: str = ""
    font_preference: str = FONTS[0]
    color_theme: str = "Blue"
    reference_file: str = ""
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    design_stage: DesignStage = DesignStage.DRAFT
    is_urgent: bool = False
    assigned_designer: str = ""
    requested_dimensions: str = ""
    delivery_format: DeliveryFormat = DeliveryFormat.PDF
    requires_multiple_versions: bool = False
    estimated_design_hours: str = ""
    notes: str = ""

    @classmethod
    def from_entity(cls, entity: DesignRequest) -> "DesignRequestForm":
        return cls(
            text_content=entity.text_content,
            font_preference=entity.font_preference,
            color_theme=entity.color_theme,
            reference_file=text_or_blank(entity.reference_file),
            approval_status=entity.approval_status,
            design_stage=entity.design_stage,
            is_urgent=entity.is_urgent,
            assigned_designer=text_or_blank(entity.assigned_designer),
            requested_dimensions=text_or_blank(entity.requested_dimensions),
            delivery_format=entity.delivery_format,
            requires_multiple_versions=entity.requires_multiple_versions,
            estimated_design_hours=str(entity.estimated_design_hours),
            notes=text_or_blank(entity.notes),
        )


class DesignRequestInput(RecordInput):
    """Validated design request; the text to lay out and an hour estimate are required."""

    entity_type: ClassVar[str] = "DesignRequest"
    form_type: ClassVar[type[RecordForm]] = DesignRequestForm

    text_content: RequiredText
    estimated_design_hours: Amount
    font_preference: str = FONTS[0]
    color_theme: str = "Blue"
    reference_file: OptionalText = None
    approval_status: ApprovalStatus = ApprovalStatus.PENDING
    design_stage: DesignStage = DesignStage.DRAFT
    is_urgent: bool = False
    assigned_designer: OptionalText = None
    requested_dimensions: OptionalText = None
    delivery_format: DeliveryFormat = DeliveryFormat.PDF
    requires_multiple_versions: bool = False
    notes: OptionalText = None

    def build(self, existing: DesignRequest | None, now: datetime) -> DesignRequest:
        return DesignRequest(
            id=existing.id if existing is not None else str(uuid4()),
            client_id=existing.client_id if existing is not None else str(uuid4()),
            request_date=existing.request_date if existing is not None else now,
            text_content=self.text_content,
            font_preference=self.font_preference,
            color_theme=self.color_theme,
            reference_file=self.reference_file,
            approval_status=self.approval_status,
            design_stage=self.design_stage,
            is_urgent=self.is_urgent,
            assigned_designer=self.assigned_designer,
            requested_dimensions=self.requested_dimensions,
            delivery_format=self.delivery_format,
            requires_multiple_versions=self.requires_multiple_versions,
            estimated_design_hours=self.estimated_design_hours,
            notes=self.notes,
        )
