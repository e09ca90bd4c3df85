"""Pydantic DTOs for the client profile editor."""

from datetime import datetime
from typing import ClassVar
from uuid import uuid4

from pydantic import Field

from cardtrove.application.schemas.base import (
    Counter,
    OptionalText,
    Rating,
    RecordForm,
    RecordInput,
    RequiredText,
    Tags,
    text_or_blank,
)
from cardtrove.domain.entities import (
    ClientProfile,
    CommunicationPreference,
    DesignStyle,
    IndustryType,
)


class ClientProfileForm(RecordForm):
    """Editable draft of a client profile."""

    business_name: str = ""
    contact_person: str = ""
    phone_number: str = ""
    email: str = ""
    address: str = ""
    logo_reference: str = ""
    industry_type: IndustryType = IndustryType.SALON
    preferred_design_style: DesignStyle = DesignStyle.MINIMAL
    communication_preference: CommunicationPreference = CommunicationPreference.WHATSAPP
    repeat_client: bool = False
    gst_number: str = ""
    social_media_handle: str = ""
    special_instructions: str = ""
    tags_text: str = ""               # comma separated
    total_orders_placed: str = ""
    feedback_rating: str = ""

    @classmethod
    def from_entity(cls, entity: ClientProfile) -> "ClientProfileForm":
        return cls(
            business_name=entity.business_name,
            contact_person=entity.contact_person,
            phone_number=entity.phone_number,
            email=text_or_blank(entity.email),
            address=text_or_blank(entity.address),
            logo_reference=text_or_blank(entity.logo_reference),
            industry_type=entity.industry_type,
            preferred_design_style=entity.preferred_design_style,
            communication_preference=entity.communication_preference,
            repeat_client=entity.repeat_client,
            gst_number=text_or_blank(entity.gst_number),
            social_media_handle=text_or_blank(entity.social_media_handle),
            special_instructions=text_or_blank(entity.special_instructions),
            tags_text=", ".join(entity.tags or []),
            total_orders_placed=str(entity.total_orders_placed),
            feedback_rating=text_or_blank(entity.feedback_rating),
        )


class ClientProfileInput(RecordInput):
    """Validated client profile; business name and phone number are required."""

    entity_type: ClassVar[str] = "ClientProfile"
    form_type: ClassVar[type[RecordForm]] = ClientProfileForm
    alert_message: ClassVar[str] = "Business name and phone number are required."

    business_name: RequiredText
    phone_number: RequiredText
    contact_person: str = ""
    email: OptionalText = None
    address: OptionalText = None
    logo_reference: OptionalText = None
    industry_type: IndustryType = IndustryType.SALON
    preferred_design_style: DesignStyle = DesignStyle.MINIMAL
    communication_preference: CommunicationPreference = CommunicationPreference.WHATSAPP
    repeat_client: bool = False
    gst_number: OptionalText = None
    social_media_handle: OptionalText = None
    special_instructions: OptionalText = None
    tags: Tags = Field(default=None, validation_alias="tags_text")
    total_orders_placed: Counter = 0
    feedback_rating: Rating = None

    def build(self, existing: ClientProfile | None, now: datetime) -> ClientProfile:
        return ClientProfile(
            id=existing.id if existing is not None else str(uuid4()),
            business_name=self.business_name,
            contact_person=self.contact_person,
            phone_number=self.phone_number,
            email=self.email,
            address=self.address,
            logo_reference=self.logo_reference,
            industry_type=self.industry_type,
            repeat_client=self.repeat_client,
            preferred_design_style=self.preferred_design_style,
            last_order_date=now,
            gst_number=self.gst_number,
            social_media_handle=self.social_media_handle,
            communication_preference=self.communication_preference,
            total_orders_placed=self.total_orders_placed,
            feedback_rating=self.feedback_rating,
            special_instructions=self.special_instructions,
            tags=self.tags,
        )
