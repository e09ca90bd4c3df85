"""Pydantic DTOs for the material stock editor."""

from datetime import datetime, timezone
from typing import ClassVar
from uuid import uuid4

from pydantic import Field

from cardtrove.application.schemas.base import (
    Amount,
    OptionalText,
    Rating,
    RecordForm,
    RecordInput,
    RequiredText,
    WholeNumber,
    text_or_blank,
)
from cardtrove.domain.entities import MaterialStock


class MaterialStockForm(RecordForm):
    """Editable draft of an inventory line.

    Optional dates are ``None`` when the corresponding toggle is off.
    """

    material_name: str = ""
    category: str = ""
    unit_type: str = ""
    quantity: str = ""
    reorder_level: str = ""
    supplier: str = ""
    cost_per_unit: str = ""
    storage_location: str = ""
    last_restocked: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    expiration_date: datetime | None = None
    last_used_date: datetime | None = None
    is_critical: bool = False
    damage_reported: bool = False
    barcode: str = ""
    purchase_reference: str = ""
    quality_rating: str = ""
    notes: str = ""

    @classmethod
    def from_entity(cls, entity: MaterialStock) -> "MaterialStockForm":
        return cls(
            material_name=entity.material_name,
            category=entity.category,
            unit_type=entity.unit_type,
            quantity=str(entity.quantity),
            reorder_level=str(entity.reorder_level),
            supplier=entity.supplier,
            cost_per_unit=str(entity.cost_per_unit),
            storage_location=entity.storage_location,
            last_restocked=entity.last_restocked,
            expiration_date=entity.expiration_date,
            last_used_date=entity.last_used_date,
            is_critical=entity.is_critical,
            damage_reported=entity.damage_reported,
            barcode=text_or_blank(entity.barcode),
            purchase_reference=text_or_blank(entity.purchase_reference),
            quality_rating=text_or_blank(entity.quality_rating),
            notes=text_or_blank(entity.notes),
        )


class MaterialStockInput(RecordInput):
    entity_type: ClassVar[str] = "MaterialStock"
    form_type: ClassVar[type[RecordForm]] = MaterialStockForm
    alert_title: ClassVar[str] = "Missing Fields"
    alert_message: ClassVar[str] = "Name, quantity, reorder level, and cost are required."

    material_name: RequiredText
    quantity: WholeNumber
    reorder_level: WholeNumber
    cost_per_unit: Amount
    category: str = ""
    unit_type: str = ""
    supplier: str = ""
    storage_location: str = ""
    last_restocked: datetime
    expiration_date: datetime | None = None
    last_used_date: datetime | None = None
    is_critical: bool = False
    damage_reported: bool = False
    barcode: OptionalText = None
    purchase_reference: OptionalText = None
    quality_rating: Rating = None
    notes: OptionalText = None

    def build(self, existing: MaterialStock | None, now: datetime) -> MaterialStock:
        return MaterialStock(
            id=existing.id if existing is not None else str(uuid4()),
            material_name=self.material_name,
            category=self.category,
            quantity=self.quantity,
            unit_type=self.unit_type,
            reorder_level=self.reorder_level,
            supplier=self.supplier,
            cost_per_unit=self.cost_per_unit,
            last_restocked=self.last_restocked,
            expiration_date=self.expiration_date,
            storage_location=self.storage_location,
            is_critical=self.is_critical,
            last_used_date=self.last_used_date,
            damage_reported=self.damage_reported,
            barcode=self.barcode,
            purchase_reference=self.purchase_reference,
            quality_rating=self.quality_rating,
            notes=self.notes,
        )
