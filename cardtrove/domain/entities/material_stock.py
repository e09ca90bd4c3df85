"""Domain entity for consumable materials kept in the shop."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class MaterialStock:
    """An inventory line: ink, card paper, banner rolls and the like.

    Quantities are counted in ``unit_type`` (sheets, liters, rolls, ...).
    """

    material_name: str
    quantity: int
    reorder_level: int
    cost_per_unit: float
    category: str = ""        # "Ink" | "Card Paper" | "Banner Roll" | ...
    unit_type: str = ""
    supplier: str = ""
    last_restocked: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    storage_location: str = ""
    is_critical: bool = False
    damage_reported: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    expiration_date: datetime | None = None
    last_used_date: datetime | None = None
    barcode: str | None = None
    purchase_reference: str | None = None
    quality_rating: int | None = None  # 1–5
    notes: str | None = None

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.reorder_level

    @property
    def stock_value(self) -> float:
        return self.quantity * self.cost_per_unit
