from .client_profile import (
    ClientProfile,
    CommunicationPreference,
    DesignStyle,
    IndustryType,
)
from .order_entry import (
    OrderEntry,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    UrgencyLevel,
)
from .material_stock import MaterialStock
from .design_request import (
    ApprovalStatus,
    DeliveryFormat,
    DesignRequest,
    DesignStage,
)

__all__ = [
    "ClientProfile",
    "CommunicationPreference",
    "DesignStyle",
    "IndustryType",
    "OrderEntry",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
    "UrgencyLevel",
    "MaterialStock",
    "ApprovalStatus",
    "DeliveryFormat",
    "DesignRequest",
    "DesignStage",
]
