from .base import RecordForm, RecordInput
from .client_profile import ClientProfileForm, ClientProfileInput
from .order_entry import OrderEntryForm, OrderEntryInput, PRODUCT_TYPES
from .material_stock import MaterialStockForm, MaterialStockInput
from .design_request import DesignRequestForm, DesignRequestInput, FONTS

__all__ = [
    "RecordForm",
    "RecordInput",
    "ClientProfileForm",
    "ClientProfileInput",
    "OrderEntryForm",
    "OrderEntryInput",
    "PRODUCT_TYPES",
    "MaterialStockForm",
    "MaterialStockInput",
    "DesignRequestForm",
    "DesignRequestInput",
    "FONTS",
]
