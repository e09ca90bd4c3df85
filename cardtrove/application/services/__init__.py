from .analytics import (
    BusinessAnalytics,
    ClientAnalytics,
    DesignAnalytics,
    MaterialAnalytics,
    OrderAnalytics,
)
from .change_notifier import ChangeAction, ChangeNotifier, StoreChange
from .entity_store import EntityStore
from .record_editor import RecordEditor

__all__ = [
    "BusinessAnalytics",
    "ClientAnalytics",
    "DesignAnalytics",
    "MaterialAnalytics",
    "OrderAnalytics",
    "ChangeAction",
    "ChangeNotifier",
    "StoreChange",
    "EntityStore",
    "RecordEditor",
]
