"""Dependency wiring — builds entity stores on top of the JSON file repositories."""

from cardtrove.application.services import EntityStore
from cardtrove.application.services.sample_data import (
    sample_client_profiles,
    sample_design_requests,
    sample_material_stock,
    sample_order_entries,
)
from cardtrove.config import Settings
from cardtrove.domain.entities import (
    ClientProfile,
    DesignRequest,
    MaterialStock,
    OrderEntry,
)
from cardtrove.infrastructure.storage.json_file_repository import JsonFileRepository


def get_client_profile_store(settings: Settings) -> EntityStore[ClientProfile]:
    """Provides an uninitialized ClientProfile store with its repository wired up."""
    repository = JsonFileRepository(
        ClientProfile, settings.data_path(settings.client_profiles_file)
    )
    return EntityStore("ClientProfile", repository, sample_client_profiles)


def get_order_entry_store(settings: Settings) -> EntityStore[OrderEntry]:
    """Provides an uninitialized OrderEntry store with its repository wired up."""
    repository = JsonFileRepository(
        OrderEntry, settings.data_path(settings.order_entries_file)
    )
    return EntityStore("OrderEntry", repository, sample_order_entries)


def get_material_stock_store(settings: Settings) -> EntityStore[MaterialStock]:
    """Provides an uninitialized MaterialStock store with its repository wired up."""
    repository = JsonFileRepository(
        MaterialStock, settings.data_path(settings.material_stock_file)
    )
    return EntityStore("MaterialStock", repository, sample_material_stock)


def get_design_request_store(settings: Settings) -> EntityStore[DesignRequest]:
    """Provides an uninitialized DesignRequest store with its repository wired up."""
    repository = JsonFileRepository(
        DesignRequest, settings.data_path(settings.design_requests_file)
    )
    return EntityStore("DesignRequest", repository, sample_design_requests)
