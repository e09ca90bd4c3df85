"""Application factory — wires one store per entity kind for the lifetime of the process."""

import logging
from dataclasses import dataclass

from cardtrove.application.schemas import (
    ClientProfileInput,
    DesignRequestInput,
    MaterialStockInput,
    OrderEntryInput,
)
from cardtrove.application.services import BusinessAnalytics, EntityStore, RecordEditor
from cardtrove.config import Settings, get_settings
from cardtrove.domain.entities import (
    ClientProfile,
    DesignRequest,
    MaterialStock,
    OrderEntry,
)
from cardtrove.infrastructure.dependencies import (
    get_client_profile_store,
    get_design_request_store,
    get_material_stock_store,
    get_order_entry_store,
)
from cardtrove.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class CardTroveApp:
    """Container holding the four stores handed to the presentation layer."""

    settings: Settings
    clients: EntityStore[ClientProfile]
    orders: EntityStore[OrderEntry]
    materials: EntityStore[MaterialStock]
    designs: EntityStore[DesignRequest]

    def overview(self) -> BusinessAnalytics:
        """Shop-wide rollup, recomputed from the current store snapshots."""
        return BusinessAnalytics.from_records(
            profiles=self.clients.records,
            orders=self.orders.records,
            materials=self.materials.records,
            requests=self.designs.records,
        )

    # ── Editors ─────────────────────────────────────────────────────

    def client_editor(self, existing: ClientProfile | None = None) -> RecordEditor[ClientProfile]:
        return RecordEditor(self.clients, ClientProfileInput, existing)

    def order_editor(self, existing: OrderEntry | None = None) -> RecordEditor[OrderEntry]:
        return RecordEditor(self.orders, OrderEntryInput, existing)

    def material_editor(self, existing: MaterialStock | None = None) -> RecordEditor[MaterialStock]:
        return RecordEditor(self.materials, MaterialStockInput, existing)

    def design_editor(self, existing: DesignRequest | None = None) -> RecordEditor[DesignRequest]:
        return RecordEditor(self.designs, DesignRequestInput, existing)


def create_app(settings: Settings | None = None) -> CardTroveApp:
    """Build and initialize every store. Load failures fall back to sample data."""
    settings = settings or get_settings()

    app = CardTroveApp(
        settings=settings,
        clients=get_client_profile_store(settings),
        orders=get_order_entry_store(settings),
        materials=get_material_stock_store(settings),
        designs=get_design_request_store(settings),
    )
    for store in (app.clients, app.orders, app.materials, app.designs):
        store.initialize()

    logger.info(
        "%s v%s ready — data in %s", settings.app_title, settings.app_version, settings.data_dir
    )
    return app


def main() -> None:
    settings = get_settings()
    setup_logging(settings)
    app = create_app(settings)

    overview = app.overview()
    logger.info(
        "Clients: %d (%d repeat) | Orders: %d, revenue %.2f, %d payments pending | "
        "Low stock: %d | Urgent designs: %d",
        overview.total_clients,
        overview.repeat_clients,
        overview.total_orders,
        overview.total_revenue,
        overview.pending_payments,
        overview.low_stock_items,
        overview.urgent_design_requests,
    )


if __name__ == "__main__":
    main()
