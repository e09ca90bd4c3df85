"""Summary rollups over store snapshots.

Every rollup is recomputed from the records passed in; nothing is cached
and an empty collection yields zeros.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from cardtrove.domain.entities import (
    ApprovalStatus,
    ClientProfile,
    DesignRequest,
    MaterialStock,
    OrderEntry,
    PaymentStatus,
)


def _mean(values: list[int]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


@dataclass(frozen=True)
class ClientAnalytics:
    total_clients: int
    repeat_clients: int
    average_rating: float

    @classmethod
    def from_profiles(cls, profiles: Iterable[ClientProfile]) -> "ClientAnalytics":
        profiles = list(profiles)
        ratings = [p.feedback_rating for p in profiles if p.feedback_rating is not None]
        return cls(
            total_clients=len(profiles),
            repeat_clients=sum(1 for p in profiles if p.repeat_client),
            average_rating=_mean(ratings),
        )


@dataclass(frozen=True)
class OrderAnalytics:
    total_orders: int
    pending_orders: int
    urgent_orders: int
    total_revenue: float
    pending_payments: int

    @classmethod
    def from_orders(cls, orders: Iterable[OrderEntry]) -> "OrderAnalytics":
        orders = list(orders)
        return cls(
            total_orders=len(orders),
            pending_orders=sum(1 for o in orders if o.is_open),
            urgent_orders=sum(1 for o in orders if o.is_urgent),
            total_revenue=sum((o.total_cost for o in orders), 0.0),
            pending_payments=sum(
                1 for o in orders if o.payment_status == PaymentStatus.PENDING
            ),
        )


@dataclass(frozen=True)
class MaterialAnalytics:
    total_items: int
    critical_items: int
    low_stock_items: int
    total_value: float
    average_quality: float

    @classmethod
    def from_materials(cls, materials: Iterable[MaterialStock]) -> "MaterialAnalytics":
        materials = list(materials)
        ratings = [m.quality_rating for m in materials if m.quality_rating is not None]
        return cls(
            total_items=len(materials),
            critical_items=sum(1 for m in materials if m.is_critical),
            low_stock_items=sum(1 for m in materials if m.is_low_stock),
            total_value=sum((m.stock_value for m in materials), 0.0),
            average_quality=_mean(ratings),
        )


@dataclass(frozen=True)
class DesignAnalytics:
    total_requests: int
    pending_approval: int
    urgent_requests: int
    total_hours: float

    @classmethod
    def from_requests(cls, requests: Iterable[DesignRequest]) -> "DesignAnalytics":
        requests = list(requests)
        return cls(
            total_requests=len(requests),
            pending_approval=sum(
                1 for r in requests if r.approval_status == ApprovalStatus.PENDING
            ),
            urgent_requests=sum(1 for r in requests if r.is_urgent),
            total_hours=sum((r.estimated_design_hours for r in requests), 0.0),
        )


@dataclass(frozen=True)
class BusinessAnalytics:
    """Shop-wide overview combining several stores. Reads only."""

    total_clients: int
    repeat_clients: int
    total_orders: int
    total_revenue: float
    pending_payments: int
    low_stock_items: int
    urgent_design_requests: int

    @classmethod
    def from_records(
        cls,
        *,
        profiles: Iterable[ClientProfile] = (),
        orders: Iterable[OrderEntry] = (),
        materials: Iterable[MaterialStock] = (),
        requests: Iterable[DesignRequest] = (),
    ) -> "BusinessAnalytics":
        clients = ClientAnalytics.from_profiles(profiles)
        order_stats = OrderAnalytics.from_orders(orders)
        material_stats = MaterialAnalytics.from_materials(materials)
        design_stats = DesignAnalytics.from_requests(requests)
        return cls(
            total_clients=clients.total_clients,
            repeat_clients=clients.repeat_clients,
            total_orders=order_stats.total_orders,
            total_revenue=order_stats.total_revenue,
            pending_payments=order_stats.pending_payments,
            low_stock_items=material_stats.low_stock_items,
            urgent_design_requests=design_stats.urgent_requests,
        )
