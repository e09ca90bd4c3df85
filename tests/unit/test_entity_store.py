"""Unit tests for the generic EntityStore."""

from datetime import datetime, timezone

import pytest

from cardtrove.application.services import ChangeAction, EntityStore, StoreChange
from cardtrove.application.services.sample_data import sample_order_entries
from cardtrove.domain.entities import OrderEntry

from tests.unit.fakes import FakeRecordRepository

FIXED_NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def make_order(product_type: str = "Standee", **overrides) -> OrderEntry:
    fields = dict(product_type=product_type, quantity=1, unit_cost=100.0, total_cost=100.0)
    fields.update(overrides)
    return OrderEntry(**fields)


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def repo() -> FakeRecordRepository:
    return FakeRecordRepository(stored=[])


@pytest.fixture
def store(repo) -> EntityStore[OrderEntry]:
    s = EntityStore("OrderEntry", repo, None, clock=lambda: FIXED_NOW)
    s.initialize()
    return s


@pytest.fixture
def changes(store) -> list[StoreChange]:
    received: list[StoreChange] = []
    store.subscribe(received.append)
    return received


# ── Initialization & seeding ─────────────────────────────────────────

class TestInitialize:
    def test_seeds_two_records_when_storage_missing(self):
        repo = FakeRecordRepository(stored=None)
        store = EntityStore("OrderEntry", repo, sample_order_entries, clock=lambda: FIXED_NOW)
        store.initialize()

        assert len(store) == 2
        assert [o.product_type for o in store] == ["Visiting Card", "Flex Banner"]
        assert repo.stored == list(store.records)

    def test_seeds_when_load_fails(self):
        repo = FakeRecordRepository(stored=[make_order()], fail_load=True)
        store = EntityStore("OrderEntry", repo, sample_order_entries, clock=lambda: FIXED_NOW)
        store.initialize()
        assert len(store) == 2

    def test_seeded_dates_follow_clock(self):
        repo = FakeRecordRepository(stored=[])
        store = EntityStore("OrderEntry", repo, sample_order_entries, clock=lambda: FIXED_NOW)
        store.initialize()
        assert store.records[0].order_date == FIXED_NOW

    def test_does_not_seed_non_empty_collection(self):
        existing = make_order("Flex")
        repo = FakeRecordRepository(stored=[existing])
        store = EntityStore("OrderEntry", repo, sample_order_entries)
        store.initialize()

        assert store.records == (existing,)
        assert repo.save_count == 0

    def test_reload_after_seeding_keeps_same_records(self):
        repo = FakeRecordRepository(stored=None)
        first = EntityStore("OrderEntry", repo, sample_order_entries)
        first.initialize()

        second = EntityStore("OrderEntry", repo, sample_order_entries)
        second.initialize()

        assert second.records == first.records

    def test_seeding_is_announced(self):
        repo = FakeRecordRepository(stored=[])
        store = EntityStore("OrderEntry", repo, sample_order_entries)
        received: list[StoreChange] = []
        store.subscribe(received.append)
        store.initialize()

        assert len(received) == 1
        assert received[0].action == ChangeAction.SEEDED
        assert received[0].record_ids == tuple(o.id for o in store)


# ── CRUD ─────────────────────────────────────────────────────────────

class TestMutations:
    def test_add_appends_and_persists(self, store, repo):
        a, b = make_order("A"), make_order("B")
        store.add(a)
        store.add(b)

        assert store.records == (a, b)
        assert repo.stored == [a, b]
        assert repo.save_count == 2

    def test_update_replaces_in_place(self, store, repo):
        a, b, c = make_order("A"), make_order("B"), make_order("C")
        for order in (a, b, c):
            store.add(order)

        revised = make_order("B2", id=b.id)
        store.update(revised)

        assert len(store) == 3
        assert store.records[1] is revised
        assert repo.stored[1] is revised

    def test_update_unknown_id_is_noop(self, store, repo, changes):
        store.add(make_order("A"))
        saves_before = repo.save_count
        snapshot = store.records

        store.update(make_order("Ghost"))

        assert store.records == snapshot
        assert repo.save_count == saves_before
        assert [c.action for c in changes] == [ChangeAction.ADDED]

    def test_delete_is_idempotent(self, store, repo):
        a, b = make_order("A"), make_order("B")
        store.add(a)
        store.add(b)

        store.delete(a.id)
        assert store.records == (b,)
        saves = repo.save_count

        store.delete(a.id)
        assert store.records == (b,)
        assert repo.save_count == saves

    def test_delete_many(self, store):
        orders = [make_order(str(i)) for i in range(4)]
        for order in orders:
            store.add(order)

        store.delete_many({orders[0].id, orders[2].id, "missing"})

        assert store.records == (orders[1], orders[3])

    def test_delete_at_second_position(self, store, repo):
        first, second = make_order("First"), make_order("Second")
        store.add(first)
        store.add(second)

        store.delete_at({1})

        assert store.records == (first,)
        assert repo.stored == [first]

    def test_delete_at_ignores_out_of_range(self, store, repo):
        store.add(make_order())
        saves = repo.save_count

        store.delete_at([5, -1])

        assert len(store) == 1
        assert repo.save_count == saves

    def test_get(self, store):
        order = make_order()
        store.add(order)
        assert store.get(order.id) is order
        assert store.get("nope") is None

    def test_records_snapshot_is_read_only(self, store):
        store.add(make_order())
        snapshot = store.records
        assert isinstance(snapshot, tuple)
        store.add(make_order())
        assert len(snapshot) == 1


# ── Persistence failures & notifications ─────────────────────────────

class TestFailuresAndNotifications:
    def test_save_failure_keeps_memory_state(self, store, repo, caplog):
        repo.fail_save = True
        order = make_order()

        store.add(order)

        assert store.records == (order,)
        assert repo.stored == []
        assert "Failed to save OrderEntry records" in caplog.text

    def test_load_failure_is_logged(self, caplog):
        repo = FakeRecordRepository(stored=None)
        EntityStore("OrderEntry", repo).initialize()
        assert "Failed to load OrderEntry records" in caplog.text

    def test_each_mutation_is_published(self, store, changes):
        order = make_order()
        store.add(order)
        store.update(make_order("Edited", id=order.id))
        store.delete(order.id)

        assert [(c.action, c.record_ids) for c in changes] == [
            (ChangeAction.ADDED, (order.id,)),
            (ChangeAction.UPDATED, (order.id,)),
            (ChangeAction.DELETED, (order.id,)),
        ]
        assert all(c.entity_type == "OrderEntry" for c in changes)

    def test_unsubscribe_stops_delivery(self, store):
        received: list[StoreChange] = []
        unsubscribe = store.subscribe(received.append)
        store.add(make_order())
        unsubscribe()
        store.add(make_order())
        assert len(received) == 1

    def test_failing_subscriber_does_not_break_store(self, store, changes):
        def broken(_change):
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.add(make_order())

        assert len(store) == 1
        assert len(changes) == 1
