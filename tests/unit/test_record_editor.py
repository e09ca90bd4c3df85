"""Unit tests for RecordEditor and the editor DTOs."""

from datetime import datetime, timezone

import pytest

from cardtrove.application.schemas import (
    ClientProfileForm,
    ClientProfileInput,
    DesignRequestInput,
    MaterialStockForm,
    MaterialStockInput,
    OrderEntryInput,
    RecordForm,
    RecordInput,
)
from cardtrove.application.services import EntityStore, RecordEditor
from cardtrove.application.services.sample_data import (
    sample_client_profiles,
    sample_design_requests,
    sample_material_stock,
    sample_order_entries,
)
from cardtrove.domain.entities import IndustryType, OrderStatus
from cardtrove.domain.exceptions import RecordValidationError

from tests.unit.fakes import FakeRecordRepository

NOW = datetime(2025, 1, 20, 15, 45, tzinfo=timezone.utc)


def make_store(seeds=None) -> EntityStore:
    store = EntityStore("Test", FakeRecordRepository(stored=[]), seeds, clock=lambda: NOW)
    store.initialize()
    return store


def make_editor(store, input_type, existing=None) -> RecordEditor:
    return RecordEditor(store, input_type, existing, clock=lambda: NOW)


# ── Client profiles ──────────────────────────────────────────────────

class TestClientProfileEditor:
    def test_create_with_blank_optionals(self):
        store = make_store()
        editor = make_editor(store, ClientProfileInput)
        assert editor.title == "Add"
        editor.form.business_name = "Acme Prints"
        editor.form.phone_number = "5550001"

        profile = editor.submit()

        assert profile is not None
        assert editor.dismissed
        assert not editor.show_alert
        assert store.records == (profile,)
        assert profile.email is None
        assert profile.total_orders_placed == 0
        assert profile.feedback_rating is None
        assert profile.tags is None
        assert profile.last_order_date == NOW

    @pytest.mark.parametrize(
        ("business_name", "phone_number", "invalid"),
        [
            ("", "5550001", ("business_name",)),
            ("Acme Prints", "   ", ("phone_number",)),
            (" ", "", ("business_name", "phone_number")),
        ],
    )
    def test_required_fields(self, business_name, phone_number, invalid):
        store = make_store()
        editor = make_editor(store, ClientProfileInput)
        editor.form.business_name = business_name
        editor.form.phone_number = phone_number

        assert editor.submit() is None
        assert editor.show_alert
        assert editor.alert_message == "Business name and phone number are required."
        assert editor.invalid_fields == invalid
        assert not editor.dismissed
        assert len(store) == 0

    def test_draft_survives_rejection(self):
        store = make_store()
        editor = make_editor(store, ClientProfileInput)
        editor.form.business_name = "Acme Prints"
        editor.form.email = "hello@acme.test"

        assert editor.submit() is None
        assert editor.form.business_name == "Acme Prints"

        editor.dismiss_alert()
        editor.form.phone_number = "5550001"
        profile = editor.submit()

        assert profile is not None
        assert profile.email == "hello@acme.test"
        assert not editor.show_alert

    def test_edit_preserves_identity_and_position(self):
        store = make_store(sample_client_profiles)
        original = store.records[0]

        editor = make_editor(store, ClientProfileInput, original)
        assert editor.is_editing
        assert editor.title == "Edit"
        assert editor.form.tags_text == "Salon, Luxury, Regular"
        assert editor.form.feedback_rating == "4"

        editor.form.business_name = "Elegant Touch Studio"
        updated = editor.submit()

        assert updated.id == original.id
        assert len(store) == 2
        assert store.records[0].business_name == "Elegant Touch Studio"
        assert store.records[0].tags == ["Salon", "Luxury", "Regular"]

    def test_lenient_tracking_fields(self):
        form = ClientProfileForm(
            business_name="Dosa Corner",
            phone_number="9000000000",
            industry_type=IndustryType.FOOD,
            total_orders_placed="many",
            feedback_rating="9",
            tags_text=" Food, , Takeaway ,",
        )
        validated = ClientProfileInput.parse(form)

        assert validated.total_orders_placed == 0
        assert validated.feedback_rating is None
        assert validated.tags == ["Food", "Takeaway"]

    def test_parse_raises_validation_error(self):
        with pytest.raises(RecordValidationError) as exc_info:
            ClientProfileInput.parse(ClientProfileForm())
        assert exc_info.value.fields == ("business_name", "phone_number")


# ── Orders ───────────────────────────────────────────────────────────

class TestOrderEntryEditor:
    def test_create_order(self):
        store = make_store()
        editor = make_editor(store, OrderEntryInput)
        editor.form.quantity = " 250 "
        editor.form.unit_cost = "2,5"
        editor.form.total_cost = "625"

        order = editor.submit()

        assert order.product_type == "Visiting Card"
        assert order.quantity == 250
        assert order.unit_cost == 2.5
        assert order.total_cost == 625.0
        assert order.order_date == NOW
        assert order.client_id

    def test_non_numeric_quantity_rejected(self):
        store = make_store()
        editor = make_editor(store, OrderEntryInput)
        editor.form.quantity = "lots"
        editor.form.unit_cost = "1"
        editor.form.total_cost = "-4"

        assert editor.submit() is None
        assert editor.invalid_fields == ("quantity", "total_cost")
        assert editor.alert_message == "Product type, quantity, and cost are required."

    def test_edit_keeps_order_date_and_client(self):
        store = make_store(sample_order_entries)
        original = store.records[1]

        editor = make_editor(store, OrderEntryInput, original)
        assert editor.form.unit_cost == "350.0"
        editor.form.order_status = OrderStatus.DELIVERED
        updated = editor.submit()

        assert updated.id == original.id
        assert updated.client_id == original.client_id
        assert updated.order_date == original.order_date
        assert store.records[1].order_status is OrderStatus.DELIVERED


# ── Materials ────────────────────────────────────────────────────────

class TestMaterialStockEditor:
    def test_non_numeric_quantity_leaves_store_untouched(self):
        store = make_store(sample_material_stock)
        editor = make_editor(store, MaterialStockInput, store.records[0])
        editor.form.quantity = "abc"

        assert editor.submit() is None
        assert editor.show_alert
        assert editor.alert_title == "Missing Fields"
        assert editor.invalid_fields == ("quantity",)
        assert len(store) == 2
        assert store.records[0].quantity == 3

    def test_create_material(self):
        store = make_store()
        editor = make_editor(store, MaterialStockInput)
        editor.form.material_name = "Vinyl Roll 4ft"
        editor.form.quantity = "6"
        editor.form.reorder_level = "2"
        editor.form.cost_per_unit = "1800"
        editor.form.quality_rating = "3"

        material = editor.submit()

        assert material.quantity == 6
        assert material.quality_rating == 3
        assert material.expiration_date is None
        assert material.barcode is None

    @pytest.mark.parametrize("text", ["1.0", "-3", "+2", "1e3", "7 boxes"])
    def test_counts_must_be_plain_digits(self, text):
        form = MaterialStockForm(
            material_name="Vinyl Roll 4ft", quantity=text, reorder_level="2", cost_per_unit="2,5"
        )
        with pytest.raises(RecordValidationError) as exc_info:
            MaterialStockInput.parse(form)
        assert exc_info.value.fields == ("quantity",)

    def test_rejects_fractional_quantity_and_negative_reorder_level(self):
        store = make_store()
        editor = make_editor(store, MaterialStockInput)
        editor.form.material_name = "Vinyl Roll 4ft"
        editor.form.quantity = "1.0"
        editor.form.reorder_level = "-3"
        editor.form.cost_per_unit = "2,5"

        assert editor.submit() is None
        assert editor.invalid_fields == ("quantity", "reorder_level")
        assert len(store) == 0


# ── Design requests ──────────────────────────────────────────────────

class TestDesignRequestEditor:
    def test_hours_must_parse(self):
        store = make_store()
        editor = make_editor(store, DesignRequestInput)
        editor.form.text_content = "Grand Opening | 20% Off"
        editor.form.estimated_design_hours = "soon"

        assert editor.submit() is None
        assert editor.invalid_fields == ("estimated_design_hours",)
        assert editor.alert_message == "Please enter required fields."

    def test_edit_keeps_reference_file(self):
        store = make_store(sample_design_requests)
        original = store.records[0]

        editor = make_editor(store, DesignRequestInput, original)
        editor.form.estimated_design_hours = "6"
        updated = editor.submit()

        assert updated.reference_file == "beauty_banner_sketch.png"
        assert updated.request_date == original.request_date
        assert updated.estimated_design_hours == 6.0


# ── Base DTOs ────────────────────────────────────────────────────────

def test_base_dtos_cannot_be_instantiated():
    with pytest.raises(TypeError):
        RecordForm()
    with pytest.raises(TypeError):
        RecordInput()
