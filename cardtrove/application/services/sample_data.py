"""Onboarding sample records, seeded into a store whose collection is empty.

Each factory takes the current time so that relative dates ("ordered two
days ago") are reproducible under a fixed clock.
"""

from datetime import datetime, timedelta

from cardtrove.domain.entities import (
    ApprovalStatus,
    ClientProfile,
    CommunicationPreference,
    DeliveryFormat,
    DesignRequest,
    DesignStage,
    DesignStyle,
    IndustryType,
    MaterialStock,
    OrderEntry,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    UrgencyLevel,
)


def sample_client_profiles(now: datetime) -> list[ClientProfile]:
    return [
        ClientProfile(
            business_name="Elegant Touch Salon",
            contact_person="Priya Sharma",
            phone_number="9876543210",
            email="contact@elegantsalon.in",
            address="Sector 17, Chandigarh",
            logo_reference="elegant_logo",
            industry_type=IndustryType.SALON,
            repeat_client=True,
            preferred_design_style=DesignStyle.MINIMAL,
            last_order_date=now - timedelta(days=12),
            gst_number="27AAACB1234F1Z2",
            social_media_handle="@eleganttouchsalon",
            communication_preference=CommunicationPreference.WHATSAPP,
            total_orders_placed=5,
            feedback_rating=4,
            special_instructions="Prefer soft pastel tones",
            tags=["Salon", "Luxury", "Regular"],
        ),
        ClientProfile(
            business_name="TechWave Innovations",
            contact_person="Rahul Mehta",
            phone_number="9988776655",
            email="info@techwave.io",
            address="Koramangala, Bengaluru",
            industry_type=IndustryType.TECH,
            repeat_client=False,
            preferred_design_style=DesignStyle.BOLD,
            social_media_handle="@techwaveio",
            communication_preference=CommunicationPreference.EMAIL,
            total_orders_placed=1,
            special_instructions="Use futuristic fonts and gradients",
            tags=["Tech", "Startup"],
        ),
    ]


def sample_order_entries(now: datetime) -> list[OrderEntry]:
    return [
        OrderEntry(
            order_date=now,
            product_type="Visiting Card",
            size="Standard 3.5x2 in",
            quantity=500,
            unit_cost=1.2,
            total_cost=600.0,
            delivery_date=now + timedelta(days=3),
            urgency_level=UrgencyLevel.NORMAL,
            payment_status=PaymentStatus.PAID,
            payment_method=PaymentMethod.UPI,
            order_status=OrderStatus.IN_PROGRESS,
            includes_design=True,
            requires_installation=False,
            discount_code="VCARD10",
            invoice_number="INV-2024-001",
            delivery_address="Shop No. 4, Sector 22 Market",
            notes="Add QR on the back",
        ),
        OrderEntry(
            order_date=now - timedelta(days=2),
            product_type="Flex Banner",
            size="6x3 ft",
            quantity=2,
            unit_cost=350.0,
            total_cost=700.0,
            delivery_date=now + timedelta(days=1),
            urgency_level=UrgencyLevel.URGENT,
            payment_status=PaymentStatus.PENDING,
            payment_method=PaymentMethod.CASH,
            order_status=OrderStatus.IN_PROGRESS,
            includes_design=False,
            requires_installation=True,
            invoice_number="INV-2024-002",
            delivery_address="Main Chowk, Model Town",
            notes="Install by 11 AM sharp",
        ),
    ]


def sample_material_stock(now: datetime) -> list[MaterialStock]:
    return [
        MaterialStock(
            material_name="HP 678 Ink (Black)",
            category="Ink",
            quantity=3,
            unit_type="Cartridges",
            reorder_level=2,
            supplier="PrintSupplies Co.",
            cost_per_unit=750.0,
            last_restocked=now,
            expiration_date=now + timedelta(days=182),
            storage_location="Drawer A1",
            is_critical=True,
            last_used_date=now - timedelta(days=2),
            damage_reported=False,
            barcode="INK678-BLACK",
            purchase_reference="PO-8723",
            quality_rating=5,
            notes="Only for HP Deskjet printers",
        ),
        MaterialStock(
            material_name="Glossy Card Paper A4",
            category="Card Paper",
            quantity=150,
            unit_type="Sheets",
            reorder_level=50,
            supplier="PaperWorld",
            cost_per_unit=3.5,
            last_restocked=now - timedelta(days=10),
            storage_location="Shelf B2",
            is_critical=False,
            last_used_date=now - timedelta(days=1),
            damage_reported=True,
            barcode="CARD-A4-GLS",
            purchase_reference="PO-8651",
            quality_rating=4,
            notes="Some sheets have corner bends",
        ),
    ]


def sample_design_requests(now: datetime) -> list[DesignRequest]:
    return [
        DesignRequest(
            request_date=now,
            text_content="Elegant Beauty Salon | Call Us Today",
            font_preference="Playfair Display",
            color_theme="Soft Pink & Gold",
            reference_file="beauty_banner_sketch.png",
            approval_status=ApprovalStatus.PENDING,
            design_stage=DesignStage.DRAFT,
            is_urgent=True,
            assigned_designer="Riya",
            requested_dimensions="3x2 ft",
            delivery_format=DeliveryFormat.PDF,
            requires_multiple_versions=True,
            estimated_design_hours=4.5,
            notes="Client wants vintage floral elements.",
        ),
        DesignRequest(
            request_date=now - timedelta(days=2),
            text_content="TechWave Innovations | Smart IT Solutions",
            font_preference="Roboto Bold",
            color_theme="Blue Gradient",
            approval_status=ApprovalStatus.APPROVED,
            design_stage=DesignStage.FINAL,
            is_urgent=False,
            assigned_designer="Karan",
            requested_dimensions="A5",
            delivery_format=DeliveryFormat.AI,
            requires_multiple_versions=False,
            estimated_design_hours=2.0,
            notes="Minimal layout with QR code on the back.",
        ),
    ]
