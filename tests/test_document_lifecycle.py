"""
Tests for document status transitions, conversion to receipts and the
dashboard summary.
"""

import uuid
from decimal import Decimal

from django.utils import timezone
from django_fsm import can_proceed

import pytest
from rest_framework.exceptions import NotFound, ValidationError

from apps.core.exceptions import InvalidOperation
from apps.documents import services
from apps.documents.models import Document


@pytest.mark.django_db
class TestCreateDocument:
    def test_computes_totals_and_number(self, quotation):
        year = timezone.now().year

        assert quotation.doc_number == f"QT-{year}-001"
        assert quotation.status == Document.DRAFT
        assert quotation.subtotal == Decimal("49380.00")
        assert quotation.tax == Decimal("3456.60")
        assert quotation.total == Decimal("52836.60")

    def test_snapshots_names(self, quotation, customer, products):
        assert quotation.customer_name == customer.name
        assert [item.product_name for item in quotation.items.all()] == [
            p.name for p in products
        ]

        customer.name = "Renamed Customer"
        customer.save()
        products[0].name = "Renamed Product"
        products[0].save()
        quotation.refresh_from_db()

        assert quotation.customer_name == "Thai Technology Co., Ltd."
        assert quotation.items.first().product_name == "Lenovo IdeaPad 3"

    def test_items_keep_their_order(self, quotation):
        assert [item.position for item in quotation.items.all()] == [0, 1, 2]
        assert [item.total for item in quotation.items.all()] == [
            Decimal("37800.00"),
            Decimal("9000.00"),
            Decimal("2580.00"),
        ]

    def test_empty_items_rejected(self, owner_user):
        with pytest.raises(ValidationError):
            services.create_document(doc_type="quotation", items=[], user=owner_user)

        assert Document.objects.count() == 0

    def test_cannot_start_converted(self, line_items, owner_user):
        with pytest.raises(ValidationError):
            services.create_document(
                doc_type="quotation", items=line_items, user=owner_user, status="converted"
            )

    def test_unit_price_defaults_to_product_price(self, products, owner_user):
        document = services.create_document(
            doc_type="voi",
            items=[{"product": products[1], "quantity": 3}],
            user=owner_user,
        )

        item = document.items.get()
        assert item.product_name == products[1].name
        assert item.unit_price == Decimal("4500.00")
        assert item.total == Decimal("13500.00")

    def test_total_beyond_column_capacity_rejected(self, products, owner_user):
        items = [
            {"product": product, "quantity": 1, "unit_price": Decimal("6000000000.00")}
            for product in products[:2]
        ]

        with pytest.raises(ValidationError):
            services.create_document(doc_type="quotation", items=items, user=owner_user)
        assert not Document.objects.exists()


@pytest.mark.django_db
class TestStatusTransitions:
    def test_draft_can_be_confirmed(self, quotation):
        assert can_proceed(quotation.confirm)

        services.apply_status(quotation, Document.CONFIRMED)

        assert quotation.status == Document.CONFIRMED

    def test_confirmed_can_be_cancelled(self, quotation):
        quotation.confirm()

        services.apply_status(quotation, Document.CANCELLED)

        assert quotation.status == Document.CANCELLED

    def test_same_status_is_noop(self, quotation):
        services.apply_status(quotation, Document.DRAFT)

        assert quotation.status == Document.DRAFT

    def test_cannot_return_to_draft(self, quotation):
        quotation.confirm()

        with pytest.raises(InvalidOperation):
            services.apply_status(quotation, Document.DRAFT)

    def test_converted_only_through_conversion(self, quotation):
        with pytest.raises(InvalidOperation):
            services.apply_status(quotation, Document.CONVERTED)

    def test_cancelled_is_terminal(self, quotation):
        quotation.cancel()

        assert quotation.is_terminal()
        assert not can_proceed(quotation.confirm)
        with pytest.raises(InvalidOperation):
            services.apply_status(quotation, Document.CONFIRMED)

    def test_only_quotations_can_be_marked_converted(self, line_items, owner_user):
        voi = services.create_document(doc_type="voi", items=line_items, user=owner_user)

        assert not can_proceed(voi.mark_converted)


@pytest.mark.django_db
class TestUpdateDocument:
    def test_update_without_items_keeps_totals(self, quotation):
        updated = services.update_document(quotation.id, {"notes": "Call before delivery"})

        assert updated.notes == "Call before delivery"
        assert updated.subtotal == Decimal("49380.00")
        assert updated.tax == Decimal("3456.60")
        assert updated.total == Decimal("52836.60")
        assert updated.items.count() == 3

    def test_update_items_recomputes_totals(self, quotation, products):
        updated = services.update_document(
            quotation.id,
            {"items": [{"product": products[2], "quantity": 1, "unit_price": Decimal("1000")}]},
        )

        assert updated.subtotal == Decimal("1000.00")
        assert updated.tax == Decimal("70.00")
        assert updated.total == Decimal("1070.00")
        assert updated.items.count() == 1

    def test_customer_change_resolves_name(self, quotation):
        from apps.crm.models import Customer

        other = Customer.objects.create(name="IT World Shop")

        updated = services.update_document(quotation.id, {"customer": other})

        assert updated.customer == other
        assert updated.customer_name == "IT World Shop"

    def test_removing_customer_clears_name(self, quotation):
        updated = services.update_document(quotation.id, {"customer": None, "customer_name": None})

        assert updated.customer is None
        assert updated.customer_name == ""

    def test_status_change_persists(self, quotation):
        services.update_document(quotation.id, {"status": Document.CONFIRMED})

        quotation.refresh_from_db()
        assert quotation.status == Document.CONFIRMED

    def test_unknown_document(self):
        with pytest.raises(NotFound):
            services.update_document(uuid.uuid4(), {"notes": "x"})


@pytest.mark.django_db
class TestConvertToReceipt:
    def test_creates_confirmed_receipt(self, quotation, admin_user):
        receipt = services.convert_to_receipt(quotation.id, admin_user)

        year = timezone.now().year
        assert receipt.doc_type == Document.RECEIPT
        assert receipt.doc_number == f"RC-{year}-001"
        assert receipt.status == Document.CONFIRMED
        assert receipt.converted_from_id == quotation.id
        assert receipt.created_by == admin_user
        assert receipt.customer_id == quotation.customer_id
        assert receipt.customer_name == quotation.customer_name
        assert receipt.notes == quotation.notes
        assert (receipt.subtotal, receipt.tax, receipt.total) == (
            quotation.subtotal,
            quotation.tax,
            quotation.total,
        )

        source_items = list(quotation.items.values_list("product_name", "quantity", "unit_price", "total"))
        receipt_items = list(receipt.items.values_list("product_name", "quantity", "unit_price", "total"))
        assert receipt_items == source_items

        quotation.refresh_from_db()
        assert quotation.status == Document.CONVERTED
        assert Document.objects.filter(doc_type=Document.RECEIPT).count() == 1

    def test_confirmed_quotation_can_be_converted(self, quotation, owner_user):
        quotation.confirm()
        quotation.save()

        services.convert_to_receipt(quotation.id, owner_user)

        quotation.refresh_from_db()
        assert quotation.status == Document.CONVERTED

    def test_second_conversion_fails(self, quotation, owner_user):
        services.convert_to_receipt(quotation.id, owner_user)

        with pytest.raises(InvalidOperation):
            services.convert_to_receipt(quotation.id, owner_user)

        assert Document.objects.filter(doc_type=Document.RECEIPT).count() == 1

    @pytest.mark.parametrize("doc_type", ["voi", "receipt"])
    def test_only_quotations(self, doc_type, line_items, owner_user):
        document = services.create_document(doc_type=doc_type, items=line_items, user=owner_user)
        before = Document.objects.count()

        with pytest.raises(InvalidOperation):
            services.convert_to_receipt(document.id, owner_user)

        assert Document.objects.count() == before

    def test_cancelled_quotation(self, quotation, owner_user):
        quotation.cancel()
        quotation.save()

        with pytest.raises(InvalidOperation):
            services.convert_to_receipt(quotation.id, owner_user)

    def test_unknown_document(self, owner_user):
        with pytest.raises(NotFound):
            services.convert_to_receipt(uuid.uuid4(), owner_user)


@pytest.mark.django_db
class TestSummary:
    def test_empty(self):
        summary = services.summarize_documents()

        assert summary.total_revenue == Decimal("0.00")
        assert summary.quotation_count == 0
        assert summary.voi_count == 0
        assert summary.receipt_count == 0

    def test_counts_and_confirmed_revenue(self, quotation, line_items, owner_user):
        services.convert_to_receipt(quotation.id, owner_user)
        services.create_document(doc_type="voi", items=line_items, user=owner_user)
        # Draft receipts do not count towards revenue
        services.create_document(doc_type="receipt", items=line_items, user=owner_user)

        summary = services.summarize_documents()

        assert summary.total_revenue == Decimal("52836.60")
        assert summary.quotation_count == 1
        assert summary.voi_count == 1
        assert summary.receipt_count == 2
