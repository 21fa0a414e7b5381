"""
Document workflows: creation, updates, conversion and the dashboard summary.

Views validate input with the serializers and then call into this module,
which owns numbering, totals and status transitions.
"""

import logging
from decimal import Decimal
from typing import NamedTuple

from django.db import IntegrityError, transaction
from django.db.models import Count, Sum
from django_fsm import can_proceed
from rest_framework.exceptions import NotFound, ValidationError

from apps.core.exceptions import ConstraintViolation, InvalidOperation

from .models import Document, DocumentItem
from .numbering import generate_doc_number, next_doc_number_from_highest
from .totals import MAX_AMOUNT, calculate_line_total, calculate_totals, to_money

logger = logging.getLogger(__name__)


class DocumentSummary(NamedTuple):
    total_revenue: Decimal
    quotation_count: int
    voi_count: int
    receipt_count: int


def get_document(document_id, for_update=False):
    """Fetch a document or raise NotFound."""
    queryset = Document.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=document_id)
    except Document.DoesNotExist:
        raise NotFound("Document not found.")


def build_line_items(items):
    """
    Normalize validated line items and compute each line's total.

    Each item is a mapping with ``product``, ``quantity`` and optionally
    ``product_name`` and ``unit_price``; missing values are taken from the
    product record. Client-supplied line totals are never trusted.
    """
    lines = []
    for item in items:
        product = item.get("product")
        product_name = item.get("product_name") or product.name
        unit_price = item.get("unit_price")
        if unit_price is None:
            unit_price = product.price

        unit_price = to_money(unit_price)
        total = calculate_line_total(item["quantity"], unit_price)
        if total > MAX_AMOUNT:
            raise ValidationError({"items": f"Line total for {product_name} is too large."})
        lines.append(
            {
                "product": product,
                "product_name": product_name,
                "quantity": item["quantity"],
                "unit_price": unit_price,
                "total": total,
            }
        )
    return lines


def _checked_totals(lines):
    totals = calculate_totals(lines)
    if totals.total > MAX_AMOUNT:
        raise ValidationError({"items": "Document total is too large."})
    return totals


def _write_items(document, lines):
    document.items.all().delete()
    DocumentItem.objects.bulk_create(
        [DocumentItem(document=document, position=position, **line) for position, line in enumerate(lines)]
    )


def _insert_numbered(document):
    """
    Assign a document number and insert the row.

    A collision on ``doc_number`` is retried once with a number derived from
    the highest sequence in use; a second collision raises ConstraintViolation.
    """
    document.doc_number = generate_doc_number(document.doc_type)
    try:
        with transaction.atomic():
            document.save(force_insert=True)
        return document
    except IntegrityError:
        logger.warning(
            "Document number %s already in use, retrying from highest sequence",
            document.doc_number,
        )

    document.doc_number = next_doc_number_from_highest(document.doc_type)
    try:
        with transaction.atomic():
            document.save(force_insert=True)
    except IntegrityError as exc:
        logger.error("Could not allocate a unique %s number: %s", document.doc_type, exc)
        raise ConstraintViolation() from exc
    return document


@transaction.atomic
def create_document(
    *,
    doc_type,
    items,
    user,
    customer=None,
    customer_name="",
    notes="",
    status=Document.DRAFT,
):
    """
    Create a numbered document with its line items and computed totals.

    Raises:
        ValidationError: if ``items`` is empty or ``status`` is not an
            initial status.
        ConstraintViolation: if no unique number could be allocated.
    """
    if not items:
        raise ValidationError({"items": "At least one line item is required."})
    if status not in (Document.DRAFT, Document.CONFIRMED):
        raise ValidationError({"status": "New documents must be draft or confirmed."})

    lines = build_line_items(items)
    totals = _checked_totals(lines)

    if customer is not None and not customer_name:
        customer_name = customer.name

    document = Document(
        doc_type=doc_type,
        customer=customer,
        customer_name=customer_name or "",
        subtotal=totals.subtotal,
        tax=totals.tax,
        total=totals.total,
        status=status,
        notes=notes or "",
        created_by=user,
    )
    _insert_numbered(document)
    _write_items(document, lines)

    logger.info(
        "Created %s %s (total %s) by %s",
        doc_type,
        document.doc_number,
        document.total,
        getattr(user, "username", None),
    )
    return document


def apply_status(document, target):
    """
    Move ``document`` to ``target`` through its declared transitions.

    Setting the current status is a no-op. ``converted`` is only reachable
    through conversion, and nothing returns to ``draft``.
    """
    if target == document.status:
        return

    transitions = {
        Document.CONFIRMED: document.confirm,
        Document.CANCELLED: document.cancel,
    }
    method = transitions.get(target)
    if method is None or not can_proceed(method):
        raise InvalidOperation(f"Cannot change status from {document.status} to {target}.")
    method()


@transaction.atomic
def update_document(document_id, changes):
    """
    Apply a partial update.

    ``changes`` may hold ``items``, ``customer``, ``customer_name``, ``notes``
    and ``status``; absent keys leave the stored values alone. Totals are
    recomputed only when ``items`` is present.
    """
    document = get_document(document_id, for_update=True)

    if "items" in changes:
        if not changes["items"]:
            raise ValidationError({"items": "At least one line item is required."})
        lines = build_line_items(changes["items"])
        totals = _checked_totals(lines)
        document.subtotal, document.tax, document.total = totals
        _write_items(document, lines)

    if "customer_name" in changes:
        document.customer_name = changes["customer_name"] or ""

    if "customer" in changes:
        document.customer = changes["customer"]
        if not changes.get("customer_name"):
            document.customer_name = document.customer.name if document.customer is not None else ""

    if "notes" in changes:
        document.notes = changes["notes"] or ""

    if "status" in changes:
        apply_status(document, changes["status"])

    document.save()
    return document


def delete_document(document_id):
    document = get_document(document_id)
    doc_number = document.doc_number
    document.delete()
    logger.info("Deleted document %s", doc_number)


@transaction.atomic
def convert_to_receipt(document_id, user):
    """
    Convert a quotation into a confirmed receipt.

    The receipt copies the customer, line items, totals and notes of the
    quotation and points back to it via ``converted_from``. The quotation row
    is locked for the duration, so concurrent conversions of the same
    quotation serialize and the second one fails.

    Raises:
        NotFound: no document with ``document_id``.
        InvalidOperation: the document is not a quotation, or it is already
            converted or cancelled.
    """
    source = get_document(document_id, for_update=True)

    if not source.is_quotation():
        raise InvalidOperation("Only quotations can be converted to receipts.")
    if source.status == Document.CONVERTED:
        raise InvalidOperation("This quotation has already been converted.")
    if not can_proceed(source.mark_converted):
        raise InvalidOperation(f"A {source.status} quotation cannot be converted.")

    receipt = Document(
        doc_type=Document.RECEIPT,
        customer_id=source.customer_id,
        customer_name=source.customer_name,
        subtotal=source.subtotal,
        tax=source.tax,
        total=source.total,
        status=Document.CONFIRMED,
        notes=source.notes,
        converted_from=source,
        created_by=user,
    )
    _insert_numbered(receipt)
    DocumentItem.objects.bulk_create(
        [
            DocumentItem(
                document=receipt,
                position=item.position,
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                total=item.total,
            )
            for item in source.items.all()
        ]
    )

    source.mark_converted()
    source.save(update_fields=["status"])

    logger.info(
        "Converted %s into %s by %s",
        source.doc_number,
        receipt.doc_number,
        getattr(user, "username", None),
    )
    return receipt


def summarize_documents():
    """Confirmed-receipt revenue and per-type document counts."""
    counts = dict(
        Document.objects.order_by()
        .values_list("doc_type")
        .annotate(count=Count("id"))
    )
    revenue = Document.objects.filter(
        doc_type=Document.RECEIPT, status=Document.CONFIRMED
    ).aggregate(revenue=Sum("total"))["revenue"]

    return DocumentSummary(
        total_revenue=to_money(revenue or 0),
        quotation_count=counts.get(Document.QUOTATION, 0),
        voi_count=counts.get(Document.VOI, 0),
        receipt_count=counts.get(Document.RECEIPT, 0),
    )
