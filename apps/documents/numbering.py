"""
Document number generation.

Numbers look like ``QT-2024-007``: a per-type prefix, the four-digit year the
document was created in, and a three-digit sequence that restarts each year.
Generation only reads; the caller inserts the row and relies on the unique
constraint on ``doc_number`` to catch concurrent writers.
"""

import logging

from django.conf import settings
from django.utils import timezone

from .models import Document

logger = logging.getLogger(__name__)


def get_prefix(doc_type):
    try:
        return settings.DOCUMENT_NUMBER_PREFIXES[doc_type]
    except KeyError:
        raise ValueError(f"Unknown document type: {doc_type}")


def format_doc_number(prefix, year, sequence):
    return f"{prefix}-{year}-{sequence:03d}"


def generate_doc_number(doc_type, year=None):
    """
    Return the next number for ``doc_type`` in ``year`` (default: this year).

    The sequence is one more than the number of documents of that type
    created in that year, so the first document of a year gets ``001``.
    """
    prefix = get_prefix(doc_type)
    if year is None:
        year = timezone.now().year

    count = Document.objects.filter(doc_type=doc_type, created_at__year=year).count()
    return format_doc_number(prefix, year, count + 1)


def next_doc_number_from_highest(doc_type, year=None):
    """
    Return a number one past the highest sequence already used.

    Used after a collision, when deleted documents or a concurrent insert make
    the count-based sequence land on a number that is already taken.
    """
    prefix = get_prefix(doc_type)
    if year is None:
        year = timezone.now().year

    stem = f"{prefix}-{year}-"
    highest = 0
    for doc_number in Document.objects.filter(doc_number__startswith=stem).values_list(
        "doc_number", flat=True
    ):
        try:
            highest = max(highest, int(doc_number[len(stem) :]))
        except ValueError:
            logger.warning("Ignoring malformed document number %s", doc_number)

    return format_doc_number(prefix, year, highest + 1)
