"""
Money arithmetic for document line items and totals.

All amounts are ``Decimal`` values quantized to the cent with half-up
rounding.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping, NamedTuple, Optional

from django.conf import settings

CENT = Decimal("0.01")

# Largest amount a Decimal(12, 2) column holds.
MAX_AMOUNT = Decimal("9999999999.99")


class DocumentTotals(NamedTuple):
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def to_money(value) -> Decimal:
    """Convert an int, float, str or Decimal amount to a cent-quantized Decimal."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def calculate_line_total(quantity: int, unit_price) -> Decimal:
    """Return ``quantity * unit_price`` rounded to the cent."""
    return to_money(Decimal(quantity) * to_money(unit_price))


def calculate_tax(subtotal, tax_rate: Optional[Decimal] = None) -> Decimal:
    if tax_rate is None:
        tax_rate = settings.DOCUMENT_TAX_RATE
    return to_money(to_money(subtotal) * Decimal(str(tax_rate)))


def calculate_totals(
    items: Iterable[Mapping], tax_rate: Optional[Decimal] = None
) -> DocumentTotals:
    """
    Sum line item totals and apply tax.

    Args:
        items: Line items, each a mapping with a ``total`` amount.
        tax_rate: Override for ``settings.DOCUMENT_TAX_RATE``.

    Returns:
        DocumentTotals(subtotal, tax, total)
    """
    subtotal = sum((to_money(item["total"]) for item in items), Decimal("0.00"))
    subtotal = to_money(subtotal)
    tax = calculate_tax(subtotal, tax_rate)
    return DocumentTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)
