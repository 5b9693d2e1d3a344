"""Dashboard figures and invoice list search"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, List

from invoicing.domain.aggregate import InvoiceAggregate
from invoicing.domain.money import ZERO, to_money

OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def total_revenue(invoices: Iterable[InvoiceAggregate]) -> Decimal:
    return to_money(sum((invoice.total for invoice in invoices), ZERO))


def month_revenue(invoices: Iterable[InvoiceAggregate], year: int, month: int) -> Decimal:
    return total_revenue(
        invoice
        for invoice in invoices
        if invoice.invoice_date is not None
        and invoice.invoice_date.year == year
        and invoice.invoice_date.month == month
    )


def recent_invoices(invoices: Iterable[InvoiceAggregate], limit: int = 5) -> List[InvoiceAggregate]:
    """Newest first by invoice date, then id"""
    ordered = sorted(
        invoices,
        key=lambda invoice: (invoice.invoice_date or OLDEST, invoice.id or 0),
        reverse=True,
    )
    return ordered[:limit]


def filter_invoices(invoices: Iterable[InvoiceAggregate], term: str) -> List[InvoiceAggregate]:
    """Case-insensitive match on number, customer name, email, phone or id; a blank term matches all"""
    invoices = list(invoices)
    search = (term or "").strip().lower()
    if not search:
        return invoices

    def matches(invoice: InvoiceAggregate) -> bool:
        haystack = (
            invoice.invoice_number,
            invoice.customer.name,
            invoice.customer.email,
            invoice.customer.phone,
            str(invoice.id) if invoice.id is not None else "",
        )
        return any(search in value.lower() for value in haystack)

    return [invoice for invoice in invoices if matches(invoice)]
