"""List Invoices Use Case

Returns every invoice, newest first, each with its items.
"""

from typing import List

from invoicing.libs.result import Result, Return, Error
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.domain.aggregate import InvoiceAggregate
from .dtos import InvoiceSummaryDTO


class ListInvoices:
    """
    List Invoices Use Case

    Read-only; items for all invoices are loaded with a single query.
    """

    def __init__(self, invoice_repo: InvoiceRepository, item_repo: InvoiceItemRepository):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self) -> Result[List[InvoiceSummaryDTO]]:
        """
        Execute list operation

        Returns:
            Result[List[InvoiceSummaryDTO]]: Invoices ordered by invoice_date desc

        Errors:
            STORAGE_ERROR: Store unavailable
        """
        try:
            invoices = await self.invoice_repo.list_all()
            items_by_invoice = await self.item_repo.get_by_invoice_ids(
                [invoice.id for invoice in invoices]
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to fetch invoices",
                    reason=str(e),
                )
            )

        return Return.ok(
            [
                InvoiceSummaryDTO.from_aggregate(
                    InvoiceAggregate.from_entities(invoice, items_by_invoice.get(invoice.id, []))
                )
                for invoice in invoices
            ]
        )
