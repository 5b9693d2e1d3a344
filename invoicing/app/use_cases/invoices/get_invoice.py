"""Get Invoice Use Case

Retrieves one invoice with its customer and items.
"""

from invoicing.libs.result import Result, Return, Error
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.domain.aggregate import InvoiceAggregate
from .dtos import InvoiceResponseDTO


class GetInvoice:
    """
    Get Invoice Use Case

    Read-only. A missing id is always an error, never an empty success.
    """

    def __init__(self, invoice_repo: InvoiceRepository, item_repo: InvoiceItemRepository):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceResponseDTO]:
        """
        Execute get invoice operation

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[InvoiceResponseDTO]: Success with invoice or error

        Errors:
            INVOICE_NOT_FOUND: No invoice with that id
            STORAGE_ERROR: Store unavailable
        """
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message="Invoice not found",
                        reason=f"No invoice with id {invoice_id}",
                    )
                )
            items = await self.item_repo.get_by_invoice_id(invoice_id)
        except Exception as e:
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to fetch invoice",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoiceResponseDTO.from_aggregate(InvoiceAggregate.from_entities(invoice, items))
        )
