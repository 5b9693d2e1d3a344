"""DeleteInvoice Use Case

Removes an invoice and all of its items atomically.
"""

import logging

from invoicing.libs.result import Result, Return, Error
from invoicing.app.services.unit_of_work import UnitOfWork
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from .dtos import MessageResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Items are deleted explicitly in the same transaction as the header;
    the ON DELETE CASCADE foreign key covers any row written elsewhere.
    No soft delete.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, invoice_id: int) -> Result[MessageResponseDTO]:
        """
        Execute invoice deletion

        Args:
            invoice_id: Invoice ID

        Returns:
            Result[MessageResponseDTO]: Success message or error

        Errors:
            INVOICE_NOT_FOUND: No invoice with that id
            STORAGE_ERROR: Delete failed; nothing was removed
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

            removed_items = await self.item_repo.delete_by_invoice_id(invoice_id)
            await self.invoice_repo.delete(invoice)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )

        logger.info(f"Deleted invoice id={invoice_id} and {removed_items} item(s)")
        return Return.ok(MessageResponseDTO(message="Invoice deleted successfully"))
