"""UpdateInvoice Use Case

Replaces the customer, discount and items of an existing invoice,
recomputing totals exactly as CreateInvoice does.
"""

import logging

from invoicing.libs.result import Result, Return, Error
from invoicing.app.services.unit_of_work import UnitOfWork
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.domain.errors import InvalidInvoice
from .create_invoice import build_aggregate, invalid_invoice_error, load_committed, to_item_rows
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Replace the contents of an invoice

    Business Rules:
    1. Same validation and recomputation as CreateInvoice
    2. id, invoice_number and invoice_date never change
    3. Items are replaced wholesale, in one transaction with the header
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

    async def execute(
        self, invoice_id: int, command: CreateInvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice update

        Args:
            invoice_id: Invoice to replace
            command: New customer, discount and items

        Returns:
            Result[InvoiceResponseDTO]: Success with canonical invoice or error

        Errors:
            INVALID_INVOICE: No items, customer name/phone missing, or amounts out of range
            INVOICE_NOT_FOUND: No invoice with that id
            STORAGE_ERROR: Persistence failed; prior state kept
        """
        try:
            aggregate = build_aggregate(command)
            aggregate.validate_for_commit()
        except InvalidInvoice as e:
            return Return.err(invalid_invoice_error(e))

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

            invoice.customer_name = aggregate.customer.name
            invoice.customer_email = aggregate.customer.email
            invoice.customer_phone = aggregate.customer.phone
            invoice.customer_address = aggregate.customer.address
            invoice.sub_total = aggregate.sub_total
            invoice.discount = aggregate.discount
            invoice.total = aggregate.total
            await self.invoice_repo.update(invoice)

            await self.item_repo.delete_by_invoice_id(invoice_id)
            await self.item_repo.create_many(to_item_rows(invoice_id, aggregate))

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )

        logger.info(f"Updated invoice {invoice.invoice_number} (id={invoice_id})")
        return await load_committed(self.invoice_repo, self.item_repo, invoice, aggregate)
