"""RenderInvoicePdf Use Case

Renders a stored invoice as a downloadable PDF.
"""

import logging

from invoicing.libs.result import Result, Return, Error
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.app.services.pdf_service import CompanyProfile, PdfService
from invoicing.domain.aggregate import InvoiceAggregate
from invoicing.domain.base import utc_now
from .dtos import InvoicePdfDTO

logger = logging.getLogger(__name__)


class RenderInvoicePdf:
    """
    Use Case: Render invoice PDF

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve its items
    3. Render PDF using PDF service
    4. Return document bytes with a download filename
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        pdf_service: PdfService,
        company: CompanyProfile,
    ):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.pdf_service = pdf_service
        self.company = company

    async def execute(self, invoice_id: int) -> Result[InvoicePdfDTO]:
        """
        Execute PDF rendering

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoicePdfDTO]: Success with PDF bytes or error

        Errors:
            INVOICE_NOT_FOUND: No invoice with that id
            PDF_RENDER_FAILED: Loading or rendering failed
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
            aggregate = InvoiceAggregate.from_entities(invoice, items)

            pdf_bytes = self.pdf_service.render_invoice(aggregate, self.company)

        except Exception as e:
            logger.error(f"Failed to render PDF for invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="PDF_RENDER_FAILED",
                    message="Failed to render invoice PDF",
                    reason=str(e),
                )
            )

        return Return.ok(
            InvoicePdfDTO(
                invoice_id=invoice.id,
                invoice_number=invoice.invoice_number,
                filename=f"invoice-{invoice.invoice_number}.pdf",
                content=pdf_bytes,
                generated_at=utc_now(),
            )
        )
