"""Invoice Draft Editor

Client-side editing session for a single invoice draft: product
selection, line editing, discount, customer details, preview, submission
and local PDF export.
"""

import logging
import random
import time
from typing import Optional

from invoicing.app.services.pdf_service import CompanyProfile, PdfService
from invoicing.client.api_client import InvoiceApiClient
from invoicing.client.catalog import ProductCatalog
from invoicing.domain.aggregate import Customer, InvoiceAggregate, LineItem
from invoicing.domain.base import utc_now
from invoicing.domain.errors import (
    AmountOutOfRange,
    EmptyInvoice,
    InvalidInvoice,
    InvoiceError,
    SubmissionInProgress,
)

logger = logging.getLogger(__name__)

EMPTY_INVOICE_MESSAGE = "Please add at least one product"
MISSING_CUSTOMER_MESSAGE = "Please fill in all required customer details"
SUBMIT_FAILED_MESSAGE = "Error creating invoice. Please try again."


def provisional_invoice_number() -> str:
    """Display-only number for a fresh draft; the server assigns the real one"""
    return f"INV-{int(time.time() * 1000)}-{random.randint(0, 999)}"


class InvoiceEditor:
    """
    Editing session for one draft invoice

    While a submission is in flight, any further submit or draft mutation
    raises SubmissionInProgress.
    """

    def __init__(
        self,
        api: InvoiceApiClient,
        catalog: Optional[ProductCatalog] = None,
        pdf_service: Optional[PdfService] = None,
        company: Optional[CompanyProfile] = None,
    ):
        self.api = api
        self.catalog = catalog or ProductCatalog()
        self.pdf_service = pdf_service
        self.company = company
        self.is_submitting = False
        self.reset()

    def reset(self) -> None:
        self._ensure_idle()
        self.draft = InvoiceAggregate(
            invoice_number=provisional_invoice_number(),
            invoice_date=utc_now(),
        )
        self.selected_product_id: Optional[int] = None
        self.selected_quantity = 1
        self.show_preview = False
        self.error_message: Optional[str] = None

    # Product selection

    def select_product(self, product_id: int, quantity: int = 1) -> None:
        self.selected_product_id = product_id
        self.selected_quantity = quantity

    def add_selected_product(self) -> bool:
        """
        Add the selected product to the draft

        Returns False (and changes nothing) when the selection is not in the
        catalog. The selection is cleared either way.
        """
        self._ensure_idle()
        product = None
        if self.selected_product_id is not None:
            product = self.catalog.get(self.selected_product_id)

        added = False
        if product is not None:
            self.draft.add_item(product, self.selected_quantity)
            added = True
        else:
            logger.debug(f"Product {self.selected_product_id} not in catalog, nothing added")

        self.selected_product_id = None
        self.selected_quantity = 1
        return added

    # Draft edits

    def remove_item(self, index: int) -> LineItem:
        self._ensure_idle()
        return self.draft.remove_item(index)

    def update_item_quantity(self, index: int, quantity: int) -> LineItem:
        self._ensure_idle()
        return self.draft.update_item_quantity(index, quantity)

    def set_discount(self, value) -> None:
        self._ensure_idle()
        self.draft.set_discount(value)

    def set_customer(self, **fields) -> Customer:
        self._ensure_idle()
        unknown = set(fields) - set(Customer.model_fields)
        if unknown:
            raise ValueError(f"Unknown customer field(s): {', '.join(sorted(unknown))}")
        self.draft.customer = self.draft.customer.model_copy(update=fields)
        return self.draft.customer

    # Preview

    def open_preview(self) -> bool:
        if not self._validate():
            return False
        self.show_preview = True
        return True

    def close_preview(self) -> None:
        self.show_preview = False

    # Submission

    async def submit(self) -> Optional[InvoiceAggregate]:
        """
        Validate locally, then create the invoice through the API

        Returns:
            The canonical stored invoice, or None if validation or the
            request failed (see error_message). A failed request keeps the draft.

        Raises:
            SubmissionInProgress: A submission is already running
        """
        self._ensure_idle()
        if not self._validate():
            return None

        self.is_submitting = True
        try:
            created = await self.api.create_invoice(self.draft)
        except InvoiceError as e:
            logger.error(f"Error creating invoice: {e}")
            self.error_message = SUBMIT_FAILED_MESSAGE
            return None
        finally:
            self.is_submitting = False

        logger.info(f"Invoice {created.invoice_number} created")
        self.reset()
        return created

    # Export

    def export_pdf(self) -> bytes:
        """Render the current draft locally, without touching the server"""
        if self.pdf_service is None:
            from invoicing.adapter.services.pdf_service import ReportLabPdfService

            self.pdf_service = ReportLabPdfService()
        if self.company is None:
            from config import ApplicationConfig

            self.company = CompanyProfile(
                name=ApplicationConfig.COMPANY_NAME,
                address=ApplicationConfig.COMPANY_ADDRESS,
                contact=ApplicationConfig.COMPANY_CONTACT,
                currency=ApplicationConfig.CURRENCY,
            )
        return self.pdf_service.render_invoice(self.draft, self.company)

    def _validate(self) -> bool:
        try:
            self.draft.validate_for_commit()
        except EmptyInvoice:
            self.error_message = EMPTY_INVOICE_MESSAGE
            return False
        except AmountOutOfRange as e:
            self.error_message = str(e)
            return False
        except InvalidInvoice:
            self.error_message = MISSING_CUSTOMER_MESSAGE
            return False
        self.error_message = None
        return True

    def _ensure_idle(self) -> None:
        if self.is_submitting:
            raise SubmissionInProgress("An invoice submission is already in progress")
