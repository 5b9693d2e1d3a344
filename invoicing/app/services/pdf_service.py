"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from invoicing.domain.aggregate import InvoiceAggregate


@dataclass(frozen=True)
class CompanyProfile:
    """Seller details printed on the invoice header"""

    name: str
    address: str
    contact: str
    currency: str = "LKR"


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders finalized invoices or drafts; never touches stored state.
    """

    @abstractmethod
    def render_invoice(self, invoice: InvoiceAggregate, company: CompanyProfile) -> bytes:
        """
        Render an invoice as a PDF document

        Args:
            invoice: Invoice with customer, items and totals
            company: Seller details for the header

        Returns:
            PDF document as bytes
        """
        pass
