"""Unit tests for ReportLabPdfService"""

from datetime import datetime
from decimal import Decimal

from invoicing.adapter.services.pdf_service import ReportLabPdfService
from invoicing.app.services.pdf_service import CompanyProfile
from invoicing.domain.aggregate import Customer, InvoiceAggregate, Product

COMPANY = CompanyProfile(
    name="MC Computers",
    address="123 Tech Avenue, Colombo 07, Sri Lanka",
    contact="+94 11 234 5678 | info@mcccomputers.lk",
)


def make_invoice(lines: int = 1) -> InvoiceAggregate:
    invoice = InvoiceAggregate(
        invoice_number="INV-20251023224923123-042",
        invoice_date=datetime(2025, 10, 23),
        customer=Customer(name="John <Smith> & Sons", phone="555", address="Main St"),
    )
    for index in range(lines):
        invoice.add_item(
            Product(
                id=index + 1,
                name=f"Product {index}",
                description="A rather long description that has to wrap inside its table cell " * 2,
                price=Decimal("10.00"),
            )
        )
    return invoice


class TestReportLabPdfService:
    def test_renders_pdf_bytes(self):
        pdf = ReportLabPdfService().render_invoice(make_invoice(), COMPANY)

        assert pdf.startswith(b"%PDF")

    def test_renders_multi_page_invoice(self):
        short = ReportLabPdfService().render_invoice(make_invoice(1), COMPANY)
        long = ReportLabPdfService().render_invoice(make_invoice(80), COMPANY)

        assert long.startswith(b"%PDF")
        assert len(long) > len(short)

    def test_discount_line_optional(self):
        invoice = make_invoice(2)
        invoice.set_discount(5)

        pdf = ReportLabPdfService().render_invoice(invoice, COMPANY)

        assert pdf.startswith(b"%PDF")
