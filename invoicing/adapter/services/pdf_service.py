"""ReportLab PDF Generation Service Implementation

Implements invoice PDF rendering using ReportLab.
"""

from decimal import Decimal
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from invoicing.app.services.pdf_service import CompanyProfile, PdfService
from invoicing.domain.aggregate import InvoiceAggregate
from invoicing.domain.base import utc_now

ACCENT = colors.HexColor("#2196F3")
MUTED = colors.HexColor("#646464")

COLUMN_WIDTHS = [40 * mm, 60 * mm, 15 * mm, 27 * mm, 28 * mm]

FOOTER_TERMS = (
    "Terms: Payment due upon receipt. "
    "Warranty covers manufacturing defects for 14 days."
)


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: company header and INVOICE title, invoice number and date,
    BILLED TO block, items table (header repeated on every page),
    subtotal / discount / total, thank-you footer.
    """

    def render_invoice(self, invoice: InvoiceAggregate, company: CompanyProfile) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=20 * mm,
            leftMargin=20 * mm,
            topMargin=20 * mm,
            bottomMargin=20 * mm,
            title=f"Invoice {invoice.invoice_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        company_style = ParagraphStyle(
            "CompanyStyle",
            parent=styles["Heading1"],
            fontSize=20,
            textColor=ACCENT,
            spaceAfter=4,
        )
        muted_style = ParagraphStyle(
            "MutedStyle",
            parent=styles["Normal"],
            fontSize=10,
            textColor=MUTED,
        )
        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=24,
            textColor=ACCENT,
            alignment=2,
        )
        section_style = ParagraphStyle(
            "SectionStyle",
            parent=styles["Heading2"],
            fontSize=14,
            textColor=ACCENT,
            spaceBefore=6,
            spaceAfter=4,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=11,
        )
        cell_style = ParagraphStyle(
            "CellStyle",
            parent=styles["Normal"],
            fontSize=9,
        )

        # Header - company info and INVOICE title
        header = Table(
            [
                [Paragraph(escape(company.name), company_style), Paragraph("INVOICE", title_style)],
                [Paragraph(escape(company.address), muted_style), ""],
                [Paragraph(escape(company.contact), muted_style), ""],
            ],
            colWidths=[110 * mm, 60 * mm],
        )
        header.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        elements.append(header)
        elements.append(Spacer(1, 8 * mm))

        # Invoice details
        invoice_date = invoice.invoice_date or utc_now()
        elements.append(Paragraph(f"Invoice No: {escape(invoice.invoice_number)}", normal_style))
        elements.append(Paragraph(f"Date: {invoice_date.strftime('%Y-%m-%d')}", normal_style))
        elements.append(Spacer(1, 6 * mm))

        # Customer
        elements.append(Paragraph("BILLED TO:", section_style))
        elements.append(Paragraph(escape(invoice.customer.name), normal_style))
        elements.append(Paragraph(escape(invoice.customer.phone), normal_style))
        if invoice.customer.email:
            elements.append(Paragraph(escape(invoice.customer.email), normal_style))
        if invoice.customer.address:
            elements.append(Paragraph(escape(invoice.customer.address), normal_style))
        elements.append(Spacer(1, 8 * mm))

        # Items table
        line_data = [["Product", "Description", "Qty", "Price", "Amount"]]
        for item in invoice.items:
            line_data.append(
                [
                    Paragraph(escape(item.product_name), cell_style),
                    Paragraph(escape(item.description), cell_style),
                    str(item.quantity),
                    self._money(company.currency, item.price),
                    self._money(company.currency, item.amount),
                ]
            )

        line_table = Table(line_data, colWidths=COLUMN_WIDTHS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    # Header row
                    ("BACKGROUND", (0, 0), (-1, 0), ACCENT),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    # Data rows
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("LINEBELOW", (0, 1), (-1, -1), 0.25, colors.HexColor("#DDDDDD")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 6 * mm))

        # Totals
        totals = [["Subtotal:", self._money(company.currency, invoice.sub_total)]]
        if invoice.discount > 0:
            totals.append(["Discount:", f"-{self._money(company.currency, invoice.discount)}"])
        totals.append(["Total:", self._money(company.currency, invoice.total)])

        totals_table = Table(totals, colWidths=[30 * mm, 40 * mm], hAlign="RIGHT")
        totals_table.setStyle(
            TableStyle(
                [
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("FONTSIZE", (0, 0), (-1, -1), 11),
                    ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, -1), (-1, -1), 13),
                    ("TEXTCOLOR", (0, -1), (-1, -1), ACCENT),
                    ("LINEABOVE", (0, -1), (-1, -1), 1.2, ACCENT),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)
        elements.append(Spacer(1, 15 * mm))

        # Footer
        elements.append(Paragraph("Thank you for your business!", muted_style))
        elements.append(Paragraph(FOOTER_TERMS, muted_style))

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes

    @staticmethod
    def _money(currency: str, value: Decimal) -> str:
        return f"{currency} {value:,.2f}"
