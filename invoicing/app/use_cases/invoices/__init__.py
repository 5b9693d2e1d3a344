"""Invoice use cases"""
from .list_invoices import ListInvoices
from .get_invoice import GetInvoice
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .render_invoice_pdf import RenderInvoicePdf
from .dtos import (
    InvoiceItemCommandDTO,
    CreateInvoiceCommandDTO,
    InvoiceItemDTO,
    CustomerDTO,
    InvoiceResponseDTO,
    InvoiceSummaryDTO,
    MessageResponseDTO,
    InvoicePdfDTO,
)

__all__ = [
    "ListInvoices",
    "GetInvoice",
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "RenderInvoicePdf",
    "InvoiceItemCommandDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceItemDTO",
    "CustomerDTO",
    "InvoiceResponseDTO",
    "InvoiceSummaryDTO",
    "MessageResponseDTO",
    "InvoicePdfDTO",
]
