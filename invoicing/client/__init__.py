from .api_client import InvoiceApiClient
from .catalog import ProductCatalog
from .editor import InvoiceEditor
from .mapping import invoice_from_wire, invoice_to_wire

__all__ = [
    "InvoiceApiClient",
    "ProductCatalog",
    "InvoiceEditor",
    "invoice_from_wire",
    "invoice_to_wire",
]
