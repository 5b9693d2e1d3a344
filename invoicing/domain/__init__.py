from .base import BaseModel
from .invoice import Invoice
from .invoice_item import InvoiceItem
from .aggregate import Customer, Product, LineItem, InvoiceAggregate
from .errors import (
    InvoiceError,
    InvalidInvoice,
    EmptyInvoice,
    MissingCustomerInfo,
    AmountOutOfRange,
    IndexOutOfRange,
    NotFound,
    StorageError,
    MappingError,
    SubmissionInProgress,
)

__all__ = [
    "BaseModel",
    "Invoice",
    "InvoiceItem",
    "Customer",
    "Product",
    "LineItem",
    "InvoiceAggregate",
    "InvoiceError",
    "InvalidInvoice",
    "EmptyInvoice",
    "MissingCustomerInfo",
    "AmountOutOfRange",
    "IndexOutOfRange",
    "NotFound",
    "StorageError",
    "MappingError",
    "SubmissionInProgress",
]
