"""Invoice Domain Errors"""


class InvoiceError(Exception):
    """Base class for invoicing errors"""


class InvalidInvoice(InvoiceError):
    """Invoice failed commit validation"""


class EmptyInvoice(InvalidInvoice):
    """Invoice has no line items"""


class MissingCustomerInfo(InvalidInvoice):
    """Customer name or phone is blank"""


class AmountOutOfRange(InvalidInvoice):
    """Quantity, price or a derived amount exceeds what can be stored"""


class IndexOutOfRange(InvoiceError, IndexError):
    """Line item index does not exist"""


class NotFound(InvoiceError):
    """Invoice id does not resolve"""


class StorageError(InvoiceError):
    """Store unavailable or write failure"""


class MappingError(InvoiceError):
    """Wire payload value could not be reconciled with the internal model"""


class SubmissionInProgress(InvoiceError):
    """A submission is already in flight for this draft"""
