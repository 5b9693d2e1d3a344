from .unit_of_work import UnitOfWork
from .pdf_service import PdfService, CompanyProfile

__all__ = [
    "UnitOfWork",
    "PdfService",
    "CompanyProfile",
]
