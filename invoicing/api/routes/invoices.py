"""Invoice API Routes

FastAPI routes for creating, listing, retrieving, updating, deleting
and printing invoices.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from invoicing.api.error import ClientError, ServerError
from invoicing.api.schemas.invoice_request import CreateInvoiceRequestSchema
from invoicing.app.services.pdf_service import CompanyProfile
from invoicing.app.use_cases.invoices.dtos import (
    InvoiceResponseDTO,
    InvoiceSummaryDTO,
    MessageResponseDTO,
)
from invoicing.app.use_cases.invoices.create_invoice import CreateInvoice
from invoicing.app.use_cases.invoices.delete_invoice import DeleteInvoice
from invoicing.app.use_cases.invoices.get_invoice import GetInvoice
from invoicing.app.use_cases.invoices.list_invoices import ListInvoices
from invoicing.app.use_cases.invoices.render_invoice_pdf import RenderInvoicePdf
from invoicing.app.use_cases.invoices.update_invoice import UpdateInvoice
from invoicing.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from invoicing.adapter.repositories.invoice_item_repository import SqlAlchemyInvoiceItemRepository
from invoicing.adapter.services.pdf_service import ReportLabPdfService
from invoicing.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from invoicing.depends import get_company_profile, get_session
from invoicing.libs.result import Error

router = APIRouter(prefix="/invoices", tags=["Invoices"])

ERROR_STATUS = {
    "INVOICE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_INVOICE": status.HTTP_400_BAD_REQUEST,
}

NOT_FOUND_RESPONSE = {
    "description": "Invoice not found",
    "content": {
        "application/json": {
            "example": {"Message": "Invoice not found", "Code": "INVOICE_NOT_FOUND"}
        }
    },
}

INVALID_INVOICE_RESPONSE = {
    "description": "Invalid invoice",
    "content": {
        "application/json": {
            "example": {
                "Message": "Invoice must have at least one item",
                "Code": "INVALID_INVOICE",
            }
        }
    },
}


def raise_for_error(error: Error):
    if error.code in ERROR_STATUS:
        raise ClientError(error, status_code=ERROR_STATUS[error.code])
    raise ServerError(error)


def repositories(session: AsyncSession):
    return (
        SqlAlchemyInvoiceRepository(session, number_prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX),
        SqlAlchemyInvoiceItemRepository(session),
    )


@router.get(
    "",
    response_model=List[InvoiceSummaryDTO],
    status_code=status.HTTP_200_OK,
)
async def list_invoices(session: AsyncSession = Depends(get_session)):
    """
    List all invoices, newest first.

    Customer fields are flat (`CustomerName`, `CustomerEmail`, ...) and every
    entry carries its `Items`.
    """
    invoice_repo, item_repo = repositories(session)

    use_case = ListInvoices(invoice_repo, item_repo)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def get_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    """
    Get one invoice with nested `Customer` and its `Items`.

    **Returns:**
    - 200: Invoice found
    - 404: Invoice not found
    """
    invoice_repo, item_repo = repositories(session)

    use_case = GetInvoice(invoice_repo, item_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={400: INVALID_INVOICE_RESPONSE},
)
async def create_invoice(
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice.

    Line amounts, `SubTotal` and `Total` are recomputed from `Quantity`,
    `Price` and `Discount`; any amounts sent by the client are ignored.
    The invoice number and date are assigned by the server.

    **Returns:**
    - 200: Canonical stored invoice
    - 400: No items, or customer name/phone missing
    """
    invoice_repo, item_repo = repositories(session)

    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateInvoice(uow, invoice_repo, item_repo)
    result = await use_case.execute(request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/{invoice_id}",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={400: INVALID_INVOICE_RESPONSE, 404: NOT_FOUND_RESPONSE},
)
async def update_invoice(
    invoice_id: int,
    request: CreateInvoiceRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Replace an invoice's customer, discount and items.

    The invoice number and date are kept.
    """
    invoice_repo, item_repo = repositories(session)

    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateInvoice(uow, invoice_repo, item_repo)
    result = await use_case.execute(invoice_id, request.to_command())

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{invoice_id}",
    response_model=MessageResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: NOT_FOUND_RESPONSE},
)
async def delete_invoice(invoice_id: int, session: AsyncSession = Depends(get_session)):
    """Delete an invoice and all of its items."""
    invoice_repo, item_repo = repositories(session)

    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteInvoice(uow, invoice_repo, item_repo)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{invoice_id}/pdf",
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF document"},
        404: NOT_FOUND_RESPONSE,
    },
)
async def download_invoice_pdf(
    invoice_id: int,
    session: AsyncSession = Depends(get_session),
    company: CompanyProfile = Depends(get_company_profile),
):
    """
    Download a stored invoice as a PDF file.

    **Returns:**
    - 200: PDF file as binary response
    - 404: Invoice not found
    """
    invoice_repo, item_repo = repositories(session)
    pdf_service = ReportLabPdfService()

    use_case = RenderInvoicePdf(invoice_repo, item_repo, pdf_service, company)
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return Response(
        content=result.value.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={result.value.filename}"},
    )
