"""Unit tests for RenderInvoicePdf use case"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from invoicing.app.services.pdf_service import CompanyProfile
from invoicing.app.use_cases.invoices.render_invoice_pdf import RenderInvoicePdf


@pytest.fixture
def company():
    return CompanyProfile(name="MC Computers", address="Colombo", contact="+94 11 234 5678")


@pytest.fixture
def mock_pdf_service():
    service = MagicMock()
    service.render_invoice = MagicMock(return_value=b"%PDF-1.4 fake")
    return service


@pytest.mark.asyncio
class TestRenderInvoicePdf:
    async def test_render_pdf(
        self, mock_invoice_repo, mock_item_repo, mock_pdf_service, company, stored_invoice, stored_items
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)
        mock_item_repo.get_by_invoice_id = AsyncMock(return_value=stored_items)

        use_case = RenderInvoicePdf(mock_invoice_repo, mock_item_repo, mock_pdf_service, company)
        result = await use_case.execute(1)

        assert result.is_ok()
        assert result.value.content == b"%PDF-1.4 fake"
        assert result.value.filename == "invoice-INV-20251023224923123-042.pdf"
        rendered, passed_company = mock_pdf_service.render_invoice.call_args.args
        assert rendered.invoice_number == stored_invoice.invoice_number
        assert len(rendered.items) == 2
        assert passed_company is company

    async def test_missing_invoice(self, mock_invoice_repo, mock_item_repo, mock_pdf_service, company):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        use_case = RenderInvoicePdf(mock_invoice_repo, mock_item_repo, mock_pdf_service, company)
        result = await use_case.execute(1)

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_pdf_service.render_invoice.assert_not_called()

    async def test_renderer_failure(
        self, mock_invoice_repo, mock_item_repo, mock_pdf_service, company, stored_invoice, stored_items
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)
        mock_item_repo.get_by_invoice_id = AsyncMock(return_value=stored_items)
        mock_pdf_service.render_invoice.side_effect = RuntimeError("font not found")

        use_case = RenderInvoicePdf(mock_invoice_repo, mock_item_repo, mock_pdf_service, company)
        result = await use_case.execute(1)

        assert result.error.code == "PDF_RENDER_FAILED"
        assert result.error.reason == "font not found"
