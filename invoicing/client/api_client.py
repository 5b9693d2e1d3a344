"""Invoice API Client

Async HTTP client for the invoice REST API. Responses are normalized
through the transport mapping into InvoiceAggregate instances.
"""

import logging
from typing import List, Optional

import httpx

from invoicing.client.mapping import invoice_from_wire, invoice_to_wire
from invoicing.domain.aggregate import InvoiceAggregate
from invoicing.domain.errors import InvalidInvoice, NotFound, StorageError

logger = logging.getLogger(__name__)


class InvoiceApiClient:
    """
    Client for /invoices endpoints

    Error mapping:
    - 404 -> NotFound
    - 400 -> InvalidInvoice
    - any other error status, or a transport failure -> StorageError
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the API client

        Args:
            base_url: API root, e.g. http://localhost:8000/api
                      (defaults to ApplicationConfig.API_BASE_URL)
            client: Pre-configured httpx.AsyncClient; base_url is ignored when given
        """
        if client is None:
            if base_url is None:
                from config import ApplicationConfig

                base_url = ApplicationConfig.API_BASE_URL
            client = httpx.AsyncClient(base_url=base_url)
        self.client = client

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def aclose(self):
        await self.client.aclose()

    async def list_invoices(self) -> List[InvoiceAggregate]:
        response = await self._request("GET", "/invoices")
        payload = self._json(response)
        if not isinstance(payload, list):
            logger.warning(f"Expected a list of invoices, got {type(payload).__name__}")
            return []
        return [invoice_from_wire(item) for item in payload]

    async def get_invoice(self, invoice_id: int) -> InvoiceAggregate:
        response = await self._request("GET", f"/invoices/{invoice_id}")
        return invoice_from_wire(self._json(response))

    async def create_invoice(self, draft: InvoiceAggregate) -> InvoiceAggregate:
        response = await self._request("POST", "/invoices", json=invoice_to_wire(draft))
        return invoice_from_wire(self._json(response))

    async def update_invoice(self, invoice_id: int, draft: InvoiceAggregate) -> InvoiceAggregate:
        response = await self._request("PUT", f"/invoices/{invoice_id}", json=invoice_to_wire(draft))
        return invoice_from_wire(self._json(response))

    async def delete_invoice(self, invoice_id: int) -> str:
        response = await self._request("DELETE", f"/invoices/{invoice_id}")
        return self._message(response) or "Invoice deleted successfully"

    async def download_pdf(self, invoice_id: int) -> bytes:
        response = await self._request("GET", f"/invoices/{invoice_id}/pdf")
        return response.content

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise StorageError(f"Could not reach invoice API: {e}") from e

        if response.status_code == 404:
            raise NotFound(self._message(response) or "Invoice not found")
        if response.status_code == 400:
            raise InvalidInvoice(self._message(response) or "Invalid invoice")
        if response.is_error:
            logger.error(f"{method} {path} returned {response.status_code}: {response.text}")
            raise StorageError(
                self._message(response) or f"Invoice API returned {response.status_code}"
            )
        return response

    @staticmethod
    def _json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise StorageError(f"Invoice API returned a non-JSON body: {e}") from e

    @staticmethod
    def _message(response: httpx.Response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get("Message") or body.get("message")
        return None
