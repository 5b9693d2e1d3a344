"""Invoice Item Repository Interface

Defines the contract for invoice item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List
from invoicing.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence

    Items are only ever read or written through their parent invoice.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all line items for an invoice, in insertion order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem rows
        """
        pass

    @abstractmethod
    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        """
        Retrieve line items for several invoices in one query

        Args:
            invoice_ids: Invoice IDs

        Returns:
            Mapping of invoice ID to its items (missing IDs map to nothing)
        """
        pass

    @abstractmethod
    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        """
        Create line items

        Args:
            items: InvoiceItem rows with invoice_id set

        Returns:
            Created items with generated IDs
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        """
        Delete all line items of an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            Number of deleted rows
        """
        pass
