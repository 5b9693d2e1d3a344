"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

import logging
from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.domain.invoice import Invoice
from invoicing.domain.invoice_number import DEFAULT_PREFIX, new_invoice_number

logger = logging.getLogger(__name__)

MAX_NUMBER_ATTEMPTS = 5


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession, number_prefix: str = DEFAULT_PREFIX):
        self.session = session
        self.number_prefix = number_prefix

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Invoice]:
        statement = select(Invoice).order_by(Invoice.invoice_date.desc(), Invoice.id.desc())
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def generate_invoice_number(self) -> str:
        """
        Generate a unique invoice number

        Format: INV-yyyyMMddHHmmssfff-NNN (see invoicing.domain.invoice_number).
        Regenerates if the store already holds the candidate.

        Returns:
            Unique invoice number string

        Raises:
            RuntimeError: If no free number was found
        """
        for _ in range(MAX_NUMBER_ATTEMPTS):
            candidate = new_invoice_number(self.number_prefix)
            if await self.get_by_invoice_number(candidate) is None:
                return candidate
            logger.warning(f"Invoice number collision on {candidate}, regenerating")
        raise RuntimeError(
            f"Could not generate a unique invoice number after {MAX_NUMBER_ATTEMPTS} attempts"
        )
