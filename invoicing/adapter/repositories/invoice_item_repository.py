"""SQLAlchemy Invoice Item Repository Implementation

Implements invoice item persistence using SQLAlchemy async session.
"""

from collections import defaultdict
from typing import Dict, Iterable, List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    """
    SQLAlchemy implementation of InvoiceItemRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_ids(self, invoice_ids: Iterable[int]) -> Dict[int, List[InvoiceItem]]:
        invoice_ids = list(invoice_ids)
        if not invoice_ids:
            return {}

        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id.in_(invoice_ids))
            .order_by(InvoiceItem.invoice_id, InvoiceItem.id)
        )
        result = await self.session.execute(statement)

        grouped: Dict[int, List[InvoiceItem]] = defaultdict(list)
        for item in result.scalars().all():
            grouped[item.invoice_id].append(item)
        return dict(grouped)

    async def create_many(self, items: List[InvoiceItem]) -> List[InvoiceItem]:
        self.session.add_all(items)
        await self.session.flush()
        for item in items:
            await self.session.refresh(item)
        return items

    async def delete_by_invoice_id(self, invoice_id: int) -> int:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0
