"""Invoice Item Domain Entity

Tracks individual line items within an invoice.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from invoicing.domain.base import BaseModel, IdType


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Individual line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice and is deleted with it
    - product_name / description / price are snapshots taken at add time
    - amount = quantity * price
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index("ix_invoice_items_invoice_id", "invoice_id"),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique item identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(IdType, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    product_id: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Product catalog reference (not enforced)"
    )

    product_name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Product name snapshot"
    )

    description: str = Field(
        default="",
        sa_column=Column(String(500), nullable=False, default=""),
        description="Product description snapshot"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity (positive integer)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Unit price snapshot (precision: 18,2)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Line amount (quantity * price)"
    )
