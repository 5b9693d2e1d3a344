"""Invoice Domain Entity

Stored header of an invoice: identity, number, date, customer snapshot
and the authoritative totals.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String
from invoicing.domain.base import BaseModel, IdType, UtcDateTime, utc_now


class Invoice(BaseModel, table=True):
    """
    Invoice - Customer invoice header

    Domain Rules:
    - invoice_number is assigned at creation, unique and immutable
    - invoice_date is set by the server at creation
    - sub_total is the sum of all invoice_items.amount
    - 0 <= discount <= sub_total
    - total = sub_total - discount
    - Customer fields are embedded; name and phone are required on commit
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index("ix_invoices_invoice_date", "invoice_date"),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(IdType, primary_key=True, autoincrement=True),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-20251023224923123-042)"
    )

    invoice_date: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UtcDateTime(timezone=True), nullable=False),
        description="Invoice creation timestamp (UTC)"
    )

    customer_name: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Customer name (required)"
    )

    customer_email: str = Field(
        default="",
        sa_column=Column(String(200), nullable=False, default=""),
        description="Customer email (optional)"
    )

    customer_phone: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Customer phone (required)"
    )

    customer_address: str = Field(
        default="",
        sa_column=Column(String(500), nullable=False, default=""),
        description="Customer postal address (optional)"
    )

    sub_total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Sum of line item amounts (precision: 18,2)"
    )

    discount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Discount clamped into [0, sub_total] (precision: 18,2)"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Net total (sub_total - discount)"
    )
