"""Invoice Aggregate

In-memory invoice with its owned line items. Every mutation leaves the
invariants intact:

- each item's amount == quantity * price
- sub_total == sum(item.amount)
- 0 <= discount <= sub_total
- total == sub_total - discount

The same aggregate backs the client-side draft editor and the server-side
recomputation in the use cases.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator

from invoicing.domain.base import as_utc
from invoicing.domain.errors import AmountOutOfRange, EmptyInvoice, IndexOutOfRange, MissingCustomerInfo
from invoicing.domain.invoice import Invoice
from invoicing.domain.invoice_item import InvoiceItem
from invoicing.domain.money import MAX_AMOUNT, ZERO, apply_discount, line_amount, recompute_subtotal, to_money


class Customer(BaseModel):
    """Customer details embedded in an invoice"""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class Product(BaseModel):
    """Product catalog entry used to populate line items"""

    id: int
    name: str
    description: str = ""
    price: Decimal


class LineItem(BaseModel):
    """Invoice line; product fields are snapshots taken when added"""

    id: Optional[int] = None
    product_id: int = 0
    product_name: str = ""
    description: str = ""
    quantity: int = 1
    price: Decimal = ZERO
    amount: Decimal = ZERO

    def recalculate(self) -> None:
        self.price = to_money(self.price)
        self.amount = line_amount(self.quantity, self.price)


class InvoiceAggregate(BaseModel):
    """
    Invoice together with its line items

    id, invoice_number and invoice_date are only ever assigned by the server;
    a draft leaves them unset (or holds a provisional display number).
    """

    id: Optional[int] = None
    invoice_number: str = ""
    invoice_date: Optional[datetime] = None
    customer: Customer = Field(default_factory=Customer)
    items: List[LineItem] = Field(default_factory=list)
    sub_total: Decimal = ZERO
    discount: Decimal = ZERO
    total: Decimal = ZERO

    @field_validator("invoice_date")
    @classmethod
    def _invoice_date_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    def add_item(self, product: Product, quantity: int = 1) -> LineItem:
        """
        Add a product, merging into an existing line for the same product

        Quantities below 1 are coerced to 1.
        """
        quantity = max(int(quantity), 1)
        existing = self._find_item(product.id)
        if existing is not None:
            existing.quantity += quantity
            existing.recalculate()
            item = existing
        else:
            item = LineItem(
                product_id=product.id,
                product_name=product.name,
                description=product.description,
                quantity=quantity,
                price=product.price,
            )
            item.recalculate()
            self.items.append(item)
        self.update_totals()
        return item

    def remove_item(self, index: int) -> LineItem:
        self._check_index(index)
        item = self.items.pop(index)
        self.update_totals()
        return item

    def update_item_quantity(self, index: int, quantity: int) -> LineItem:
        self._check_index(index)
        item = self.items[index]
        item.quantity = max(int(quantity), 1)
        item.recalculate()
        self.update_totals()
        return item

    def set_discount(self, value) -> None:
        self.discount = to_money(value)
        self.update_total()

    def update_total(self) -> None:
        self.discount, self.total = apply_discount(self.sub_total, self.discount)

    def update_totals(self) -> None:
        self.sub_total = recompute_subtotal(self.items)
        self.update_total()

    def recalculate(self) -> None:
        """Recompute every line amount, then the invoice totals"""
        for item in self.items:
            item.recalculate()
        self.update_totals()

    def validate_for_commit(self) -> None:
        """
        Check the invoice can be persisted

        Raises:
            EmptyInvoice: No line items
            MissingCustomerInfo: Customer name or phone is blank
            AmountOutOfRange: An amount or the subtotal exceeds MAX_AMOUNT
        """
        if not self.items:
            raise EmptyInvoice("Invoice must have at least one item")
        if not self.customer.name.strip() or not self.customer.phone.strip():
            raise MissingCustomerInfo("Customer name and phone are required")
        if self.sub_total > MAX_AMOUNT or any(item.amount > MAX_AMOUNT for item in self.items):
            raise AmountOutOfRange(f"Invoice amounts must not exceed {MAX_AMOUNT}")

    def _find_item(self, product_id: int) -> Optional[LineItem]:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexOutOfRange(
                f"Item index {index} out of range for {len(self.items)} item(s)"
            )

    @classmethod
    def from_entities(cls, invoice: Invoice, items: Sequence[InvoiceItem]) -> "InvoiceAggregate":
        """Build an aggregate from stored rows, keeping stored amounts as-is"""
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            customer=Customer(
                name=invoice.customer_name,
                email=invoice.customer_email or "",
                phone=invoice.customer_phone,
                address=invoice.customer_address or "",
            ),
            items=[
                LineItem(
                    id=item.id,
                    product_id=item.product_id,
                    product_name=item.product_name,
                    description=item.description or "",
                    quantity=item.quantity,
                    price=to_money(item.price),
                    amount=to_money(item.amount),
                )
                for item in items
            ],
            sub_total=to_money(invoice.sub_total),
            discount=to_money(invoice.discount),
            total=to_money(invoice.total),
        )
