"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
Responses serialize with PascalCase keys (Id, InvoiceNumber, SubTotal, ...)
and money as JSON numbers, the wire format the invoicing front end was
built against.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_pascal

from invoicing.domain.aggregate import InvoiceAggregate, LineItem
from invoicing.domain.money import MAX_AMOUNT, MAX_QUANTITY

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class InvoiceItemCommandDTO(BaseModel):
    """
    Line item as submitted by a client

    Amount is deliberately absent: it is always recomputed.
    """

    product_id: int = Field(..., description="Product catalog reference")
    product_name: str = Field(default="", description="Product name snapshot")
    description: str = Field(default="", description="Product description snapshot")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Quantity (1 to MAX_QUANTITY)")
    price: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Unit price (0 to MAX_AMOUNT)")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating (or replacing) an invoice

    Used as input to CreateInvoice and UpdateInvoice use cases.
    """

    customer_name: str = Field(default="", description="Customer name (required on commit)")
    customer_email: str = Field(default="", description="Customer email")
    customer_phone: str = Field(default="", description="Customer phone (required on commit)")
    customer_address: str = Field(default="", description="Customer address")
    discount: Decimal = Field(default=Decimal("0"), description="Requested discount, clamped server side")
    items: List[InvoiceItemCommandDTO] = Field(default_factory=list)


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class InvoiceItemDTO(WireModel):
    id: Optional[int] = None
    product_id: int
    product_name: str
    description: str
    quantity: int
    price: Money
    amount: Money

    @classmethod
    def from_line(cls, item: LineItem) -> "InvoiceItemDTO":
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            description=item.description,
            quantity=item.quantity,
            price=item.price,
            amount=item.amount,
        )


class CustomerDTO(WireModel):
    name: str
    email: str
    phone: str
    address: str


class InvoiceResponseDTO(WireModel):
    """
    Full invoice with nested customer

    Returned by GetInvoice, CreateInvoice and UpdateInvoice.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "Id": 1,
                "InvoiceNumber": "INV-20251023224923123-042",
                "InvoiceDate": "2025-10-23T22:49:23.123000Z",
                "Customer": {
                    "Name": "John Smith",
                    "Email": "john.smith@email.com",
                    "Phone": "+1 (555) 123-4567",
                    "Address": "123 Main St, New York, NY 10001",
                },
                "SubTotal": 149.97,
                "Discount": 10.00,
                "Total": 139.97,
                "Items": [
                    {
                        "Id": 1,
                        "ProductId": 4,
                        "ProductName": "Wireless Mouse",
                        "Description": "Ergonomic wireless mouse with RGB lighting",
                        "Quantity": 2,
                        "Price": 29.99,
                        "Amount": 59.98,
                    }
                ],
            }
        },
    )

    id: int
    invoice_number: str
    invoice_date: datetime
    customer: CustomerDTO
    sub_total: Money
    discount: Money
    total: Money
    items: List[InvoiceItemDTO]

    @classmethod
    def from_aggregate(cls, invoice: InvoiceAggregate) -> "InvoiceResponseDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            customer=CustomerDTO(**invoice.customer.model_dump()),
            sub_total=invoice.sub_total,
            discount=invoice.discount,
            total=invoice.total,
            items=[InvoiceItemDTO.from_line(item) for item in invoice.items],
        )


class InvoiceSummaryDTO(WireModel):
    """
    Invoice list entry with flat customer fields

    Returned by ListInvoices.
    """

    id: int
    invoice_number: str
    invoice_date: datetime
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    sub_total: Money
    discount: Money
    total: Money
    items: List[InvoiceItemDTO]

    @classmethod
    def from_aggregate(cls, invoice: InvoiceAggregate) -> "InvoiceSummaryDTO":
        return cls(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            customer_name=invoice.customer.name,
            customer_email=invoice.customer.email,
            customer_phone=invoice.customer.phone,
            customer_address=invoice.customer.address,
            sub_total=invoice.sub_total,
            discount=invoice.discount,
            total=invoice.total,
            items=[InvoiceItemDTO.from_line(item) for item in invoice.items],
        )


class MessageResponseDTO(WireModel):
    message: str


class InvoicePdfDTO(BaseModel):
    """Rendered invoice document"""

    invoice_id: int
    invoice_number: str
    filename: str
    content: bytes
    generated_at: datetime
