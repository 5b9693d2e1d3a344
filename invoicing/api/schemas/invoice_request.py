"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
Bodies use PascalCase keys; camelCase and snake_case keys are accepted too.
"""

from decimal import Decimal
from typing import Any, List, Mapping
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_pascal, to_snake

from invoicing.app.use_cases.invoices.dtos import CreateInvoiceCommandDTO, InvoiceItemCommandDTO
from invoicing.domain.money import MAX_AMOUNT, MAX_QUANTITY


class RequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _snake_case_keys(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {to_snake(key) if isinstance(key, str) else key: value for key, value in data.items()}


class InvoiceItemRequestSchema(RequestSchema):
    """
    Line item in a create/update request

    Amount is not read; the server always recomputes it.
    """

    product_id: int = Field(..., description="Product catalog reference")
    product_name: str = Field(default="", description="Product name at time of sale")
    description: str = Field(default="", description="Product description at time of sale")
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY, description="Quantity (1 to 1,000,000)")
    price: Decimal = Field(..., ge=0, le=MAX_AMOUNT, description="Unit price (0 to the Numeric(18, 2) maximum)")


class CreateInvoiceRequestSchema(RequestSchema):
    """
    Request schema for creating or replacing an invoice

    Used for POST /api/invoices and PUT /api/invoices/{id}.
    SubTotal, Total and item Amount keys are ignored if sent.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "CustomerName": "John Smith",
                "CustomerEmail": "john.smith@email.com",
                "CustomerPhone": "+1 (555) 123-4567",
                "CustomerAddress": "123 Main St, New York, NY 10001",
                "Discount": "10.00",
                "Items": [
                    {
                        "ProductId": 4,
                        "ProductName": "Wireless Mouse",
                        "Description": "Ergonomic wireless mouse with RGB lighting",
                        "Quantity": 2,
                        "Price": "29.99",
                    },
                    {
                        "ProductId": 5,
                        "ProductName": "Mechanical Keyboard",
                        "Description": "RGB mechanical keyboard with blue switches",
                        "Quantity": 1,
                        "Price": "89.99",
                    },
                ],
            }
        },
    )

    customer_name: str = Field(default="", description="Customer name (required)")
    customer_email: str = Field(default="", description="Customer email")
    customer_phone: str = Field(default="", description="Customer phone (required)")
    customer_address: str = Field(default="", description="Customer address")
    discount: Decimal = Field(default=Decimal("0"), description="Discount, clamped into [0, subtotal]")
    items: List[InvoiceItemRequestSchema] = Field(default_factory=list)

    def to_command(self) -> CreateInvoiceCommandDTO:
        return CreateInvoiceCommandDTO(
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            customer_phone=self.customer_phone,
            customer_address=self.customer_address,
            discount=self.discount,
            items=[
                InvoiceItemCommandDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    description=item.description,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in self.items
            ],
        )
