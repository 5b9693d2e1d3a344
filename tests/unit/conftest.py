import pytest
from decimal import Decimal
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from invoicing.app.use_cases.invoices.dtos import CreateInvoiceCommandDTO, InvoiceItemCommandDTO
from invoicing.domain.invoice import Invoice
from invoicing.domain.invoice_item import InvoiceItem


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_invoice_repo():
    """Mock invoice repository"""
    return MagicMock()


@pytest.fixture
def mock_item_repo():
    """Mock invoice item repository"""
    return MagicMock()


@pytest.fixture
def sample_command():
    """Mouse x2 and keyboard x1 with a 10.00 discount"""
    return CreateInvoiceCommandDTO(
        customer_name="John Smith",
        customer_email="john.smith@email.com",
        customer_phone="+1 (555) 123-4567",
        customer_address="123 Main St, New York, NY 10001",
        discount=Decimal("10.00"),
        items=[
            InvoiceItemCommandDTO(
                product_id=4,
                product_name="Wireless Mouse",
                description="Ergonomic wireless mouse with RGB lighting",
                quantity=2,
                price=Decimal("29.99"),
            ),
            InvoiceItemCommandDTO(
                product_id=5,
                product_name="Mechanical Keyboard",
                description="RGB mechanical keyboard with blue switches",
                quantity=1,
                price=Decimal("89.99"),
            ),
        ],
    )


@pytest.fixture
def stored_invoice():
    """Invoice row as it comes back from the store"""
    return Invoice(
        id=1,
        invoice_number="INV-20251023224923123-042",
        invoice_date=datetime(2025, 10, 23, 22, 49, 23, tzinfo=timezone.utc),
        customer_name="John Smith",
        customer_email="john.smith@email.com",
        customer_phone="+1 (555) 123-4567",
        customer_address="123 Main St, New York, NY 10001",
        sub_total=Decimal("149.97"),
        discount=Decimal("10.00"),
        total=Decimal("139.97"),
    )


@pytest.fixture
def stored_items():
    """Item rows belonging to stored_invoice"""
    return [
        InvoiceItem(
            id=1,
            invoice_id=1,
            product_id=4,
            product_name="Wireless Mouse",
            description="Ergonomic wireless mouse with RGB lighting",
            quantity=2,
            price=Decimal("29.99"),
            amount=Decimal("59.98"),
        ),
        InvoiceItem(
            id=2,
            invoice_id=1,
            product_id=5,
            product_name="Mechanical Keyboard",
            description="RGB mechanical keyboard with blue switches",
            quantity=1,
            price=Decimal("89.99"),
            amount=Decimal("89.99"),
        ),
    ]
