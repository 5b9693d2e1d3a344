"""CreateInvoice Use Case

Persists a submitted draft as a new invoice with server-computed totals.
"""

import logging
from typing import List

from invoicing.libs.result import Result, Return, Error
from invoicing.app.services.unit_of_work import UnitOfWork
from invoicing.app.repositories.invoice_repository import InvoiceRepository
from invoicing.app.repositories.invoice_item_repository import InvoiceItemRepository
from invoicing.domain.base import utc_now
from invoicing.domain.aggregate import Customer, InvoiceAggregate, LineItem
from invoicing.domain.errors import AmountOutOfRange, InvalidInvoice
from invoicing.domain.invoice import Invoice
from invoicing.domain.invoice_item import InvoiceItem
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO

logger = logging.getLogger(__name__)


def build_aggregate(command: CreateInvoiceCommandDTO) -> InvoiceAggregate:
    """
    Build an aggregate from a command and recompute it

    Lines are kept as submitted (no merging); amounts and totals are
    always derived from quantity * price and the requested discount.

    Raises:
        AmountOutOfRange: A value is too large to compute with
    """
    aggregate = InvoiceAggregate(
        customer=Customer(
            name=command.customer_name,
            email=command.customer_email,
            phone=command.customer_phone,
            address=command.customer_address,
        ),
        items=[
            LineItem(
                product_id=item.product_id,
                product_name=item.product_name,
                description=item.description,
                quantity=item.quantity,
                price=item.price,
            )
            for item in command.items
        ],
        discount=command.discount,
    )
    try:
        aggregate.recalculate()
    except ValueError as e:
        raise AmountOutOfRange(str(e)) from e
    return aggregate


def to_item_rows(invoice_id: int, aggregate: InvoiceAggregate) -> List[InvoiceItem]:
    return [
        InvoiceItem(
            invoice_id=invoice_id,
            product_id=item.product_id,
            product_name=item.product_name,
            description=item.description,
            quantity=item.quantity,
            price=item.price,
            amount=item.amount,
        )
        for item in aggregate.items
    ]


def invalid_invoice_error(e: InvalidInvoice) -> Error:
    return Error(
        code="INVALID_INVOICE",
        message=str(e),
        reason=type(e).__name__,
    )


async def load_committed(
    invoice_repo: InvoiceRepository,
    item_repo: InvoiceItemRepository,
    invoice: Invoice,
    aggregate: InvoiceAggregate,
) -> Result[InvoiceResponseDTO]:
    """
    Canonical response for an invoice that has just been committed

    If the re-read fails the committed write still stands, so the response
    is built from the values that were written instead of an error.
    """
    try:
        stored_invoice = await invoice_repo.get_by_id(invoice.id)
        stored_items = await item_repo.get_by_invoice_id(invoice.id)
        canonical = InvoiceAggregate.from_entities(stored_invoice, stored_items)
    except Exception as e:
        logger.warning(f"Invoice {invoice.id} committed but could not be re-read: {e}")
        canonical = aggregate.model_copy(
            update={
                "id": invoice.id,
                "invoice_number": invoice.invoice_number,
                "invoice_date": invoice.invoice_date,
            }
        )
    return Return.ok(InvoiceResponseDTO.from_aggregate(canonical))


class CreateInvoice:
    """
    Use Case: Create an invoice from a submitted draft

    Business Rules:
    1. At least one item; customer name and phone are required
    2. Client-sent amounts and totals are ignored and recomputed
    3. Discount is clamped into [0, sub_total]
    4. Invoice number and date are assigned here, never by the client
    5. Invoice and items are committed together or not at all

    Flow:
    1. Build and recompute the aggregate, validate it
    2. Generate unique invoice number
    3. Create invoice row, then its item rows
    4. Commit transaction
    5. Re-fetch stored invoice and items, return canonical response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, discount and items

        Returns:
            Result[InvoiceResponseDTO]: Success with canonical invoice or error

        Errors:
            INVALID_INVOICE: No items, customer name/phone missing, or amounts out of range
            STORAGE_ERROR: Persistence failed; nothing was stored
        """
        # Step 1: Validate before touching the store
        try:
            aggregate = build_aggregate(command)
            aggregate.validate_for_commit()
        except InvalidInvoice as e:
            return Return.err(invalid_invoice_error(e))

        try:
            # Step 2: Generate unique invoice number
            invoice_number = await self.invoice_repo.generate_invoice_number()

            # Step 3: Create invoice and items
            invoice = Invoice(
                invoice_number=invoice_number,
                invoice_date=utc_now(),
                customer_name=aggregate.customer.name,
                customer_email=aggregate.customer.email,
                customer_phone=aggregate.customer.phone,
                customer_address=aggregate.customer.address,
                sub_total=aggregate.sub_total,
                discount=aggregate.discount,
                total=aggregate.total,
            )
            created_invoice = await self.invoice_repo.create(invoice)
            await self.item_repo.create_many(to_item_rows(created_invoice.id, aggregate))

            # Step 4: Commit transaction
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice: {e}")
            return Return.err(
                Error(
                    code="STORAGE_ERROR",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )

        logger.info(
            f"Created invoice {created_invoice.invoice_number} (id={created_invoice.id}) "
            f"with {len(aggregate.items)} item(s), total={aggregate.total}"
        )

        # Step 5: Re-fetch canonical state; the invoice is already committed
        return await load_committed(self.invoice_repo, self.item_repo, created_invoice, aggregate)
