"""Unit tests for the InvoiceAggregate"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from invoicing.domain.aggregate import Customer, InvoiceAggregate, Product
from invoicing.domain.errors import (
    AmountOutOfRange,
    EmptyInvoice,
    IndexOutOfRange,
    InvalidInvoice,
    MissingCustomerInfo,
)
from invoicing.domain.money import MAX_AMOUNT

MOUSE = Product(id=4, name="Wireless Mouse", description="Ergonomic wireless mouse with RGB lighting", price=Decimal("29.99"))
KEYBOARD = Product(id=5, name="Mechanical Keyboard", description="RGB mechanical keyboard with blue switches", price=Decimal("89.99"))


def assert_consistent(invoice: InvoiceAggregate):
    for item in invoice.items:
        assert item.amount == item.quantity * item.price
    assert invoice.sub_total == sum((item.amount for item in invoice.items), Decimal("0"))
    assert Decimal("0") <= invoice.discount <= invoice.sub_total
    assert invoice.total == invoice.sub_total - invoice.discount


@pytest.fixture
def invoice():
    return InvoiceAggregate(customer=Customer(name="John Smith", phone="+1 (555) 123-4567"))


class TestAddItem:
    def test_add_new_product_creates_line_with_snapshot(self, invoice):
        item = invoice.add_item(MOUSE, 2)

        assert item.product_id == 4
        assert item.product_name == "Wireless Mouse"
        assert item.description == "Ergonomic wireless mouse with RGB lighting"
        assert item.amount == Decimal("59.98")
        assert invoice.sub_total == Decimal("59.98")
        assert_consistent(invoice)

    def test_same_product_merges_into_one_line(self, invoice):
        invoice.add_item(MOUSE, 1)
        invoice.add_item(MOUSE, 2)

        assert len(invoice.items) == 1
        assert invoice.items[0].quantity == 3
        assert invoice.items[0].amount == Decimal("89.97")
        assert_consistent(invoice)

    def test_quantity_below_one_is_coerced(self, invoice):
        item = invoice.add_item(KEYBOARD, 0)

        assert item.quantity == 1
        assert_consistent(invoice)


class TestEditItems:
    def test_remove_item_recomputes_totals(self, invoice):
        invoice.add_item(MOUSE, 2)
        invoice.add_item(KEYBOARD, 1)

        removed = invoice.remove_item(0)

        assert removed.product_id == 4
        assert invoice.sub_total == Decimal("89.99")
        assert_consistent(invoice)

    def test_remove_item_out_of_range(self, invoice):
        invoice.add_item(MOUSE)

        with pytest.raises(IndexOutOfRange):
            invoice.remove_item(1)
        with pytest.raises(IndexError):
            invoice.remove_item(-1)

    def test_update_quantity(self, invoice):
        invoice.add_item(KEYBOARD)

        invoice.update_item_quantity(0, 3)

        assert invoice.items[0].amount == Decimal("269.97")
        assert_consistent(invoice)

    def test_update_quantity_below_one_is_coerced(self, invoice):
        invoice.add_item(KEYBOARD, 4)

        invoice.update_item_quantity(0, -2)

        assert invoice.items[0].quantity == 1
        assert_consistent(invoice)

    def test_update_quantity_out_of_range(self, invoice):
        with pytest.raises(IndexOutOfRange):
            invoice.update_item_quantity(0, 2)


class TestDiscount:
    def test_discount_applied(self, invoice):
        invoice.add_item(MOUSE, 2)
        invoice.add_item(KEYBOARD, 1)

        invoice.set_discount("10")

        assert invoice.sub_total == Decimal("149.97")
        assert invoice.total == Decimal("139.97")
        assert_consistent(invoice)

    def test_discount_clamped_to_subtotal(self, invoice):
        invoice.add_item(MOUSE)

        invoice.set_discount(100)

        assert invoice.discount == Decimal("29.99")
        assert invoice.total == Decimal("0.00")

    def test_discount_reclamped_when_subtotal_drops(self, invoice):
        invoice.add_item(MOUSE)
        invoice.add_item(KEYBOARD)
        invoice.set_discount(50)

        invoice.remove_item(1)

        assert invoice.discount == Decimal("29.99")
        assert_consistent(invoice)

    def test_negative_discount_clamped_to_zero(self, invoice):
        invoice.add_item(MOUSE)

        invoice.set_discount(-5)

        assert invoice.discount == Decimal("0.00")
        assert invoice.total == Decimal("29.99")


class TestValidateForCommit:
    def test_valid_invoice_passes(self, invoice):
        invoice.add_item(MOUSE)

        invoice.validate_for_commit()

    def test_empty_invoice(self, invoice):
        with pytest.raises(EmptyInvoice) as exc_info:
            invoice.validate_for_commit()

        assert isinstance(exc_info.value, InvalidInvoice)
        assert str(exc_info.value) == "Invoice must have at least one item"

    @pytest.mark.parametrize("name,phone", [("", "123"), ("Jane", ""), ("   ", "123")])
    def test_missing_customer_info(self, name, phone):
        invoice = InvoiceAggregate(customer=Customer(name=name, phone=phone))
        invoice.add_item(MOUSE)

        with pytest.raises(MissingCustomerInfo):
            invoice.validate_for_commit()

    def test_subtotal_beyond_storable_range(self, invoice):
        invoice.add_item(Product(id=1, name="Server Rack", price=MAX_AMOUNT), quantity=2)

        with pytest.raises(AmountOutOfRange) as exc_info:
            invoice.validate_for_commit()

        assert isinstance(exc_info.value, InvalidInvoice)


class TestInvoiceDate:
    def test_naive_date_is_taken_as_utc(self):
        invoice = InvoiceAggregate(invoice_date=datetime(2025, 10, 23, 10, 0))

        assert invoice.invoice_date == datetime(2025, 10, 23, 10, 0, tzinfo=timezone.utc)

    def test_offset_date_is_converted_to_utc(self):
        local = datetime(2025, 10, 23, 15, 30, tzinfo=timezone(timedelta(hours=5, minutes=30)))

        invoice = InvoiceAggregate(invoice_date=local)

        assert invoice.invoice_date.utcoffset() == timedelta(0)
        assert invoice.invoice_date.hour == 10


class TestFromEntities:
    def test_keeps_stored_values(self, stored_invoice, stored_items):
        aggregate = InvoiceAggregate.from_entities(stored_invoice, stored_items)

        assert aggregate.id == 1
        assert aggregate.invoice_number == "INV-20251023224923123-042"
        assert aggregate.customer.name == "John Smith"
        assert [item.amount for item in aggregate.items] == [Decimal("59.98"), Decimal("89.99")]
        assert aggregate.total == Decimal("139.97")
