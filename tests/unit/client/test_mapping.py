"""Unit tests for the transport mapping"""

from datetime import datetime, timezone
from decimal import Decimal

from invoicing.client.mapping import invoice_from_wire, invoice_to_wire
from invoicing.domain.aggregate import Customer, InvoiceAggregate, LineItem


class TestInvoiceFromWire:
    def test_nested_pascal_case_customer(self):
        payload = {
            "Id": 3,
            "InvoiceNumber": "INV-20251023224923123-042",
            "InvoiceDate": "2025-10-23T22:49:23.123000",
            "Customer": {"Name": "John Smith", "Email": "john@x.com", "Phone": "555", "Address": "Main St"},
            "SubTotal": "149.97",
            "Discount": "10.00",
            "Total": "139.97",
            "Items": [
                {"Id": 1, "ProductId": 4, "ProductName": "Wireless Mouse", "Description": "Mouse",
                 "Quantity": 2, "Price": "29.99", "Amount": "59.98"},
            ],
        }

        invoice = invoice_from_wire(payload)

        assert invoice.id == 3
        assert invoice.customer == Customer(name="John Smith", email="john@x.com", phone="555", address="Main St")
        assert invoice.invoice_date == datetime(2025, 10, 23, 22, 49, 23, 123000, tzinfo=timezone.utc)
        assert invoice.items[0].product_name == "Wireless Mouse"
        assert invoice.items[0].amount == Decimal("59.98")
        assert invoice.total == Decimal("139.97")

    def test_flat_camel_case_customer(self):
        payload = {
            "id": 5,
            "invoiceNumber": "INV-1",
            "customerName": "Jane",
            "customerPhone": "123",
            "items": [],
            "subTotal": 0,
            "discount": 0,
            "total": 0,
        }

        invoice = invoice_from_wire(payload)

        assert invoice.customer.name == "Jane"
        assert invoice.customer.phone == "123"
        assert invoice.customer.email == ""

    def test_snake_case_keys(self):
        invoice = invoice_from_wire({"id": 1, "invoice_number": "INV-9", "customer_name": "Ann"})

        assert invoice.invoice_number == "INV-9"
        assert invoice.customer.name == "Ann"

    def test_camel_case_wins_over_pascal_case(self):
        invoice = invoice_from_wire({"customerName": "camel", "CustomerName": "Pascal"})

        assert invoice.customer.name == "camel"

    def test_missing_derived_values_are_computed(self):
        payload = {
            "Id": 2,
            "Discount": "5",
            "Items": [{"ProductId": 5, "Quantity": 2, "Price": "89.99"}],
        }

        invoice = invoice_from_wire(payload)

        assert invoice.items[0].amount == Decimal("179.98")
        assert invoice.sub_total == Decimal("179.98")
        assert invoice.total == Decimal("174.98")

    def test_server_values_are_not_overridden(self):
        payload = {
            "Items": [{"ProductId": 5, "Quantity": 2, "Price": "89.99", "Amount": "100.00"}],
            "SubTotal": "100.00",
            "Total": "90.00",
        }

        invoice = invoice_from_wire(payload)

        assert invoice.items[0].amount == Decimal("100.00")
        assert invoice.sub_total == Decimal("100.00")
        assert invoice.total == Decimal("90.00")

    def test_zero_values_from_server_are_kept(self):
        invoice = invoice_from_wire({"Items": [{"Quantity": 1, "Price": "10"}], "SubTotal": 0, "Total": 0})

        assert invoice.sub_total == Decimal("0.00")
        assert invoice.total == Decimal("0.00")

    def test_missing_number_and_date_defaults(self):
        before = datetime.now(timezone.utc)

        with_id = invoice_from_wire({"Id": 12})
        without_id = invoice_from_wire({})

        assert with_id.invoice_number == "INV-12"
        assert without_id.invoice_number == "INV-0000"
        assert with_id.invoice_date >= before

    def test_offset_dates_are_converted_to_utc(self):
        with_offset = invoice_from_wire({"InvoiceDate": "2025-10-23T12:00:00+02:00"})
        naive = invoice_from_wire({"InvoiceDate": "2025-10-23T10:00:00"})

        assert with_offset.invoice_date == datetime(2025, 10, 23, 10, 0, tzinfo=timezone.utc)
        assert naive.invoice_date == with_offset.invoice_date

    def test_unparseable_values_default(self):
        payload = {
            "InvoiceDate": "not a date",
            "Discount": "ten",
            "Items": [{"ProductId": "x", "Quantity": "two", "Price": "free"}],
        }

        invoice = invoice_from_wire(payload)

        assert invoice.discount == Decimal("0.00")
        assert invoice.items[0].product_id == 0
        assert invoice.items[0].quantity == 0
        assert invoice.items[0].price == Decimal("0.00")
        assert isinstance(invoice.invoice_date, datetime)

    def test_non_mapping_payload_is_empty_invoice(self):
        invoice = invoice_from_wire(["not", "an", "invoice"])

        assert invoice.items == []
        assert invoice.total == Decimal("0.00")


class TestInvoiceToWire:
    def test_only_inputs_are_sent(self):
        draft = InvoiceAggregate(
            id=9,
            invoice_number="INV-1729-5",
            customer=Customer(name="Jane", email="j@x.com", phone="123", address="Road 1"),
            items=[LineItem(product_id=4, product_name="Wireless Mouse", description="Mouse", quantity=2,
                            price=Decimal("29.99"), amount=Decimal("59.98"))],
            discount=Decimal("5"),
        )

        body = invoice_to_wire(draft)

        assert body == {
            "CustomerName": "Jane",
            "CustomerEmail": "j@x.com",
            "CustomerPhone": "123",
            "CustomerAddress": "Road 1",
            "Discount": "5.00",
            "Items": [
                {"ProductId": 4, "ProductName": "Wireless Mouse", "Description": "Mouse",
                 "Quantity": 2, "Price": "29.99"},
            ],
        }
