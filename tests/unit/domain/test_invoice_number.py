"""Unit tests for invoice number generation"""

import re
import pytest
from datetime import datetime, timedelta, timezone

from invoicing.domain import invoice_number
from invoicing.domain.invoice_number import new_invoice_number

NUMBER_PATTERN = re.compile(r"^INV-\d{17}-\d{3}$")


@pytest.fixture(autouse=True)
def fresh_stamp(monkeypatch):
    monkeypatch.setattr(invoice_number, "_last_stamp", None)


class TestNewInvoiceNumber:
    def test_format(self):
        assert NUMBER_PATTERN.match(new_invoice_number())

    def test_timestamp_from_clock(self):
        number = new_invoice_number(clock=lambda: datetime(2025, 10, 23, 22, 49, 23, 123456))

        assert number.startswith("INV-20251023224923123-")

    def test_timestamp_is_utc(self):
        local = datetime(2025, 10, 24, 0, 49, 23, 123000, tzinfo=timezone(timedelta(hours=2)))

        number = new_invoice_number(clock=lambda: local)

        assert number.startswith("INV-20251023224923123-")

    def test_numbers_unique_when_clock_stands_still(self):
        frozen = datetime(2025, 1, 1, 12, 0, 0)

        numbers = [new_invoice_number(clock=lambda: frozen) for _ in range(50)]
        stamps = [number.split("-")[1] for number in numbers]

        assert len(set(numbers)) == 50
        assert len(set(stamps)) == 50
        assert stamps == sorted(stamps)

    def test_clock_going_backwards_does_not_repeat(self):
        first = new_invoice_number(clock=lambda: datetime(2025, 1, 1, 12, 0, 1))
        second = new_invoice_number(clock=lambda: datetime(2025, 1, 1, 12, 0, 0))

        assert second.split("-")[1] > first.split("-")[1]

    def test_custom_prefix(self):
        assert new_invoice_number(prefix="BILL").startswith("BILL-")
