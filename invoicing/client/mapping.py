"""Transport Mapping

Converts between the API wire format and the client-side InvoiceAggregate.

Reading is lenient: list entries carry flat customer fields while single
invoices carry a nested customer object, and either may arrive in
camelCase, PascalCase or snake_case. Missing derived values are filled
from the money helpers; values the server did send are kept as-is.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping

from pydantic import TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel, to_pascal

from invoicing.domain.aggregate import Customer, InvoiceAggregate, LineItem
from invoicing.domain.base import as_utc, utc_now
from invoicing.domain.errors import MappingError
from invoicing.domain.money import ZERO, apply_discount, line_amount, recompute_subtotal, to_money

logger = logging.getLogger(__name__)

_MISSING = object()
_datetime_adapter = TypeAdapter(datetime)

CUSTOMER_FIELDS = ("name", "email", "phone", "address")


def _pick(source: Mapping, name: str, default: Any = _MISSING) -> Any:
    """Value for a snake_case field name, trying camelCase, PascalCase, then snake_case keys"""
    for key in (to_camel(name), to_pascal(name), name):
        value = source.get(key)
        if value is not None:
            return value
    return default


def _money(value: Any, field: str) -> Decimal:
    try:
        return to_money(value)
    except ValueError as e:
        raise MappingError(f"{field}: {value!r} is not a number") from e


def _money_or_zero(value: Any, field: str) -> Decimal:
    try:
        return _money(value, field)
    except MappingError as e:
        logger.warning(f"Defaulting {field} to 0: {e}")
        return ZERO


def _integer(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise MappingError(f"{field}: {value!r} is not an integer")
    try:
        return int(Decimal(str(value)))
    except (ArithmeticError, ValueError) as e:
        raise MappingError(f"{field}: {value!r} is not an integer") from e


def _int_or_zero(value: Any, field: str) -> int:
    try:
        return _integer(value, field)
    except MappingError as e:
        logger.warning(f"Defaulting {field} to 0: {e}")
        return 0


def _text(source: Mapping, name: str) -> str:
    value = _pick(source, name, "")
    return value if isinstance(value, str) else str(value)


def _parse_date(value: Any) -> datetime:
    if value is _MISSING:
        return utc_now()
    try:
        return as_utc(_datetime_adapter.validate_python(value))
    except ValidationError:
        logger.warning(f"Unparseable invoice date {value!r}, using current time")
        return utc_now()


def _customer_from_wire(payload: Mapping) -> Customer:
    nested = _pick(payload, "customer", None)
    if isinstance(nested, Mapping):
        return Customer(**{field: _text(nested, field) for field in CUSTOMER_FIELDS})
    return Customer(**{field: _text(payload, f"customer_{field}") for field in CUSTOMER_FIELDS})


def _item_from_wire(payload: Any) -> LineItem:
    if not isinstance(payload, Mapping):
        payload = {}

    item_id = _pick(payload, "id", None)
    quantity = _int_or_zero(_pick(payload, "quantity", 0), "quantity")
    price = _money_or_zero(_pick(payload, "price", 0), "price")

    amount = _pick(payload, "amount", None)
    if amount is None:
        amount = line_amount(max(quantity, 0), price)
    else:
        amount = _money_or_zero(amount, "amount")

    return LineItem(
        id=_int_or_zero(item_id, "item id") if item_id is not None else None,
        product_id=_int_or_zero(_pick(payload, "product_id", 0), "productId"),
        product_name=_text(payload, "product_name"),
        description=_text(payload, "description"),
        quantity=quantity,
        price=price,
        amount=amount,
    )


def invoice_from_wire(payload: Any) -> InvoiceAggregate:
    """
    Normalize an API response body into an InvoiceAggregate

    Never raises on malformed content; a non-mapping payload is read as
    an empty invoice.
    """
    if not isinstance(payload, Mapping):
        logger.warning(f"Expected an invoice object, got {type(payload).__name__}")
        payload = {}

    raw_id = _pick(payload, "id", None)
    invoice_id = _int_or_zero(raw_id, "id") if raw_id is not None else None

    raw_items = _pick(payload, "items", [])
    items = [_item_from_wire(item) for item in raw_items] if isinstance(raw_items, list) else []

    sub_total = _pick(payload, "sub_total", None)
    sub_total = recompute_subtotal(items) if sub_total is None else _money_or_zero(sub_total, "subTotal")

    discount = _money_or_zero(_pick(payload, "discount", 0), "discount")

    total = _pick(payload, "total", None)
    if total is None:
        _, total = apply_discount(sub_total, discount)
    else:
        total = _money_or_zero(total, "total")

    invoice_number = _pick(payload, "invoice_number", None)
    if not invoice_number:
        invoice_number = f"INV-{invoice_id or '0000'}"
        logger.debug(f"Invoice number missing, using {invoice_number}")

    return InvoiceAggregate(
        id=invoice_id,
        invoice_number=str(invoice_number),
        invoice_date=_parse_date(_pick(payload, "invoice_date")),
        customer=_customer_from_wire(payload),
        items=items,
        sub_total=sub_total,
        discount=discount,
        total=total,
    )


def invoice_to_wire(invoice: InvoiceAggregate) -> Dict[str, Any]:
    """
    Build the create/update request body for a draft

    Only inputs are sent; id, number, amounts and totals are server-owned.
    """
    items: List[Dict[str, Any]] = [
        {
            "ProductId": item.product_id,
            "ProductName": item.product_name,
            "Description": item.description,
            "Quantity": item.quantity,
            "Price": str(to_money(item.price)),
        }
        for item in invoice.items
    ]
    return {
        "CustomerName": invoice.customer.name,
        "CustomerEmail": invoice.customer.email,
        "CustomerPhone": invoice.customer.phone,
        "CustomerAddress": invoice.customer.address,
        "Discount": str(to_money(invoice.discount)),
        "Items": items,
    }
