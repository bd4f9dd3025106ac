"""
Form parsing and validation.

Input arrives as whatever the form layer hands over (usually strings).
Parsers return None on bad input; validators collect every field error
into a single ValidationException.
"""
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..exceptions import InvalidQuantity, InvalidRate, ValidationException
from ..value_objects import PhoneNumber

_INTEGER_RE = re.compile(r'^[+-]?\d+$')


def parse_integer(value: Any) -> Optional[int]:
    """Parse an integer from int, integral Decimal/float, or an integer literal string."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float('inf'), float('-inf')) or not value.is_integer():
            return None
        return int(value)
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.match(text):
            return int(text)
    return None


def parse_decimal(value: Any) -> Optional[Decimal]:
    """Parse a finite Decimal from a number or numeric string."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not result.is_finite():
        return None
    return result


def parse_quantity(value: Any) -> int:
    """Return the quantity as an int >= 1 or raise InvalidQuantity."""
    quantity = parse_integer(value)
    if quantity is None or quantity < 1:
        raise InvalidQuantity(value)
    return quantity


def parse_rate(value: Any) -> Decimal:
    """Return the rate as a Decimal > 0 or raise InvalidRate."""
    rate = parse_decimal(value)
    if rate is None or rate <= 0:
        raise InvalidRate(value)
    return rate


@dataclass
class CustomerForm:
    """Raw values of the customer dialog."""
    account_no: str = ""
    name: str = ""
    phone: str = ""
    address: str = ""


@dataclass
class ItemForm:
    """Raw values of the item dialog."""
    item_code: str = ""
    name: str = ""
    price: Any = ""
    description: str = ""


def validate_customer_form(form: CustomerForm) -> CustomerForm:
    """
    Validate a customer form.

    Name, phone and account number are required; the phone must look
    like a phone number. Returns a copy with surrounding whitespace removed.
    """
    errors = ValidationException(message="Please correct the highlighted customer fields")

    if not form.name.strip():
        errors.add_error('name', 'Name is required')

    if not form.phone.strip():
        errors.add_error('phone', 'Phone is required')
    elif not PhoneNumber.is_valid(form.phone.strip()):
        errors.add_error('phone', 'Please enter a valid phone number')

    if not form.account_no.strip():
        errors.add_error('account_no', 'Account number is required')

    if errors.has_errors:
        raise errors

    return CustomerForm(
        account_no=form.account_no.strip(),
        name=form.name.strip(),
        phone=form.phone.strip(),
        address=form.address.strip(),
    )


def validate_item_form(form: ItemForm) -> ItemForm:
    """
    Validate an item form.

    Name, item code and price are required; price must be a positive
    number. The returned copy carries the price as a Decimal.
    """
    errors = ValidationException(message="Please correct the highlighted item fields")

    if not form.name.strip():
        errors.add_error('name', 'Name is required')

    price = None
    if form.price is None or (isinstance(form.price, str) and not form.price.strip()):
        errors.add_error('price', 'Price is required')
    else:
        price = parse_decimal(form.price)
        if price is None or price <= 0:
            errors.add_error('price', 'Price must be a positive number')

    if not form.item_code.strip():
        errors.add_error('item_code', 'Item ID is required')

    if errors.has_errors:
        raise errors

    return ItemForm(
        item_code=form.item_code.strip(),
        name=form.name.strip(),
        price=price,
        description=(form.description or "").strip(),
    )
