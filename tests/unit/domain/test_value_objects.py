"""
Unit tests for value objects.
"""
from decimal import Decimal

import pytest

from billdesk.domain.exceptions import ValidationException
from billdesk.domain.value_objects import Currency, Money, PhoneNumber


class TestMoney:

    def test_rounds_half_up_to_cents(self):
        assert Money.of("2.005").amount == Decimal("2.01")

    def test_formatted(self):
        assert Money.of("1234.5").formatted == "$1,234.50"
        assert Money.of("60.95", "PKR").formatted == "Rs. 60.95"

    def test_addition(self):
        assert (Money.of("51.98") + Money.of("8.97")).amount == Decimal("60.95")

    def test_currency_mismatch(self):
        with pytest.raises(ValidationException):
            Money.of("1", Currency.USD) + Money.of("1", Currency.EUR)

    def test_invalid_amount(self):
        with pytest.raises(ValidationException):
            Money(amount="abc")

    def test_zero(self):
        assert Money.zero().is_zero

    def test_currency_code_is_coerced(self):
        assert Money(Decimal("10"), "GBP").formatted == "\u00a310.00"


class TestPhoneNumber:

    def test_keeps_display_text(self):
        phone = PhoneNumber(" +1 (555) 123-4567 ")

        assert str(phone) == "+1 (555) 123-4567"
        assert phone.digits == "+15551234567"

    def test_rejects_letters(self):
        with pytest.raises(ValidationException) as exc_info:
            PhoneNumber("call me")

        assert exc_info.value.errors == {'phone': ['Please enter a valid phone number']}

    def test_rejects_empty(self):
        with pytest.raises(ValidationException):
            PhoneNumber("  ")
