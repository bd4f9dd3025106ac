"""
Money and Currency value objects for displaying bill amounts.

Line and draft arithmetic stays in plain Decimal; amounts are wrapped
in Money only when they are shown to the user.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Any, Dict, Union

from ..exceptions import ValidationException

CENT = Decimal('0.01')


class Currency(str, Enum):
    """Supported currencies."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    PKR = "PKR"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Currency.USD: '$',
    Currency.EUR: '€',
    Currency.GBP: '£',
    Currency.PKR: 'Rs. ',
}


@dataclass(frozen=True)
class Money:
    """
    An amount rounded half-up to cents, tagged with its currency.

    Examples:
        Money.of("60.95").formatted         -> "$60.95"
        Money.of("1234.5", "PKR").formatted -> "Rs. 1,234.50"
    """
    amount: Decimal
    currency: Currency = Currency.USD

    def __post_init__(self) -> None:
        try:
            amount = Decimal(str(self.amount))
        except (InvalidOperation, ValueError):
            raise ValidationException(
                message="Invalid amount",
                errors={'amount': ['Amount must be a valid number']}
            )
        if not amount.is_finite():
            raise ValidationException(
                message="Invalid amount",
                errors={'amount': ['Amount must be a finite number']}
            )
        object.__setattr__(self, 'amount', amount.quantize(CENT, rounding=ROUND_HALF_UP))
        object.__setattr__(self, 'currency', Currency(self.currency))

    def __add__(self, other: 'Money') -> 'Money':
        if not isinstance(other, Money):
            return NotImplemented
        if other.currency != self.currency:
            raise ValidationException(
                message="Currency mismatch",
                errors={'currency': [f"Cannot add {other.currency.value} to {self.currency.value}"]}
            )
        return Money(self.amount + other.amount, self.currency)

    @property
    def is_zero(self) -> bool:
        return not self.amount

    @property
    def formatted(self) -> str:
        """Amount with currency symbol and thousands separators."""
        return f"{self.currency.symbol}{self.amount:,.2f}"

    def __str__(self) -> str:
        return self.formatted

    def to_dict(self) -> Dict[str, Any]:
        return {
            'amount': str(self.amount),
            'currency': self.currency.value,
            'formatted': self.formatted,
        }

    @classmethod
    def of(cls, amount: Union[int, Decimal, str], currency: Union[Currency, str] = Currency.USD) -> 'Money':
        """Build from any Decimal-compatible amount and a currency code."""
        return cls(amount=Decimal(str(amount)), currency=Currency(currency))

    @classmethod
    def zero(cls, currency: Currency = Currency.USD) -> 'Money':
        return cls(amount=Decimal('0'), currency=currency)
