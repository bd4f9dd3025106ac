# Domain Value Objects - Immutable objects defined by their attributes

from .phone import PhoneNumber
from .money import Money, Currency

__all__ = [
    # Phone
    'PhoneNumber',
    # Money
    'Money',
    'Currency',
]
