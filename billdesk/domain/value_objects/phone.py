"""
Phone number value object for customer records.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict

from ..exceptions import ValidationException


@dataclass(frozen=True)
class PhoneNumber:
    """
    Phone number as typed into the customer form.

    Accepts an optional leading '+' followed by digits, spaces, dashes
    and parentheses, e.g. '+1 (555) 123-4567'. The original text is kept
    for display; `digits` strips the separators.
    """
    number: str

    PHONE_REGEX = re.compile(r'^\+?[\d\s\-()]+$')

    def __post_init__(self) -> None:
        """Validate phone number."""
        if not self.number or not self.number.strip():
            raise ValidationException(
                message="Phone number cannot be empty",
                errors={'phone': ['Phone is required']}
            )

        object.__setattr__(self, 'number', self.number.strip())

        if not self.is_valid(self.number):
            raise ValidationException(
                message="Invalid phone number format",
                errors={'phone': ['Please enter a valid phone number']}
            )

    @classmethod
    def is_valid(cls, number: str) -> bool:
        """Check the format without raising."""
        return bool(cls.PHONE_REGEX.match(number))

    @property
    def digits(self) -> str:
        """Return the number with separators removed, keeping a leading '+'."""
        cleaned = re.sub(r'[\s\-\(\)]+', '', self.number)
        return cleaned

    def __str__(self) -> str:
        return self.number

    def __repr__(self) -> str:
        return f"PhoneNumber('{self.number}')"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            'number': self.number,
            'digits': self.digits,
        }
