"""
Customer entity.
"""
from dataclasses import dataclass

from .base import Entity


@dataclass(kw_only=True, eq=False)
class Customer(Entity):
    """Customer account a bill is issued to."""
    account_no: str
    name: str
    phone: str
    address: str = ""

    @property
    def display_name(self) -> str:
        """Name with account number, as listed in the customer picker."""
        return f"{self.name} ({self.account_no})"

    def matches(self, term: str) -> bool:
        """Case-insensitive search over name and account number; phone by substring."""
        needle = term.strip().lower()
        if not needle:
            return True
        return (
            needle in self.name.lower()
            or needle in self.account_no.lower()
            or term.strip() in self.phone
        )
