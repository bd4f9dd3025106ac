"""
Billing domain entities.

Catalog items, draft lines, and the bills they become once the
billing service accepts them.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .base import Entity, new_id, utc_now


class BillStatus(str, Enum):
    """Lifecycle status of a persisted bill."""
    DRAFT = "draft"      # Newly created, not yet sent to the customer
    SENT = "sent"
    PAID = "paid"
    PENDING = "pending"  # Awaiting payment
    OVERDUE = "overdue"


class DraftState(str, Enum):
    """States of a draft bill in the composer."""
    EMPTY = "empty"            # No lines, no customer
    BUILDING = "building"      # Lines or customer present
    SUBMITTING = "submitting"  # Submission in flight


@dataclass(frozen=True)
class CatalogItem:
    """
    Purchasable item with its list price.

    Owned by the catalog service; the composer only reads it.
    """
    id: str
    name: str
    price: Decimal = Decimal("0")
    item_code: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, 'price', Decimal(str(self.price)))


class Catalog:
    """
    Read model of catalog items keyed by id.

    Built from whatever list the catalog gateway returns; later items
    with the same id replace earlier ones.
    """

    def __init__(self, items: Iterable[CatalogItem] = ()):
        self._items: Dict[str, CatalogItem] = {}
        for item in items:
            self._items[item.id] = item

    def get(self, item_id: Any) -> Optional[CatalogItem]:
        """Return the item with this id, or None."""
        if item_id is None:
            return None
        return self._items.get(str(item_id))

    def __contains__(self, item_id: object) -> bool:
        return item_id is not None and str(item_id) in self._items

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class DraftLine:
    """
    One catalog item with a quantity and rate inside a draft.

    The rate starts at the catalog price but may be negotiated per bill.
    """
    item_id: str
    quantity: int
    rate: Decimal
    item_name: str = ""
    id: str = field(default_factory=new_id)

    @property
    def amount(self) -> Decimal:
        """Line amount, always quantity x rate."""
        return self.rate * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'item_id': self.item_id,
            'item_name': self.item_name,
            'quantity': self.quantity,
            'rate': str(self.rate),
            'amount': str(self.amount),
        }


def lines_total(lines: Iterable[DraftLine]) -> Decimal:
    """Sum of line amounts."""
    return sum((line.amount for line in lines), Decimal("0"))


@dataclass(frozen=True)
class SubmissionLine:
    """Line as sent to the billing service."""
    item_id: str
    quantity: int
    rate: Decimal
    amount: Decimal


def generate_bill_no(created_at: datetime) -> str:
    """Bill numbers are 'BILL' followed by the creation time in epoch milliseconds."""
    return f"BILL{int(created_at.timestamp() * 1000)}"


@dataclass(frozen=True)
class BillSubmission:
    """
    Snapshot of a draft handed to the billing service.

    Frozen so edits made while the request is in flight cannot reach it.
    """
    customer_id: str
    lines: Tuple[SubmissionLine, ...]
    total_amount: Decimal
    status: BillStatus = BillStatus.DRAFT
    created_at: datetime = field(default_factory=utc_now)
    bill_no: str = ""

    def __post_init__(self) -> None:
        if not self.bill_no:
            object.__setattr__(self, 'bill_no', generate_bill_no(self.created_at))

    @property
    def final_amount(self) -> Decimal:
        """No tax is applied, so the final amount equals the total."""
        return self.total_amount

    @classmethod
    def from_draft(
        cls,
        customer_id: str,
        lines: Iterable[DraftLine],
        created_at: Optional[datetime] = None,
    ) -> 'BillSubmission':
        """Build the submission from the current draft lines."""
        snapshot = tuple(
            SubmissionLine(
                item_id=line.item_id,
                quantity=line.quantity,
                rate=line.rate,
                amount=line.amount,
            )
            for line in lines
        )
        return cls(
            customer_id=customer_id,
            lines=snapshot,
            total_amount=sum((line.amount for line in snapshot), Decimal("0")),
            created_at=created_at or utc_now(),
        )


@dataclass(frozen=True)
class BillLine:
    """Line of a persisted bill."""
    item_id: str
    quantity: int
    rate: Decimal
    amount: Decimal
    id: Optional[str] = None
    item_name: Optional[str] = None


@dataclass(kw_only=True, eq=False)
class Bill(Entity):
    """
    Bill as stored by the billing service.
    """
    bill_no: str
    customer_id: str
    lines: List[BillLine] = field(default_factory=list)
    total_amount: Decimal = Decimal("0")
    tax: Optional[Decimal] = None
    final_amount: Decimal = Decimal("0")
    status: BillStatus = BillStatus.DRAFT
    due_date: Optional[datetime] = None

    @property
    def is_settled(self) -> bool:
        return self.status == BillStatus.PAID

    @property
    def is_outstanding(self) -> bool:
        """Bills still expecting payment."""
        return self.status in (BillStatus.PENDING, BillStatus.OVERDUE, BillStatus.SENT)
