"""
Draft domain events.

Delivered to composer subscribers after each state change.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..entities.base import DomainEvent


@dataclass(kw_only=True)
class LineAdded(DomainEvent):
    """Event raised when a line is appended to the draft."""
    line_id: str
    item_id: str
    quantity: int
    rate: str
    amount: str
    total: str

    @property
    def event_type(self) -> str:
        return "draft.line_added"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            'line_id': self.line_id,
            'item_id': self.item_id,
            'quantity': self.quantity,
            'rate': self.rate,
            'amount': self.amount,
            'total': self.total,
        }


@dataclass(kw_only=True)
class LineRemoved(DomainEvent):
    """Event raised when a line is removed from the draft."""
    line_id: str
    total: str

    @property
    def event_type(self) -> str:
        return "draft.line_removed"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            'line_id': self.line_id,
            'total': self.total,
        }


@dataclass(kw_only=True)
class CustomerSelected(DomainEvent):
    """Event raised when the draft's customer changes."""
    customer_id: Optional[str]

    @property
    def event_type(self) -> str:
        return "draft.customer_selected"

    def _get_event_data(self) -> Dict[str, Any]:
        return {'customer_id': self.customer_id}


@dataclass(kw_only=True)
class DraftSubmitted(DomainEvent):
    """Event raised when a snapshot of the draft is dispatched."""
    bill_no: str
    customer_id: str
    line_count: int
    total: str

    @property
    def event_type(self) -> str:
        return "draft.submitted"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            'bill_no': self.bill_no,
            'customer_id': self.customer_id,
            'line_count': self.line_count,
            'total': self.total,
        }


@dataclass(kw_only=True)
class SubmissionAborted(DomainEvent):
    """Event raised when the billing service did not accept the draft."""
    bill_no: str
    reason: str

    @property
    def event_type(self) -> str:
        return "draft.submission_aborted"

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            'bill_no': self.bill_no,
            'reason': self.reason,
        }


@dataclass(kw_only=True)
class DraftReset(DomainEvent):
    """Event raised when the draft returns to its empty state."""
    reason: str = "reset"

    @property
    def event_type(self) -> str:
        return "draft.reset"

    def _get_event_data(self) -> Dict[str, Any]:
        return {'reason': self.reason}
