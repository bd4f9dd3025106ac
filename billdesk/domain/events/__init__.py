# Domain Events
from .draft_events import (
    LineAdded,
    LineRemoved,
    CustomerSelected,
    DraftSubmitted,
    SubmissionAborted,
    DraftReset,
)

__all__ = [
    'LineAdded',
    'LineRemoved',
    'CustomerSelected',
    'DraftSubmitted',
    'SubmissionAborted',
    'DraftReset',
]
