"""
Base classes for domain entities.
These are pure Python classes with no external dependencies.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID, uuid4


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


@dataclass
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Domain events represent something that happened in the domain.
    They are immutable and named in past tense.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=utc_now)

    @property
    @abstractmethod
    def event_type(self) -> str:
        """Return the type name of this event."""
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary for listeners."""
        return {
            'event_id': str(self.event_id),
            'event_type': self.event_type,
            'occurred_at': self.occurred_at.isoformat(),
            'data': self._get_event_data()
        }

    @abstractmethod
    def _get_event_data(self) -> Dict[str, Any]:
        """Return event-specific data for serialization."""
        pass


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for records owned by the billing API.

    Entities are identified by their ID, not by their attributes.
    IDs are opaque strings assigned by the API.
    """
    id: str = field(default_factory=new_id)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __eq__(self, other: object) -> bool:
        """Entities are equal if they have the same ID."""
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        return hash(self.id)
