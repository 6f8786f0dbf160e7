"""
Base class for Domain Events.

Domain Events represent something significant that happened in the domain.
They are immutable records of past occurrences that other parts of the
system can react to.

Example:
    @dataclass(frozen=True)
    class ArticlePublished(DomainEvent):
        title: str
        published_at: datetime
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Self
from uuid import UUID, uuid4

from .identity import Identity

_ENVELOPE_FIELDS = frozenset({"aggregate_id", "sequence", "event_id", "occurred_at"})


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Domain Events are:
    - Immutable (frozen dataclass)
    - Named in past tense (ArticlePublished, not PublishArticle)
    - Self-contained (the payload is captured when the event is emitted)
    - Timestamped (when the event occurred)
    - Numbered per aggregate, in the order of the mutations that produced them

    The envelope fields are keyword-only so subclasses can declare
    their payload fields positionally.
    """

    aggregate_id: Identity | None = field(default=None, kw_only=True)
    sequence: int = field(default=0, kw_only=True)
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC), kw_only=True)

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    @property
    def payload(self) -> Mapping[str, object]:
        """Read-only view of the event-specific fields."""
        return MappingProxyType(
            {f.name: getattr(self, f.name) for f in fields(self) if f.name not in _ENVELOPE_FIELDS}
        )

    def stamped(self, aggregate_id: Identity, sequence: int) -> Self:
        """Return a copy attributed to ``aggregate_id`` at position ``sequence``."""
        return replace(self, aggregate_id=aggregate_id, sequence=sequence)

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for serialization."""
        result: dict[str, object] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, datetime):
                result[f.name] = value.isoformat()
            elif isinstance(value, UUID):
                result[f.name] = str(value)
            elif hasattr(value, "to_primitive"):
                result[f.name] = value.to_primitive()
            elif isinstance(value, Mapping):
                result[f.name] = dict(value)
            else:
                result[f.name] = value
        result["event_type"] = self.event_type
        return result
