"""
Change notifications from foreign bounded contexts.

A foreign context that owns an identity announces changes to the
attributes it owns with ForeignIdentityChanged. Local entities whose
identity was assigned by that context apply the change to their own
copies of those attributes.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Protocol

from .domain_event import DomainEvent
from .identity import Identity


@dataclass(frozen=True)
class ForeignIdentityChanged(DomainEvent):
    """Attributes owned by ``context`` changed for the identity in ``aggregate_id``."""

    context: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


class ForeignSynchronized(Protocol):
    """Entity kept in step with the foreign context that assigned its identity."""

    id: Identity

    def apply_foreign_change(self, change: ForeignIdentityChanged) -> None: ...
