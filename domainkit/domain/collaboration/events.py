"""Collaboration domain events."""

from dataclasses import dataclass

from domainkit.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class CollaboratorJoined(DomainEvent):
    display_name: str


@dataclass(frozen=True)
class CollaboratorProfileSynchronized(DomainEvent):
    display_name: str
    email: str | None
