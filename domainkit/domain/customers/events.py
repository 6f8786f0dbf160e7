"""Customer domain events."""

from dataclasses import dataclass

from domainkit.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class CustomerRegistered(DomainEvent):
    name: str
    email: str


@dataclass(frozen=True)
class CustomerRenamed(DomainEvent):
    name: str
    previous_name: str


@dataclass(frozen=True)
class CustomerEmailChanged(DomainEvent):
    email: str
