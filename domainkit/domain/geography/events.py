"""Geography domain events."""

from dataclasses import dataclass

from domainkit.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class AddressRecorded(DomainEvent):
    country_code: str
    city: str
    postcode: str


@dataclass(frozen=True)
class AddressRelocated(DomainEvent):
    country_code: str
    city: str
    postcode: str


@dataclass(frozen=True)
class AddressVerified(DomainEvent):
    country_code: str


@dataclass(frozen=True)
class AddressRejected(DomainEvent):
    country_code: str
    violations: tuple[str, ...]
