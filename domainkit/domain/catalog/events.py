"""Catalog domain events."""

from dataclasses import dataclass

from domainkit.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class ProductListed(DomainEvent):
    name: str
    price_cents: int


@dataclass(frozen=True)
class ProductRepriced(DomainEvent):
    price_cents: int
    previous_price_cents: int


@dataclass(frozen=True)
class ProductDiscontinued(DomainEvent):
    pass
