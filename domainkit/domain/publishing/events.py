"""Publishing domain events."""

from dataclasses import dataclass
from datetime import datetime

from domainkit.domain.common.domain_event import DomainEvent


@dataclass(frozen=True)
class ArticleDrafted(DomainEvent):
    title: str


@dataclass(frozen=True)
class ArticlePublished(DomainEvent):
    title: str
    published_at: datetime


@dataclass(frozen=True)
class ArticleUnpublished(DomainEvent):
    title: str


@dataclass(frozen=True)
class ArticleRevised(DomainEvent):
    title: str
    previous_title: str
