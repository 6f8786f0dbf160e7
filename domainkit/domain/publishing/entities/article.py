"""
Article aggregate root.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from domainkit.domain.common.aggregate_root import AggregateRoot
from domainkit.domain.common.clock import Clock, SystemClock
from domainkit.domain.common.guards import require, require_max_length, require_not_blank
from domainkit.domain.common.value_objects import ArticleId
from domainkit.domain.publishing.events import (
    ArticleDrafted,
    ArticlePublished,
    ArticleRevised,
    ArticleUnpublished,
)

# Domain constraints
MAX_TITLE_LENGTH = 200


class ArticleStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass(eq=False)
class Article(AggregateRoot[ArticleId]):
    """
    Article that moves between draft and published.

    Business Rules:
    - Title and body cannot be empty; title is at most MAX_TITLE_LENGTH chars
    - A published article always has a publication timestamp, a draft never does
    - publish() and unpublish() are no-ops when the article is already in
      the target state, so no duplicate events are emitted
    """

    id: ArticleId
    title: str
    body: str
    status: ArticleStatus = ArticleStatus.DRAFT
    published_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.title = require_max_length(
            require_not_blank(self.title, "title"), "title", MAX_TITLE_LENGTH
        )
        self.body = require_not_blank(self.body, "body")
        require(
            (self.status is ArticleStatus.PUBLISHED) == (self.published_at is not None),
            "published_at must be set exactly when the article is published",
            field="published_at",
            value=self.published_at,
        )

    @property
    def is_published(self) -> bool:
        return self.status is ArticleStatus.PUBLISHED

    def publish(self) -> None:
        """Move a draft to published and stamp the publication time."""
        if self.is_published:
            return
        now = self.clock.now()
        self.status = ArticleStatus.PUBLISHED
        self.published_at = now
        self._record_event(ArticlePublished(self.title, now, occurred_at=now))

    def unpublish(self) -> None:
        """Move a published article back to draft and clear the publication time."""
        if not self.is_published:
            return
        self.status = ArticleStatus.DRAFT
        self.published_at = None
        self._record_event(ArticleUnpublished(self.title, occurred_at=self.clock.now()))

    def revise(self, title: str, body: str) -> None:
        """
        Replace title and body.

        Raises:
            InvalidArgumentError: If title or body is empty, or the title is too long
        """
        new_title = require_max_length(require_not_blank(title, "title"), "title", MAX_TITLE_LENGTH)
        new_body = require_not_blank(body, "body")
        previous_title = self.title
        self.title = new_title
        self.body = new_body
        self._record_event(
            ArticleRevised(new_title, previous_title, occurred_at=self.clock.now())
        )

    @classmethod
    def draft(
        cls,
        id: ArticleId,
        title: str,
        body: str,
        clock: Clock | None = None,
    ) -> "Article":
        """
        Create a new draft article.

        Raises:
            InvalidArgumentError: If title or body is invalid
        """
        article = cls(id=id, title=title, body=body, clock=clock or SystemClock())
        article._record_event(ArticleDrafted(article.title, occurred_at=article.clock.now()))
        return article

    @classmethod
    def create_with_id(
        cls,
        id: ArticleId,
        title: str,
        body: str,
        status: ArticleStatus,
        published_at: datetime | None,
        clock: Clock | None = None,
    ) -> "Article":
        """Reconstitute an article from persistence (no events)."""
        return cls(
            id=id,
            title=title,
            body=body,
            status=status,
            published_at=published_at,
            clock=clock or SystemClock(),
        )
