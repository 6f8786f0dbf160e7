"""Publishing domain layer."""

from domainkit.domain.publishing.entities.article import Article, ArticleStatus
from domainkit.domain.publishing.events import (
    ArticleDrafted,
    ArticlePublished,
    ArticleRevised,
    ArticleUnpublished,
)

__all__ = [
    "Article",
    "ArticleDrafted",
    "ArticlePublished",
    "ArticleRevised",
    "ArticleStatus",
    "ArticleUnpublished",
]
