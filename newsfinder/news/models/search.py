"""
Request-scoped value types for the search pipeline.

Everything here is immutable and lives only for one request: a sanitized
``Query`` goes in, each source answers with a ``SourceOutcome`` and the
first successful one becomes the ``SearchResult`` sent to the client.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from ...exceptions import ValidationError
from ...utils.url_utils import is_absolute_url


MAX_RESULTS = 20


class ResultType(str, Enum):
    """Which source produced the results (wire values kept stable for the frontend)."""
    FEED = "rss"
    API = "newsdata"
    SCRAPE = "google"


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    EMPTY = "empty"
    FAILURE = "failure"


@dataclass(frozen=True)
class Query:
    raw_text: str
    canonical_text: str
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ArticleCandidate:
    """Uniform article shape shared by every source"""
    title: str
    link: str
    source_label: str
    snippet: Optional[str] = None

    def __post_init__(self):
        title = (self.title or "").strip()
        if not title:
            raise ValidationError("Article title is empty")
        if not is_absolute_url(self.link):
            raise ValidationError(f"Article link is not an absolute URL: {self.link!r}")
        object.__setattr__(self, "title", title)
        if self.snippet is not None and not self.snippet.strip():
            object.__setattr__(self, "snippet", None)


@dataclass(frozen=True)
class SourceOutcome:
    """Result of asking one source: Success(candidates), Empty or Failure(cause)."""
    status: OutcomeStatus
    candidates: Tuple[ArticleCandidate, ...] = ()
    cause: Optional[Exception] = None

    @classmethod
    def success(cls, candidates: Sequence[ArticleCandidate], limit: int = MAX_RESULTS) -> "SourceOutcome":
        capped = tuple(candidates)[:limit]
        if not capped:
            return cls.empty()
        return cls(status=OutcomeStatus.SUCCESS, candidates=capped)

    @classmethod
    def empty(cls) -> "SourceOutcome":
        return cls(status=OutcomeStatus.EMPTY)

    @classmethod
    def failure(cls, cause: Exception) -> "SourceOutcome":
        return cls(status=OutcomeStatus.FAILURE, cause=cause)

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


@dataclass(frozen=True)
class SearchResult:
    result_type: ResultType
    articles: Tuple[ArticleCandidate, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ExtractedArticle:
    url: str
    title: Optional[str]
    content: str
    byline: Optional[str] = None
    site_name: Optional[str] = None
