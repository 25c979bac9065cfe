from .search import (
    MAX_RESULTS,
    ArticleCandidate,
    ExtractedArticle,
    OutcomeStatus,
    Query,
    ResultType,
    SearchResult,
    SourceOutcome,
)

__all__ = [
    "MAX_RESULTS",
    "ArticleCandidate",
    "ExtractedArticle",
    "OutcomeStatus",
    "Query",
    "ResultType",
    "SearchResult",
    "SourceOutcome",
]
