"""
Search orchestrator - runs the sources in priority order until one answers.

Sources are tried one at a time; the first Success ends the search and its
articles are returned as-is. Empty and Failure both move on to the next
source, they only differ in how they are logged. When every source comes up
short the search is exhausted and ``search`` returns None.
"""

from typing import List, Optional, Sequence

import structlog

from ...config import Settings
from ...core.performance_timer import time_stage
from ...exceptions import SourceUnavailable
from ..models.search import OutcomeStatus, Query, SearchResult, SourceOutcome
from .query_sanitizer import sanitize
from .sources.base import SourceAdapter
from .sources.feed_adapter import FeedAdapter
from .sources.google_news_adapter import GoogleNewsAdapter
from .sources.newsdata_adapter import NewsDataAdapter


logger = structlog.get_logger(__name__)


class SearchOrchestrator:
    """Ordered, short-circuiting fallback chain over the search sources"""

    def __init__(self, adapters: Sequence[SourceAdapter]):
        self.adapters: List[SourceAdapter] = list(adapters)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchOrchestrator":
        common = {"timeout": settings.request_timeout_seconds, "limit": settings.max_results}
        return cls([
            FeedAdapter(settings.feed_urls, max_workers=settings.feed_max_workers, **common),
            NewsDataAdapter(settings.newsdata_api_key, base_url=settings.newsdata_base_url, **common),
            GoogleNewsAdapter(
                base_url=settings.google_news_base_url,
                hl=settings.google_news_hl,
                gl=settings.google_news_gl,
                ceid=settings.google_news_ceid,
                user_agent=settings.browser_user_agent,
                **common,
            ),
        ])

    def run(self, raw_query: str) -> Optional[SearchResult]:
        """Sanitize the raw input and search; raises ValidationError for empty queries"""
        return self.search(sanitize(raw_query))

    def search(self, query: Query) -> Optional[SearchResult]:
        log = logger.bind(query=query.canonical_text)
        log.info("search_started", keywords=list(query.keywords))

        for position, adapter in enumerate(self.adapters, start=1):
            with time_stage(f"search.{adapter.name}") as timer:
                outcome = self._invoke(adapter, query)

            self._log_outcome(log, adapter, outcome, position, timer.duration_ms)

            if outcome.is_success:
                return SearchResult(result_type=adapter.result_type, articles=outcome.candidates)

        log.info("search_exhausted", sources=[adapter.name for adapter in self.adapters])
        return None

    def _invoke(self, adapter: SourceAdapter, query: Query) -> SourceOutcome:
        try:
            return adapter.fetch_candidates(query)
        except Exception as e:
            # adapters are expected to report failures through their outcome
            logger.error("source_raised", source=adapter.name, error=str(e), exc_info=True)
            return SourceOutcome.failure(SourceUnavailable(adapter.name, str(e)))

    @staticmethod
    def _log_outcome(log, adapter: SourceAdapter, outcome: SourceOutcome, position: int, duration_ms: float):
        context = {"source": adapter.name, "position": position, "duration_ms": duration_ms}

        if outcome.status is OutcomeStatus.SUCCESS:
            log.info("source_succeeded", count=len(outcome.candidates), **context)
        elif outcome.status is OutcomeStatus.EMPTY:
            log.info("source_empty", **context)
        else:
            log.warning("source_failed", error=str(outcome.cause), **context)

    def close(self) -> None:
        for adapter in self.adapters:
            adapter.close()

    def describe_sources(self) -> dict:
        return {
            adapter.result_type.value: {
                "name": adapter.name,
                "enabled": adapter.is_enabled(),
                "class": adapter.__class__.__name__,
            }
            for adapter in self.adapters
        }
