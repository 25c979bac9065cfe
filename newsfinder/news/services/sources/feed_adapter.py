"""
Syndication feed adapter - first and cheapest source in the search chain
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

import feedparser
import structlog

from ....exceptions import ParsingError, SourceUnavailable
from ...models.search import ArticleCandidate, Query, ResultType, SourceOutcome
from ....utils.string_utils import strip_html
from .base import SourceAdapter


logger = structlog.get_logger(__name__)

FALLBACK_FEED_LABEL = "RSS Feed"


def matches_keywords(text: str, keywords: Iterable[str]) -> bool:
    """True when at least one keyword occurs in the text (case-insensitive)"""
    haystack = text.lower()
    return any(keyword in haystack for keyword in keywords)


class FeedAdapter(SourceAdapter):
    """Searches a fixed list of RSS/Atom feeds by keyword"""

    result_type = ResultType.FEED

    def __init__(self, feed_urls: Sequence[str], max_workers: int = 4, **kwargs):
        super().__init__("RSS Feeds", "", **kwargs)
        self.feed_urls = list(feed_urls)
        self.max_workers = max(1, max_workers)

    def fetch_candidates(self, query: Query) -> SourceOutcome:
        if not self.feed_urls:
            logger.info("feed_search_skipped", reason="no_feeds_configured")
            return SourceOutcome.empty()
        if not query.keywords:
            logger.info("feed_search_skipped", reason="no_keywords", query=query.canonical_text)
            return SourceOutcome.empty()

        try:
            candidates = self._search_all_feeds(query)
        except Exception as e:
            # a broken feed never fails the whole chain; fall through to the next source
            logger.warning("feed_search_failed", error=str(e), exc_info=True)
            return SourceOutcome.empty()

        logger.info("feed_search_completed", feeds=len(self.feed_urls), matches=len(candidates))
        return SourceOutcome.success(candidates, self.limit)

    def _search_all_feeds(self, query: Query) -> List[ArticleCandidate]:
        workers = min(self.max_workers, len(self.feed_urls))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="feed") as executor:
            # map() keeps configured feed order regardless of completion order
            batches = list(executor.map(lambda url: self._search_feed(url, query), self.feed_urls))

        return [candidate for batch in batches for candidate in batch]

    def _search_feed(self, feed_url: str, query: Query) -> List[ArticleCandidate]:
        try:
            parsed = self._fetch_feed(feed_url)
        except SourceUnavailable as e:
            logger.warning("feed_fetch_failed", feed_url=feed_url, error=e.message)
            return []

        label = parsed.feed.get("title") or FALLBACK_FEED_LABEL
        matches = []
        for entry in parsed.entries:
            candidate = self._match_entry(entry, label, query.keywords)
            if candidate:
                matches.append(candidate)

        logger.debug("feed_searched", feed_url=feed_url, entries=len(parsed.entries), matches=len(matches))
        return matches

    def _fetch_feed(self, feed_url: str):
        response = self.get(feed_url)
        parsed = feedparser.parse(response.content)
        if parsed.get("bozo") and not parsed.entries:
            reason = parsed.get("bozo_exception") or "unreadable feed"
            raise ParsingError(self.name, f"Could not parse {feed_url}: {reason}")
        return parsed

    def _match_entry(self, entry, label: str, keywords: Sequence[str]) -> Optional[ArticleCandidate]:
        title = strip_html(entry.get("title"))
        snippet = strip_html(entry.get("summary") or entry.get("description"))

        if not matches_keywords(f"{title} {snippet}", keywords):
            return None

        return self.build_candidate(
            title=title,
            link=entry.get("link"),
            source_label=label,
            snippet=snippet or None,
        )
