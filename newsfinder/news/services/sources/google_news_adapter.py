"""
Google News adapter - scrapes the public search page as a last resort.

The ``h3 a`` selector follows Google's current markup for headline links and
will stop matching when that markup changes.
"""

from typing import List

import structlog
from bs4 import BeautifulSoup

from ....exceptions import ParsingError, SourceUnavailable
from ...models.search import ArticleCandidate, Query, ResultType, SourceOutcome
from ....utils.string_utils import clean_text
from ....utils.url_utils import resolve_site_link
from .base import SourceAdapter


logger = structlog.get_logger(__name__)

HEADLINE_SELECTOR = "h3 a"
SOURCE_LABEL = "Google News"
MIN_LINK_LENGTH = 21


class GoogleNewsAdapter(SourceAdapter):
    """Headline links from the Google News search results page"""

    result_type = ResultType.SCRAPE

    def __init__(
        self,
        base_url: str = "https://news.google.com",
        hl: str = "en-US",
        gl: str = "US",
        ceid: str = "US:en",
        **kwargs,
    ):
        super().__init__(SOURCE_LABEL, base_url.rstrip("/"), **kwargs)
        self.locale_params = {"hl": hl, "gl": gl, "ceid": ceid}

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    def fetch_candidates(self, query: Query) -> SourceOutcome:
        try:
            response = self.get(self.search_url, params={"q": query.canonical_text, **self.locale_params})
            candidates = self.parse_results(response.text)
        except SourceUnavailable as e:
            logger.warning("google_news_scrape_failed", error=e.message)
            return SourceOutcome.failure(e)
        except Exception as e:
            logger.warning("google_news_scrape_failed", error=str(e), exc_info=True)
            return SourceOutcome.failure(ParsingError(self.name, str(e)))

        logger.info("google_news_scraped", matches=len(candidates))
        return SourceOutcome.success(candidates, self.limit)

    def parse_results(self, html: str) -> List[ArticleCandidate]:
        soup = BeautifulSoup(html or "", "html.parser")
        candidates = []

        for anchor in soup.select(HEADLINE_SELECTOR):
            title = clean_text(anchor.get_text())
            link = resolve_site_link(anchor.get("href", ""), self.base_url)

            if not title or len(link) < MIN_LINK_LENGTH:
                continue

            candidate = self.build_candidate(title=title, link=link, source_label=SOURCE_LABEL)
            if candidate:
                candidates.append(candidate)

        return candidates
