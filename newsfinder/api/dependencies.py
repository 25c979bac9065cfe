from typing import Iterator

from ..config import get_settings
from ..news.services.article_extractor import ArticleExtractor
from ..news.services.search_orchestrator import SearchOrchestrator


def get_search_orchestrator() -> Iterator[SearchOrchestrator]:
    orchestrator = SearchOrchestrator.from_settings(get_settings())
    try:
        yield orchestrator
    finally:
        orchestrator.close()


def get_article_extractor() -> Iterator[ArticleExtractor]:
    settings = get_settings()
    extractor = ArticleExtractor(
        timeout=settings.article_fetch_timeout_seconds,
        user_agent=settings.browser_user_agent,
    )
    try:
        yield extractor
    finally:
        extractor.close()
