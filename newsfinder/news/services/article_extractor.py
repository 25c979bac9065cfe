"""
Article Extractor Service
Fetches a single article page and extracts its readable text with readability
"""

from typing import Optional

import requests
import structlog
from bs4 import BeautifulSoup
from readability import Document
from readability.readability import Unparseable

from ...exceptions import ExtractionError
from ...utils.string_utils import clean_text
from ...utils.url_utils import extract_domain, validate_url
from ..models.search import ExtractedArticle


logger = structlog.get_logger(__name__)


class ArticleExtractor:
    """Readable title, text and byline for an article URL"""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10.0, user_agent: Optional[str] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({'User-Agent': user_agent})

    def close(self) -> None:
        self.session.close()

    def extract(self, url: str) -> Optional[ExtractedArticle]:
        """
        Returns None when the page was fetched but readability found no article.

        Raises ValidationError for malformed URLs and ExtractionError when the
        page cannot be downloaded.
        """
        validate_url(url)
        logger.info("article_fetch_started", url=url)

        html = self._download(url)
        article = self.parse(url, html)

        if article is None:
            logger.warning("article_not_readable", url=url)
        else:
            logger.info("article_fetch_completed", url=url, content_length=len(article.content))
        return article

    def parse(self, url: str, html: str) -> Optional[ExtractedArticle]:
        try:
            document = Document(html, url=url)
            summary_html = document.summary(html_partial=True)
        except Unparseable as e:
            logger.debug("readability_unparseable", url=url, error=str(e))
            return None

        content = self._text_from_html(summary_html)
        if not content:
            return None

        page = BeautifulSoup(html, "html.parser")
        return ExtractedArticle(
            url=url,
            title=document.short_title() or document.title() or None,
            content=content,
            byline=self._find_byline(page),
            site_name=self._find_site_name(page) or extract_domain(url),
        )

    def _download(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.warning("article_fetch_failed", url=url, error=str(e))
            raise ExtractionError(f"Failed to fetch {url}: {e}") from e
        return response.text

    @staticmethod
    def _text_from_html(fragment: str) -> str:
        soup = BeautifulSoup(fragment or "", "html.parser")
        lines = (clean_text(line) for line in soup.get_text("\n").splitlines())
        return "\n".join(line for line in lines if line)

    @staticmethod
    def _find_byline(page: BeautifulSoup) -> Optional[str]:
        meta = page.find("meta", attrs={"name": "author"})
        if meta and meta.get("content"):
            return clean_text(meta["content"])

        author_link = page.find(attrs={"rel": "author"})
        if author_link:
            text = clean_text(author_link.get_text(" "))
            if text:
                return text
        return None

    @staticmethod
    def _find_site_name(page: BeautifulSoup) -> Optional[str]:
        meta = page.find("meta", attrs={"property": "og:site_name"})
        if meta and meta.get("content"):
            return clean_text(meta["content"])
        return None
