"""
Base class for news source adapters
Every source answers a query with a SourceOutcome and never raises
"""

from abc import ABC, abstractmethod
from typing import Optional

import requests
import structlog

from ....exceptions import NetworkError, ValidationError
from ...models.search import MAX_RESULTS, ArticleCandidate, Query, ResultType, SourceOutcome


logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class SourceAdapter(ABC):
    """Base adapter for search sources"""

    result_type: ResultType

    def __init__(
        self,
        name: str,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: Optional[str] = None,
        limit: int = MAX_RESULTS,
    ):
        self.name = name
        self.base_url = base_url
        self.timeout = timeout
        self.limit = limit
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({'User-Agent': user_agent})

    @abstractmethod
    def fetch_candidates(self, query: Query) -> SourceOutcome:
        """Search this source and return Success, Empty or Failure"""

    def is_enabled(self) -> bool:
        return True

    def close(self) -> None:
        self.session.close()

    def get(self, url: str, **kwargs) -> requests.Response:
        """GET with the adapter timeout; network and HTTP errors become NetworkError"""
        try:
            response = self.session.get(url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            return response
        except requests.Timeout as e:
            raise NetworkError(self.name, f"Request timed out after {self.timeout}s") from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise NetworkError(self.name, f"HTTP {status}") from e
        except requests.RequestException as e:
            raise NetworkError(self.name, str(e)) from e

    def build_candidate(
        self,
        title: Optional[str],
        link: Optional[str],
        source_label: str,
        snippet: Optional[str] = None,
    ) -> Optional[ArticleCandidate]:
        """Build a candidate, or None when the title or link is unusable

        Upstream payloads are not trusted: non-string fields count as missing.
        """
        try:
            return ArticleCandidate(
                title=_as_text(title),
                link=_as_text(link).strip(),
                source_label=_as_text(source_label) or self.name,
                snippet=_as_text(snippet) or None,
            )
        except ValidationError as e:
            logger.debug("candidate_rejected", source=self.name, link=link, reason=str(e))
            return None


def _as_text(value) -> str:
    return value if isinstance(value, str) else ""
