"""
NewsData.io adapter - commercial news search API, second in the chain
"""

from typing import Any, Dict, List, Optional

import structlog

from ....exceptions import ParsingError, SourceUnavailable
from ...models.search import ArticleCandidate, Query, ResultType, SourceOutcome
from .base import SourceAdapter


logger = structlog.get_logger(__name__)


class NewsDataAdapter(SourceAdapter):
    """NewsData.io latest-news search"""

    result_type = ResultType.API

    def __init__(self, api_key: Optional[str], base_url: str = "https://newsdata.io/api/1/news", **kwargs):
        super().__init__("NewsData.io", base_url, **kwargs)
        self.api_key = api_key

    def is_enabled(self) -> bool:
        return bool(self.api_key)

    def fetch_candidates(self, query: Query) -> SourceOutcome:
        if not self.is_enabled():
            logger.info("newsdata_skipped", reason="api_key_not_configured")
            return SourceOutcome.empty()

        try:
            payload = self._request(query)
        except SourceUnavailable as e:
            logger.warning("newsdata_request_failed", error=e.message)
            return SourceOutcome.failure(e)

        logger.info("newsdata_response", status=payload.get("status"), total=payload.get("totalResults"))

        if payload.get("status") == "error":
            error = ParsingError(self.name, self._describe_error(payload))
            logger.warning("newsdata_error_status", error=error.message)
            return SourceOutcome.failure(error)

        candidates = self._map_results(payload.get("results") or [])
        return SourceOutcome.success(candidates, self.limit)

    def _request(self, query: Query) -> Dict[str, Any]:
        response = self.get(self.base_url, params={"apikey": self.api_key, "q": query.canonical_text})
        try:
            payload = response.json()
        except ValueError as e:
            raise ParsingError(self.name, "Response body is not JSON") from e
        if not isinstance(payload, dict):
            raise ParsingError(self.name, "Unexpected response shape")
        return payload

    def _map_results(self, results: List[Dict[str, Any]]) -> List[ArticleCandidate]:
        candidates = []
        for item in results:
            if not isinstance(item, dict):
                continue
            candidate = self.build_candidate(
                title=item.get("title"),
                link=item.get("link"),
                source_label=item.get("source_id") or self.name,
                snippet=item.get("description"),
            )
            if candidate:
                candidates.append(candidate)
        return candidates

    @staticmethod
    def _describe_error(payload: Dict[str, Any]) -> str:
        results = payload.get("results")
        if isinstance(results, dict):
            return results.get("message") or results.get("code") or "provider error"
        return "provider error"
