from typing import Optional, Union

import structlog
from fastapi import APIRouter, Depends, Query

from ....api.dependencies import get_search_orchestrator
from ....news.schemas.responses import ErrorResponse, NoResultsResponse, SearchResponse
from ....news.services.query_sanitizer import sanitize
from ....news.services.search_orchestrator import SearchOrchestrator

logger = structlog.get_logger(__name__)

router = APIRouter()

NO_RESULTS_MESSAGE = "No articles found from RSS, NewsData.io, or Google"


@router.get(
    "/search",
    response_model=Union[SearchResponse, NoResultsResponse],
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid query"}},
)
def search_news(
    query: Optional[str] = Query(None, description="Free-text topic to search for"),
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
):
    """
    Search news about a topic.

    Sources are tried in order: RSS feeds, NewsData.io, then Google News.
    The first source with at least one match answers the request. When none
    does, a 200 response flagged with ``error: true`` is returned instead.
    """
    parsed = sanitize(query or "")
    result = orchestrator.search(parsed)

    if result is None:
        logger.info("search_no_results", query=parsed.canonical_text)
        return NoResultsResponse(message=NO_RESULTS_MESSAGE, query=parsed.canonical_text)

    logger.info("search_completed", query=parsed.canonical_text, result_type=result.result_type.value, count=len(result.articles))
    return SearchResponse.from_result(result)
