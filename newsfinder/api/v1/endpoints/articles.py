from typing import Optional, Union

from fastapi import APIRouter, Depends, Query

from ....api.dependencies import get_article_extractor
from ....exceptions import ValidationError
from ....news.schemas.responses import ErrorResponse, ExtractedArticleResponse, ExtractionWarningResponse
from ....news.services.article_extractor import ArticleExtractor

router = APIRouter()


@router.get(
    "/fetch",
    response_model=Union[ExtractedArticleResponse, ExtractionWarningResponse],
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid url"},
        500: {"model": ErrorResponse, "description": "Article could not be downloaded"},
    },
)
def fetch_article(
    url: Optional[str] = Query(None, description="Absolute URL of the article to extract"),
    extractor: ArticleExtractor = Depends(get_article_extractor),
):
    """Extract readable title, text and byline from an article page"""
    if not url:
        raise ValidationError("Missing 'url' parameter")

    article = extractor.extract(url)
    if article is None:
        return ExtractionWarningResponse(warning="Could not extract readable content (Readability failed)")

    return ExtractedArticleResponse.from_article(article)
