"""Search and article-extraction response schemas"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.search import ArticleCandidate, ExtractedArticle, SearchResult


class ArticleResponse(BaseModel):
    """One article in a search result"""
    model_config = ConfigDict(populate_by_name=True)

    title: str
    link: str
    source: str
    content_snippet: Optional[str] = Field(None, alias="contentSnippet")

    @classmethod
    def from_candidate(cls, candidate: ArticleCandidate) -> "ArticleResponse":
        return cls(
            title=candidate.title,
            link=candidate.link,
            source=candidate.source_label,
            content_snippet=candidate.snippet,
        )


class SearchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    result_type: str = Field(..., alias="resultType", description="rss, newsdata or google")
    results: List[ArticleResponse] = []

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            result_type=result.result_type.value,
            results=[ArticleResponse.from_candidate(article) for article in result.articles],
        )


class NoResultsResponse(BaseModel):
    """Every source came back empty; still a 200 so clients can tell it from a bad request"""
    error: bool = True
    message: str
    query: str


class ErrorResponse(BaseModel):
    error: str


class ExtractedArticleResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: str
    byline: Optional[str] = None
    site_name: Optional[str] = Field(None, alias="siteName")

    @classmethod
    def from_article(cls, article: ExtractedArticle) -> "ExtractedArticleResponse":
        return cls(
            title=article.title,
            content=article.content,
            byline=article.byline,
            site_name=article.site_name,
        )


class ExtractionWarningResponse(BaseModel):
    warning: str
