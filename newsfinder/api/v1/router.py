from fastapi import APIRouter

from .endpoints import articles, health, search

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])

# Topic search across RSS, NewsData.io and Google News (e.g. /search?query=bitcoin)
api_router.include_router(search.router, tags=["search"])

# Readable article extraction (e.g. /fetch?url=https://...)
api_router.include_router(articles.router, tags=["articles"])
