"""
News Module
===========

Topic search over several news sources, including:
- Query sanitization and keyword extraction
- RSS, NewsData.io and Google News source adapters
- Ordered fallback across sources with a uniform article shape
- Readable article extraction for a single URL

Nothing here is persisted; every object lives for one request.
"""
