import pytest
from unittest.mock import MagicMock
import requests

from newsfinder.news.models.search import ArticleCandidate, SourceOutcome
from newsfinder.news.services.sources.base import SourceAdapter


@pytest.fixture
def world_feed_xml():
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>World News</title>
    <link>https://world.example.com</link>
    <description>Top stories</description>
    <item>
      <title>Bitcoin hits new high</title>
      <link>https://world.example.com/markets/bitcoin-hits-new-high</link>
    </item>
    <item>
      <title>Local elections draw record turnout</title>
      <link>https://world.example.com/politics/local-elections</link>
      <description>Voters queued for hours across the region.</description>
    </item>
    <item>
      <title>Markets close mixed</title>
      <link>https://world.example.com/markets/close</link>
      <description>&lt;p&gt;Crypto &lt;b&gt;prices&lt;/b&gt; slipped late in the day.&lt;/p&gt;</description>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def tech_feed_xml():
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <link>https://tech.example.com</link>
    <description>Untitled tech feed</description>
    <item>
      <title>Exchange adds bitcoin custody</title>
      <link>https://tech.example.com/exchange-bitcoin-custody</link>
      <description>New service for institutions.</description>
    </item>
    <item>
      <title>Untracked item</title>
      <link>not a url</link>
      <description>bitcoin mention without a usable link</description>
    </item>
  </channel>
</rss>"""


@pytest.fixture
def google_news_html():
    return """<html><body>
<main>
  <article>
    <h3><a href="./articles/123">Bitcoin rallies past resistance</a></h3>
  </article>
  <article>
    <h3><a href="https://publisher.example.com/story/456">Regulators weigh <span>crypto</span> rules</a></h3>
  </article>
  <article>
    <h3><a href="./articles/789">   </a></h3>
  </article>
  <article>
    <h3><a href="https://x.io/a">Too short link</a></h3>
  </article>
  <article>
    <div><a href="./articles/999">Not a headline</a></div>
  </article>
</main>
</body></html>"""


@pytest.fixture
def newsdata_payload():
    return {
        "status": "success",
        "totalResults": 3,
        "results": [
            {
                "title": "Bitcoin price climbs",
                "link": "https://newsdata.example.com/bitcoin-price-climbs",
                "source_id": "coindesk",
                "description": "Traders cheer the move.",
            },
            {
                "title": "Ether follows bitcoin",
                "link": "https://newsdata.example.com/ether-follows",
                "source_id": "reuters",
                "description": None,
            },
            {
                "title": None,
                "link": "https://newsdata.example.com/untitled",
                "source_id": "unknown",
            },
        ],
    }


def build_response(content=b"", text=None, json_data=None, status_code=200):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.content = content
    response.text = text if text is not None else content.decode("utf-8", errors="replace")
    response.json = MagicMock(return_value=json_data)
    if status_code >= 400:
        error_response = MagicMock(status_code=status_code)
        response.raise_for_status = MagicMock(
            side_effect=requests.HTTPError(f"{status_code} error", response=error_response)
        )
    else:
        response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def make_session():
    """Session whose get() answers per URL; exceptions in the mapping are raised"""
    def _make(routes):
        session = MagicMock(spec=requests.Session)
        session.headers = {}

        def _get(url, **kwargs):
            answer = routes[url]
            if isinstance(answer, Exception):
                raise answer
            return answer

        session.get = MagicMock(side_effect=_get)
        return session
    return _make


@pytest.fixture
def make_candidates():
    def _make(count, prefix="Story", source="Test Source"):
        return [
            ArticleCandidate(
                title=f"{prefix} {index}",
                link=f"https://news.example.com/{prefix.lower()}/{index}",
                source_label=source,
            )
            for index in range(count)
        ]
    return _make


@pytest.fixture
def make_adapter():
    """Stand-in source that answers every query with a fixed outcome"""
    def _make(name, result_type, outcome=None, side_effect=None):
        adapter = MagicMock(spec=SourceAdapter)
        adapter.name = name
        adapter.result_type = result_type
        adapter.is_enabled.return_value = True
        if side_effect is not None:
            adapter.fetch_candidates.side_effect = side_effect
        else:
            adapter.fetch_candidates.return_value = outcome or SourceOutcome.empty()
        return adapter
    return _make


@pytest.fixture
async def async_client():
    from httpx import AsyncClient, ASGITransport
    from newsfinder.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
