from functools import lru_cache
from typing import Annotated, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode


DEFAULT_FEED_URLS = [
    "http://rss.cnn.com/rss/edition.rss",
    "https://feeds.bbci.co.uk/news/rss.xml",
    "https://www.aljazeera.com/xml/rss/all.xml",
]

DEFAULT_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/100.0.4896.75 Safari/537.36"
)


class Settings(BaseSettings):

    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(
        default=3000,
        description="API port",
        validation_alias=AliasChoices("PORT", "API_PORT"),
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Commercial news API (NewsData.io); absence disables the source
    newsdata_api_key: Optional[str] = Field(
        default=None,
        description="NewsData.io API key",
        validation_alias=AliasChoices("NEWSDATA_KEY", "NEWSDATA_API_KEY"),
    )
    newsdata_base_url: str = Field(
        default="https://newsdata.io/api/1/news",
        description="NewsData.io news search endpoint"
    )

    feed_urls: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_FEED_URLS),
        description="Syndication feeds searched first, in priority order"
    )
    feed_max_workers: int = Field(default=4, description="Concurrent feed downloads per search")

    google_news_base_url: str = Field(
        default="https://news.google.com",
        description="Origin of the scraped search page"
    )
    google_news_hl: str = Field(default="en-US", description="Google News interface language")
    google_news_gl: str = Field(default="US", description="Google News country")
    google_news_ceid: str = Field(default="US:en", description="Google News edition id")

    browser_user_agent: str = Field(
        default=DEFAULT_BROWSER_USER_AGENT,
        description="User-Agent sent to scraped pages and article hosts"
    )
    request_timeout_seconds: float = Field(default=10.0, description="Timeout for feed, API and search page calls")
    article_fetch_timeout_seconds: float = Field(default=10.0, description="Timeout for article extraction fetches")
    max_results: int = Field(default=20, description="Maximum articles returned per search")

    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("allowed_origins", "feed_urls", mode="before")
    @classmethod
    def parse_comma_separated(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("newsdata_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def newsdata_enabled(self) -> bool:
        return bool(self.newsdata_api_key)

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
