import re
from urllib.parse import urljoin, urlparse

from ..exceptions import ValidationError


URL_PATTERN = re.compile(
    r'^https?://'
    r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,63}|XN--[A-Z0-9-]{1,59})\.?|'
    r'localhost|'
    r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'
    r'(?::\d+)?'
    r'(?:/?|[/?#]\S+)$', re.IGNORECASE
)


def is_absolute_url(url: str) -> bool:
    return bool(url) and bool(URL_PATTERN.match(url))


def validate_url(url: str) -> None:
    if not is_absolute_url(url):
        raise ValidationError(f"Invalid URL: {url}")


def extract_domain(url: str) -> str:
    parsed = urlparse(url)
    return parsed.netloc


def resolve_site_link(href: str, origin: str) -> str:
    """Turn a search-page href into an absolute URL against the site origin.

    Hrefs of the form ``./articles/123`` are page-relative on the search page
    but map onto the origin root, so the leading dot is dropped.
    """
    if not href:
        return ""
    if href.startswith("./"):
        return origin.rstrip("/") + href[1:]
    if href.startswith(("http://", "https://")):
        return href
    return urljoin(origin.rstrip("/") + "/", href)
