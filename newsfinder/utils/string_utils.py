from typing import Optional

from bs4 import BeautifulSoup


def clean_text(text: str) -> str:
    return ' '.join(text.split())


def strip_html(markup: Optional[str]) -> str:
    """Plain text of an HTML fragment, whitespace collapsed."""
    if not markup:
        return ""
    if "<" not in markup:
        return clean_text(markup)
    return clean_text(BeautifulSoup(markup, "html.parser").get_text(" "))
