import re

from ...exceptions import ValidationError
from ..models.search import Query


NON_ALPHANUMERIC = re.compile(r"[^0-9a-zA-Z\s]+|_+")
WHITESPACE = re.compile(r"\s+")
MIN_KEYWORD_LENGTH = 3


def canonicalize(raw: str) -> str:
    # punctuation becomes a separator so "covid-19" still yields two tokens
    text = NON_ALPHANUMERIC.sub(" ", raw or "")
    return WHITESPACE.sub(" ", text).strip().lower()


def extract_keywords(canonical_text: str) -> tuple:
    keywords = []
    for token in canonical_text.split():
        if len(token) >= MIN_KEYWORD_LENGTH and token not in keywords:
            keywords.append(token)
    return tuple(keywords)


def sanitize(raw: str) -> Query:
    canonical_text = canonicalize(raw)
    if not canonical_text:
        raise ValidationError("Missing or invalid query")

    return Query(
        raw_text=raw,
        canonical_text=canonical_text,
        keywords=extract_keywords(canonical_text),
    )
