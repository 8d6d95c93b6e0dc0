"""Best-effort article text extraction for arbitrary web pages."""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, Optional, Sequence, Tuple

import requests

from .errors import FetchError, InsufficientContentError
from .sources import MIN_CONTENT_LENGTH, truncate

logger = logging.getLogger(__name__)

BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
WEB_CONTENT_LIMIT = 8000
_FETCH_TIMEOUT = float(os.environ.get("CAROUSEL_FETCH_TIMEOUT", "20"))

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")

_FLAGS = re.IGNORECASE | re.DOTALL

Strategy = Callable[[str], Optional[str]]


def _container_strategy(pattern: str) -> Strategy:
    compiled = re.compile(pattern, _FLAGS)

    def _match(html: str) -> Optional[str]:
        match = compiled.search(html)
        if match and match.group(1).strip():
            return match.group(0)
        return None

    return _match


# Tried in order; the first strategy returning markup wins.
CONTAINER_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("article", _container_strategy(r"<article[^>]*>(.*?)</article>")),
    ("main", _container_strategy(r"<main[^>]*>(.*?)</main>")),
    ("div.content", _container_strategy(r'<div[^>]*class="[^"]*content[^"]*"[^>]*>(.*?)</div>')),
    ("div.article", _container_strategy(r'<div[^>]*class="[^"]*article[^"]*"[^>]*>(.*?)</div>')),
    ("div.post", _container_strategy(r'<div[^>]*class="[^"]*post[^"]*"[^>]*>(.*?)</div>')),
)

_BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", _FLAGS)


def strip_scripts_and_styles(html: str) -> str:
    html = _SCRIPT_RE.sub("", html)
    return _STYLE_RE.sub("", html)


def html_to_text(markup: str) -> str:
    """Replace tags with spaces and collapse whitespace."""
    text = _TAG_RE.sub(" ", markup)
    return _WHITESPACE_RE.sub(" ", text).strip()


def select_main_markup(
    html: str,
    strategies: Sequence[Tuple[str, Strategy]] = CONTAINER_STRATEGIES,
) -> str:
    """Return the markup most likely to hold the article body.

    Falls back to the ``<body>`` element, then to the whole document.
    """
    for name, strategy in strategies:
        selected = strategy(html)
        if selected is not None:
            logger.debug("Web extraction matched container %s", name)
            return selected

    body = _BODY_RE.search(html)
    if body:
        logger.debug("Web extraction fell back to <body>")
        return body.group(0)
    logger.debug("Web extraction fell back to the whole document")
    return html


def extract_article_text(html: str) -> str:
    """Turn a raw HTML page into bounded plain text for prompting."""

    cleaned = strip_scripts_and_styles(html)
    text = html_to_text(select_main_markup(cleaned))
    text = truncate(text, WEB_CONTENT_LIMIT)
    logger.info("Extracted content length: %d", len(text))

    if len(text) < MIN_CONTENT_LENGTH:
        raise InsufficientContentError(
            "Could not extract meaningful content from the URL. "
            "The page might be protected or require JavaScript."
        )
    return text


def fetch_html(url: str, *, timeout: float = _FETCH_TIMEOUT) -> str:
    try:
        response = requests.get(
            url,
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=timeout,
        )
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch URL: {exc}") from exc

    if not response.ok:
        raise FetchError(f"Failed to fetch URL: {response.status_code} {response.reason}")
    return response.text


def fetch_web_content(url: str) -> str:
    logger.info("Fetching content from URL: %s", url)
    return extract_article_text(fetch_html(url))


__all__ = [
    "BROWSER_USER_AGENT",
    "CONTAINER_STRATEGIES",
    "WEB_CONTENT_LIMIT",
    "extract_article_text",
    "fetch_html",
    "fetch_web_content",
    "html_to_text",
    "select_main_markup",
    "strip_scripts_and_styles",
]
