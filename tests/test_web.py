import pytest
import requests

from src.content_extraction import web
from src.content_extraction.errors import FetchError, InsufficientContentError

BODY = "Practical advice about shipping software with AI pair programmers. " * 3


def test_article_element_wins_over_body():
    """Markup inside <article> is preferred to the rest of the page."""
    html = f"<html><body><nav>Menu Home About</nav><article><p>{BODY}</p></article></body></html>"
    text = web.extract_article_text(html)
    assert text == BODY.strip()
    assert "Menu" not in text


def test_blank_article_falls_through_to_main():
    html = f"<body><article>   </article><main><h1>Title</h1><p>{BODY}</p></main></body>"
    text = web.extract_article_text(html)
    assert text.startswith("Title Practical advice")


def test_scripts_and_styles_are_removed():
    html = (
        "<body><script>var secret = 'tracking';</script>"
        "<style>p { color: red; }</style>"
        f"<p>{BODY}</p></body>"
    )
    text = web.extract_article_text(html)
    assert "tracking" not in text
    assert "color" not in text


def test_whole_document_used_without_body():
    text = web.extract_article_text(f"<div><span>{BODY}</span></div>")
    assert text == BODY.strip()


def test_long_pages_are_truncated():
    html = "<article>" + "word " * 4000 + "</article>"
    text = web.extract_article_text(html)
    assert len(text) == web.WEB_CONTENT_LIMIT + 3
    assert text.endswith("...")


def test_short_pages_are_rejected():
    with pytest.raises(InsufficientContentError) as excinfo:
        web.extract_article_text("<body><p>Enable JavaScript</p></body>")
    assert "might be protected or require JavaScript" in str(excinfo.value)


class _FakeResponse:
    def __init__(self, text="", status_code=200, reason="OK"):
        self.text = text
        self.status_code = status_code
        self.reason = reason

    @property
    def ok(self):
        return self.status_code < 400


def test_fetch_sends_browser_user_agent(monkeypatch):
    captured = {}

    def fake_get(url, headers=None, timeout=None):
        captured.update(url=url, headers=headers, timeout=timeout)
        return _FakeResponse(text=f"<article>{BODY}</article>")

    monkeypatch.setattr(web.requests, "get", fake_get)
    text = web.fetch_web_content("https://example.com/post")

    assert text == BODY.strip()
    assert captured["headers"]["User-Agent"] == web.BROWSER_USER_AGENT
    assert captured["timeout"] > 0


def test_fetch_reports_http_status(monkeypatch):
    monkeypatch.setattr(
        web.requests, "get", lambda *a, **k: _FakeResponse(status_code=404, reason="Not Found")
    )
    with pytest.raises(FetchError) as excinfo:
        web.fetch_html("https://example.com/missing")
    assert str(excinfo.value) == "Failed to fetch URL: 404 Not Found"


def test_fetch_wraps_transport_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(web.requests, "get", boom)
    with pytest.raises(FetchError):
        web.fetch_html("https://example.com")
