"""YouTube video id parsing and transcript retrieval.

Automatic transcripts are unreliable: captions may be missing, English may
not be offered, or the video may be private. Retrieval therefore walks an
ordered list of strategies and, when every one comes back empty, fails with
a message that points the caller at the manual transcript option.
"""

from __future__ import annotations

import html
import json
import logging
import os
import re
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union
from urllib.parse import parse_qs, urlparse

import requests
from youtube_transcript_api import (
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from .errors import InvalidVideoUrlError, TranscriptUnavailableError
from .sources import MIN_CONTENT_LENGTH, truncate
from .web import BROWSER_USER_AGENT

logger = logging.getLogger(__name__)

TRANSCRIPT_LIMIT = 12000
TIMEDTEXT_URL = "https://www.youtube.com/api/timedtext"
_TRANSCRIPT_TIMEOUT = float(os.environ.get("CAROUSEL_TRANSCRIPT_TIMEOUT", "15"))
_LANGUAGES = ("en",)

_SHORT_HOSTS = {"youtu.be", "www.youtu.be"}
_PATH_PREFIXES = ("embed", "shorts", "v", "live")

_TAG_RE = re.compile(r"<[^>]*>")
_ANNOTATION_RE = re.compile(r"\[[^\]]*\]")
_WHITESPACE_RE = re.compile(r"\s+")

TranscriptPayload = Union[str, bytes, list, dict, None]
TranscriptStrategy = Callable[[str, float], TranscriptPayload]

MANUAL_HINT = "Try using the manual transcript option."


def extract_video_id(url: str) -> str:
    """Return the video id encoded in a YouTube URL.

    Supports ``youtu.be/<id>``, ``youtube.com/watch?v=<id>`` and the
    ``/embed/``, ``/shorts/``, ``/v/`` and ``/live/`` path forms.
    """
    parsed = urlparse((url or "").strip())
    host = (parsed.hostname or "").lower()
    video_id = ""

    if host in _SHORT_HOSTS:
        video_id = parsed.path.lstrip("/").split("/", 1)[0]
    elif host == "youtube.com" or host.endswith(".youtube.com"):
        video_id = (parse_qs(parsed.query).get("v") or [""])[0]
        if not video_id:
            segments = [part for part in parsed.path.split("/") if part]
            if len(segments) >= 2 and segments[0] in _PATH_PREFIXES:
                video_id = segments[1]

    video_id = video_id.strip()
    if not video_id:
        raise InvalidVideoUrlError("Could not extract video ID from YouTube URL")
    return video_id


class _TimeoutSession(requests.Session):
    def __init__(self, timeout: float) -> None:
        super().__init__()
        self._timeout = timeout
        self.headers["User-Agent"] = BROWSER_USER_AGENT

    def request(self, *args: Any, **kwargs: Any) -> requests.Response:
        kwargs.setdefault("timeout", self._timeout)
        return super().request(*args, **kwargs)


def _fetch_with_transcript_api(video_id: str, timeout: float) -> TranscriptPayload:
    api = YouTubeTranscriptApi(http_client=_TimeoutSession(timeout))
    fetched = api.fetch(video_id, languages=_LANGUAGES)
    return fetched.to_raw_data()


def _timedtext_strategy(**extra_params: str) -> TranscriptStrategy:
    def _fetch(video_id: str, timeout: float) -> TranscriptPayload:
        params = {"v": video_id, "lang": _LANGUAGES[0], "fmt": "json3", **extra_params}
        response = requests.get(
            TIMEDTEXT_URL,
            params=params,
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=timeout,
        )
        response.raise_for_status()
        return response.text

    return _fetch


# Priority order matters: earlier strategies return cleaner text.
TRANSCRIPT_STRATEGIES: Tuple[Tuple[str, TranscriptStrategy], ...] = (
    ("transcript-api", _fetch_with_transcript_api),
    ("timedtext", _timedtext_strategy()),
    ("timedtext-asr", _timedtext_strategy(kind="asr")),
)


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _join_caption_events(events: Sequence[Any]) -> str:
    parts: List[str] = []
    for event in events:
        if not isinstance(event, dict):
            continue
        for segment in event.get("segs") or []:
            if isinstance(segment, dict) and segment.get("utf8"):
                parts.append(str(segment["utf8"]))
    return _collapse(" ".join(parts))


def _join_text_items(items: Sequence[Any]) -> str:
    parts: List[str] = []
    for item in items:
        if isinstance(item, dict) and item.get("text"):
            parts.append(str(item["text"]))
        elif isinstance(item, str):
            parts.append(item)
    return _collapse(" ".join(parts))


def _parse_structured(data: Any) -> str:
    if isinstance(data, dict):
        if isinstance(data.get("events"), list):
            return _join_caption_events(data["events"])
        if isinstance(data.get("transcript"), list):
            return _join_text_items(data["transcript"])
        return ""
    if isinstance(data, list):
        return _join_text_items(data)
    return ""


def plain_transcript_text(body: str) -> str:
    """Treat a raw response body as text, dropping markup and ``[Music]``-style notes."""
    text = _TAG_RE.sub(" ", body)
    text = html.unescape(text)
    text = _ANNOTATION_RE.sub(" ", text)
    return _collapse(text)


def parse_transcript_payload(payload: TranscriptPayload) -> str:
    """Parse a strategy response into transcript text ("" when unusable)."""

    if payload is None:
        return ""
    if isinstance(payload, (list, dict)):
        return _parse_structured(payload)

    body = payload.decode("utf-8", errors="ignore") if isinstance(payload, bytes) else payload
    if not body.strip():
        return ""
    try:
        text = _parse_structured(json.loads(body))
    except ValueError:
        text = ""
    if text:
        return text
    return plain_transcript_text(body)


def _failure_message(error: Optional[BaseException]) -> str:
    if isinstance(error, VideoUnavailable):
        reason = "This YouTube video is unavailable, private, or has been removed."
    elif isinstance(error, TranscriptsDisabled):
        reason = "Transcripts are not available for this YouTube video."
    elif isinstance(error, NoTranscriptFound):
        reason = "Transcript is not available in English for this video."
    else:
        reason = "Could not retrieve a transcript for this YouTube video."
    return f"{reason} {MANUAL_HINT}"


def fetch_youtube_transcript(
    url: str,
    *,
    strategies: Sequence[Tuple[str, TranscriptStrategy]] = TRANSCRIPT_STRATEGIES,
    timeout: float = _TRANSCRIPT_TIMEOUT,
) -> str:
    """Fetch and clean the transcript of the video at ``url``."""

    video_id = extract_video_id(url)
    logger.info("Fetching YouTube transcript for video %s", video_id)

    first_error: Optional[BaseException] = None
    for name, strategy in strategies:
        try:
            payload = strategy(video_id, timeout)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Transcript strategy %s failed for %s: %s", name, video_id, exc)
            if first_error is None:
                first_error = exc
            continue

        text = parse_transcript_payload(payload)
        if len(text) > MIN_CONTENT_LENGTH:
            logger.info("Transcript strategy %s returned %d chars", name, len(text))
            return truncate(text, TRANSCRIPT_LIMIT)
        logger.warning("Transcript strategy %s returned no usable text for %s", name, video_id)

    raise TranscriptUnavailableError(_failure_message(first_error))


__all__ = [
    "MANUAL_HINT",
    "TRANSCRIPT_LIMIT",
    "TRANSCRIPT_STRATEGIES",
    "extract_video_id",
    "fetch_youtube_transcript",
    "parse_transcript_payload",
    "plain_transcript_text",
]
