from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union

MIN_CONTENT_LENGTH = 100


class SourceKind(str, Enum):
    FILE = "file"
    URL = "url"
    YOUTUBE_AUTO = "youtube_auto"
    YOUTUBE_MANUAL = "youtube_manual"


@dataclass(frozen=True)
class FileSource:
    data: bytes = field(repr=False)
    mime_type: str
    filename: str = ""
    kind: ClassVar[SourceKind] = SourceKind.FILE


@dataclass(frozen=True)
class WebSource:
    url: str
    kind: ClassVar[SourceKind] = SourceKind.URL


@dataclass(frozen=True)
class VideoTranscriptSource:
    url: str
    kind: ClassVar[SourceKind] = SourceKind.YOUTUBE_AUTO


@dataclass(frozen=True)
class ManualTranscriptSource:
    text: str = field(repr=False)
    kind: ClassVar[SourceKind] = SourceKind.YOUTUBE_MANUAL


SourceDescriptor = Union[FileSource, WebSource, VideoTranscriptSource, ManualTranscriptSource]


@dataclass(frozen=True)
class Attachment:
    data: bytes = field(repr=False)
    mime_type: str


@dataclass(frozen=True)
class NormalizedText:
    text: str
    kind: SourceKind
    origin: Optional[str] = None
    attachment: Optional[Attachment] = None


def truncate(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


__all__ = [
    "Attachment",
    "FileSource",
    "ManualTranscriptSource",
    "MIN_CONTENT_LENGTH",
    "NormalizedText",
    "SourceDescriptor",
    "SourceKind",
    "VideoTranscriptSource",
    "WebSource",
    "truncate",
]
