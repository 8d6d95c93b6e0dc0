from .errors import (
    EmptyContentError,
    ExtractionError,
    FetchError,
    InputValidationError,
    InsufficientContentError,
    InvalidVideoUrlError,
    TranscriptUnavailableError,
)
from .sources import (
    Attachment,
    FileSource,
    ManualTranscriptSource,
    NormalizedText,
    SourceDescriptor,
    SourceKind,
    VideoTranscriptSource,
    WebSource,
)
from .web import extract_article_text, fetch_web_content
from .youtube import extract_video_id, fetch_youtube_transcript, parse_transcript_payload

__all__ = [
    "Attachment",
    "EmptyContentError",
    "ExtractionError",
    "FetchError",
    "FileSource",
    "InputValidationError",
    "InsufficientContentError",
    "InvalidVideoUrlError",
    "ManualTranscriptSource",
    "NormalizedText",
    "SourceDescriptor",
    "SourceKind",
    "TranscriptUnavailableError",
    "VideoTranscriptSource",
    "WebSource",
    "extract_article_text",
    "extract_video_id",
    "fetch_web_content",
    "fetch_youtube_transcript",
    "parse_transcript_payload",
]
