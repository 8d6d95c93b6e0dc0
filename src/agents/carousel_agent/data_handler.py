"""Utilities for turning submitted form data into prompt-ready content."""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any, Mapping, Optional

from src.content_extraction import (
    Attachment,
    EmptyContentError,
    FileSource,
    InputValidationError,
    InsufficientContentError,
    ManualTranscriptSource,
    NormalizedText,
    SourceDescriptor,
    VideoTranscriptSource,
    WebSource,
    fetch_web_content,
    fetch_youtube_transcript,
)
from src.content_extraction.sources import MIN_CONTENT_LENGTH

logger = logging.getLogger(__name__)

_TEXT_EXTENSIONS = {".txt", ".md", ".markdown"}
_PDF_MIME = "application/pdf"

MANUAL_TRANSCRIPT_MESSAGE = f"Please provide a transcript with at least {MIN_CONTENT_LENGTH} characters"


def _field(form: Mapping[str, Any], name: str) -> str:
    return (form.get(name) or "").strip()


def source_from_form(form: Mapping[str, Any], files: Mapping[str, Any]) -> SourceDescriptor:
    """Build a source descriptor from the multipart fields of a request.

    ``files`` values are expected to behave like werkzeug ``FileStorage``
    objects (``filename``, ``mimetype`` and ``read()``).
    """

    input_type = _field(form, "inputType")

    if input_type == "file":
        upload = files.get("file")
        if upload is None or not getattr(upload, "filename", ""):
            raise InputValidationError("No file provided")
        return FileSource(
            data=upload.read(),
            mime_type=getattr(upload, "mimetype", "") or "",
            filename=upload.filename,
        )

    if input_type == "url":
        url = _field(form, "url")
        if not url:
            raise InputValidationError("No URL provided")
        return WebSource(url=url)

    if input_type == "youtube":
        if _field(form, "youtubeInputMethod") == "manual":
            transcript = form.get("manualTranscript") or ""
            if len(transcript) < MIN_CONTENT_LENGTH:
                raise InputValidationError(MANUAL_TRANSCRIPT_MESSAGE)
            return ManualTranscriptSource(text=transcript)
        url = _field(form, "youtubeUrl")
        if not url:
            raise InputValidationError("No YouTube URL provided")
        return VideoTranscriptSource(url=url)

    raise InputValidationError("Invalid input type or missing content")


def _is_pdf(source: FileSource, suffix: str) -> bool:
    return source.mime_type == _PDF_MIME or suffix == ".pdf"


def _is_text(source: FileSource, suffix: str) -> bool:
    return source.mime_type.startswith("text/") or suffix in _TEXT_EXTENSIONS


def _normalize_file(source: FileSource) -> NormalizedText:
    suffix = PurePath(source.filename).suffix.lower()

    if _is_pdf(source, suffix):
        if not source.data:
            raise EmptyContentError("File appears to be empty")
        logger.info("Forwarding PDF %s (%d bytes) as attachment", source.filename, len(source.data))
        return NormalizedText(
            text="",
            kind=source.kind,
            attachment=Attachment(data=source.data, mime_type=_PDF_MIME),
        )

    if not _is_text(source, suffix):
        label = source.mime_type or suffix or "unknown"
        raise InputValidationError(
            f"Unsupported file type: {label}. Please upload a PDF or text file."
        )

    content = source.data.decode("utf-8", errors="ignore").strip()
    if not content:
        raise EmptyContentError("File appears to be empty")
    if len(content) < MIN_CONTENT_LENGTH:
        raise InsufficientContentError(
            f"File content is too short; at least {MIN_CONTENT_LENGTH} characters are required"
        )
    return NormalizedText(text=content, kind=source.kind)


def normalize(source: SourceDescriptor) -> NormalizedText:
    """Produce prompt-ready text (or a PDF attachment) for ``source``."""

    logger.info("Normalizing %s source", source.kind.value)

    if isinstance(source, FileSource):
        result = _normalize_file(source)
    elif isinstance(source, WebSource):
        result = NormalizedText(text=fetch_web_content(source.url), kind=source.kind, origin=source.url)
    elif isinstance(source, VideoTranscriptSource):
        result = NormalizedText(
            text=fetch_youtube_transcript(source.url), kind=source.kind, origin=source.url
        )
    elif isinstance(source, ManualTranscriptSource):
        if len(source.text) < MIN_CONTENT_LENGTH:
            raise InsufficientContentError(MANUAL_TRANSCRIPT_MESSAGE)
        result = NormalizedText(text=source.text, kind=source.kind)
    else:
        raise TypeError(f"Unsupported source descriptor: {type(source).__name__}")

    logger.debug("Normalized %s source to %d chars", source.kind.value, len(result.text))
    return result


def describe(normalized: NormalizedText) -> str:
    """Short human-readable summary used by logs and the extraction script."""
    if normalized.attachment is not None:
        return f"{normalized.attachment.mime_type} attachment ({len(normalized.attachment.data)} bytes)"
    origin: Optional[str] = normalized.origin
    suffix = f" from {origin}" if origin else ""
    return f"{normalized.kind.value} text ({len(normalized.text)} chars){suffix}"


__all__ = ["MANUAL_TRANSCRIPT_MESSAGE", "describe", "normalize", "source_from_form"]
