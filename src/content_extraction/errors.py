"""Exceptions raised while turning a content source into prompt text."""

from __future__ import annotations


class InputValidationError(ValueError):
    """Missing or malformed caller input."""

    status_code = 400


class ExtractionError(RuntimeError):
    """Base class for fetch/parse/transcript failures."""

    status_code = 400


class EmptyContentError(ExtractionError):
    pass


class InsufficientContentError(ExtractionError):
    pass


class FetchError(ExtractionError):
    pass


class InvalidVideoUrlError(ExtractionError):
    pass


class TranscriptUnavailableError(ExtractionError):
    """No transcript strategy produced usable text.

    The message always steers the caller toward pasting the transcript
    manually, since automatic retrieval fails for many legitimate videos.
    """


__all__ = [
    "EmptyContentError",
    "ExtractionError",
    "FetchError",
    "InputValidationError",
    "InsufficientContentError",
    "InvalidVideoUrlError",
    "TranscriptUnavailableError",
]
