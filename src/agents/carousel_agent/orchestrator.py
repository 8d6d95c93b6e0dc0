"""Core orchestration logic for generating carousel content with Gemini."""

from __future__ import annotations

import json
import logging
import os
import threading
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, List, Optional

import google.generativeai as genai
import instructor
from google.api_core import exceptions as google_exceptions
from pydantic import ValidationError

from src.content_extraction.sources import Attachment

from .models import CarouselContent
from .prompts import JSON_OUTPUT_FORMAT

logger = logging.getLogger(__name__)

_DEFAULT_MODEL = os.environ.get("CAROUSEL_GEMINI_MODEL", "gemini-2.5-flash")

# google-generativeai keeps its API key in module state; the lock keeps one
# request's key from leaking into another request's call.
_CREDENTIAL_LOCK = threading.Lock()


class GenerationFailure(str, Enum):
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    QUOTA = "quota"
    TRANSCRIPT = "transcript"
    MODEL_NOT_FOUND = "model_not_found"
    INVALID_OUTPUT = "invalid_output"
    GENERIC = "generic"


_STATUS_CODES: Dict[GenerationFailure, int] = {
    GenerationFailure.AUTH: 401,
    GenerationFailure.RATE_LIMIT: 429,
    GenerationFailure.QUOTA: 402,
    GenerationFailure.TRANSCRIPT: 400,
    GenerationFailure.MODEL_NOT_FOUND: 400,
    GenerationFailure.INVALID_OUTPUT: 500,
    GenerationFailure.GENERIC: 500,
}


class GenerationError(RuntimeError):
    """Carousel generation failed; ``kind`` decides the caller-facing status."""

    def __init__(self, kind: GenerationFailure, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.kind]


@contextmanager
def scoped_credential(api_key: str) -> Iterator[None]:
    """Configure Gemini with ``api_key`` for the duration of one call.

    The configuration is reset on every exit path.
    """
    with _CREDENTIAL_LOCK:
        genai.configure(api_key=api_key)
        try:
            yield
        finally:
            genai.configure(api_key=None)


def _exception_chain(exc: BaseException) -> List[BaseException]:
    chain: List[BaseException] = []
    current: Optional[BaseException] = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def classify_generation_error(exc: BaseException, model_name: str = _DEFAULT_MODEL) -> GenerationError:
    """Map a raw failure from the Gemini call chain onto a ``GenerationError``.

    Typed checks run before substring checks: a schema violation echoes the
    model output, so its text may contain "401" or "quota" by coincidence.
    """

    if isinstance(exc, GenerationError):
        return exc

    chain = _exception_chain(exc)
    detail = str(exc) or exc.__class__.__name__
    text = " ".join(str(item) for item in chain)

    def _any(*types: type) -> bool:
        return any(isinstance(item, types) for item in chain)

    auth = GenerationError(
        GenerationFailure.AUTH,
        "Invalid API key or insufficient permissions. Please check your Google Gemini API key.",
    )
    rate_limit = GenerationError(GenerationFailure.RATE_LIMIT, "Rate limit exceeded. Please try again later.")
    invalid_output = GenerationError(
        GenerationFailure.INVALID_OUTPUT,
        f"The model returned a carousel that did not match the required format: {detail}",
    )

    if _any(google_exceptions.Unauthenticated, google_exceptions.PermissionDenied):
        return auth
    if _any(google_exceptions.TooManyRequests, google_exceptions.ResourceExhausted):
        return rate_limit
    if _any(ValidationError, json.JSONDecodeError):
        return invalid_output

    if any(marker in text for marker in ("401", "403", "API_KEY", "API key not valid")):
        return auth
    if "429" in text:
        return rate_limit
    if "quota" in text.lower():
        return GenerationError(
            GenerationFailure.QUOTA,
            "Quota exceeded. Please check your Google Cloud account.",
        )
    if "validation error" in text.lower():
        return invalid_output
    if "transcript" in text or "YouTube" in text:
        return GenerationError(GenerationFailure.TRANSCRIPT, f"YouTube transcript error: {detail}")
    if _any(google_exceptions.NotFound) or ("model" in text and "not found" in text):
        return GenerationError(
            GenerationFailure.MODEL_NOT_FOUND,
            f'The specified Gemini model ("{model_name}") was not found or is not available '
            "with your API key. Please verify the model name and your access.",
        )
    return GenerationError(GenerationFailure.GENERIC, f"Failed to generate carousel: {detail}")


def _extract_json_payload(text: str) -> str:
    """Strip Markdown fences or prose from Gemini output to leave raw JSON."""

    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
        if cleaned.lower().startswith("json"):
            cleaned = cleaned.split("\n", 1)[1] if "\n" in cleaned else ""
        cleaned = cleaned.rsplit("```", 1)[0]
    return cleaned.strip()


def _invoke_instructor(prompt: str, model_name: str) -> CarouselContent:
    client = instructor.from_gemini(
        client=genai.GenerativeModel(model_name=model_name),
        mode=instructor.Mode.GEMINI_JSON,
    )
    return client.create(
        response_model=CarouselContent,
        messages=[{"role": "user", "content": prompt}],
        max_retries=1,
    )


def _invoke_with_attachment(prompt: str, attachment: Attachment, model_name: str) -> CarouselContent:
    model = genai.GenerativeModel(
        model_name=model_name,
        generation_config={"response_mime_type": "application/json"},
    )
    raw = model.generate_content(
        [
            f"{prompt}\n\n{JSON_OUTPUT_FORMAT}",
            {"mime_type": attachment.mime_type, "data": attachment.data},
        ]
    )
    text = getattr(raw, "text", None) or ""
    if not text:
        raise RuntimeError("Gemini response did not include text output")
    return CarouselContent.model_validate_json(_extract_json_payload(text))


def generate_carousel(
    prompt: str,
    api_key: str,
    *,
    attachment: Optional[Attachment] = None,
    model_name: Optional[str] = None,
) -> CarouselContent:
    """Generate schema-valid carousel content; all-or-nothing, single attempt."""

    if not prompt:
        raise ValueError("prompt must not be empty")
    if not api_key:
        raise ValueError("api_key must not be empty")

    chosen_model = model_name or _DEFAULT_MODEL
    logger.info(
        "Calling Gemini model %s (prompt %d chars, attachment=%s)",
        chosen_model,
        len(prompt),
        attachment.mime_type if attachment else None,
    )

    try:
        with scoped_credential(api_key):
            if attachment is not None:
                content = _invoke_with_attachment(prompt, attachment, chosen_model)
            else:
                content = _invoke_instructor(prompt, chosen_model)
    except Exception as exc:
        error = classify_generation_error(exc, chosen_model)
        logger.error("Carousel generation failed (%s): %s", error.kind.value, exc)
        raise error from exc

    logger.info("Generated carousel with %d content slides", len(content.contentSlides))
    return content


__all__ = [
    "GenerationError",
    "GenerationFailure",
    "classify_generation_error",
    "generate_carousel",
    "scoped_credential",
]
