"""Flask blueprint exposing the carousel generation API."""

from __future__ import annotations

import logging
from typing import Any, Tuple

from flask import Blueprint, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from src.content_extraction import ExtractionError, InputValidationError, SourceKind
from src.slide_generation import build_slides, slides_to_payload
from src.slide_rendering import RenderError, render_slides

from .data_handler import describe, normalize, source_from_form
from .orchestrator import GenerationError, generate_carousel
from .prompts import assemble_prompt

logger = logging.getLogger(__name__)

carousel_bp = Blueprint("carousel", __name__, url_prefix="/api")

API_KEY_PREFIX = "AIza"
PDF_FILENAME = "linkedin-carousel.pdf"

_EXTRACTION_PREFIXES = {
    SourceKind.URL: "Failed to fetch content from URL: ",
    SourceKind.YOUTUBE_AUTO: "Failed to fetch YouTube transcript: ",
}


def _error(message: str, status: int) -> Tuple[Response, int]:
    return jsonify({"error": message}), status


def _validate_api_key(api_key: str) -> None:
    if not api_key:
        raise InputValidationError("No API key provided")
    if not api_key.startswith(API_KEY_PREFIX):
        raise InputValidationError(
            f"Invalid Gemini API key format. Should start with '{API_KEY_PREFIX}'"
        )


@carousel_bp.errorhandler(HTTPException)
def _http_error(exc: HTTPException):
    logger.warning("Request rejected with %s: %s", exc.code, exc.description)
    return _error(exc.description or exc.name, exc.code or 500)


@carousel_bp.errorhandler(Exception)
def _unexpected_error(exc: Exception):
    logger.exception("Unhandled error in carousel API")
    return _error("An unexpected error occurred", 500)


@carousel_bp.route("/generate-carousel", methods=["POST"])
def generate_carousel_route():
    api_key = (request.form.get("apiKey") or "").strip()
    try:
        _validate_api_key(api_key)
        source = source_from_form(request.form, request.files)
    except InputValidationError as exc:
        return _error(str(exc), exc.status_code)

    try:
        normalized = normalize(source)
    except (ExtractionError, InputValidationError) as exc:
        logger.warning("Content extraction failed for %s source: %s", source.kind.value, exc)
        prefix = _EXTRACTION_PREFIXES.get(source.kind, "")
        return _error(f"{prefix}{exc}", exc.status_code)

    logger.info("Extracted %s", describe(normalized))
    prompt = assemble_prompt(normalized)

    try:
        content = generate_carousel(prompt, api_key, attachment=normalized.attachment)
    except GenerationError as exc:
        logger.exception("Carousel generation failed")
        return _error(str(exc), exc.status_code)

    slides = build_slides(content)
    logger.info("Built carousel with %d slides", len(slides))
    return jsonify({"slides": slides_to_payload(slides), "linkedinPost": content.linkedinPost})


@carousel_bp.route("/generate-pdf", methods=["POST"])
def generate_pdf_route():
    payload: Any = request.get_json(silent=True) or {}
    slides = payload.get("slides") if isinstance(payload, dict) else None
    if not isinstance(slides, list) or not slides:
        return _error("Invalid slides data", 400)

    try:
        pdf_bytes = render_slides(slides)
    except RenderError:
        logger.exception("PDF generation failed")
        return _error("Failed to generate PDF", 500)

    return Response(
        pdf_bytes,
        mimetype="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={PDF_FILENAME}"},
    )


__all__ = ["carousel_bp"]
