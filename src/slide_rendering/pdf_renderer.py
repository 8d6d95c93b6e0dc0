"""Paint carousel slides onto fixed-size PDF pages with PyMuPDF."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import fitz  # PyMuPDF

from src.slide_generation.models import ContentSlide, CtaSlide, Slide, TitleSlide, slide_from_dict

from .theme import DEFAULT_THEME, Branding, TextStyle, Theme, mm, rgb

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """PyMuPDF failed while painting the document; no partial output is kept."""


_FONTS: Dict[str, fitz.Font] = {}


def _font(name: str) -> fitz.Font:
    """Built-in PyMuPDF font by short name; these cover dashes and curly quotes."""
    if name not in _FONTS:
        _FONTS[name] = fitz.Font(name)
    return _FONTS[name]


def text_width(text: str, style: TextStyle) -> float:
    """Width of ``text`` in millimetres."""
    return _font(style.font).text_length(text, fontsize=style.size) / mm(1)


def _break_word(word: str, style: TextStyle, max_width: float) -> List[str]:
    pieces: List[str] = []
    current = ""
    for char in word:
        if current and text_width(current + char, style) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def wrap_text(text: str, style: TextStyle, max_width: float) -> List[str]:
    """Greedy word wrap to ``max_width`` millimetres; explicit newlines are kept."""

    lines: List[str] = []
    for paragraph in text.splitlines() or [""]:
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if text_width(candidate, style) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            if text_width(word, style) > max_width:
                *full, current = _break_word(word, style, max_width)
                lines.extend(full)
            else:
                current = word
        lines.append(current)
    return lines


def _put_text(
    page: fitz.Page,
    text: str,
    x: float,
    y: float,
    style: TextStyle,
    align: str = "left",
) -> None:
    if not text:
        return
    if align == "right":
        x -= text_width(text, style)
    elif align == "center":
        x -= text_width(text, style) / 2
    writer = fitz.TextWriter(page.rect)
    writer.append(fitz.Point(mm(x), mm(y)), text, font=_font(style.font), fontsize=style.size)
    writer.write_text(page, color=rgb(style.color))


def _put_block(page: fitz.Page, text: str, y: float, style: TextStyle, theme: Theme) -> float:
    """Draw wrapped text from baseline ``y``; return the baseline after the block."""
    for line in wrap_text(text, style, theme.text_width):
        _put_text(page, line, theme.margin_left, y, style)
        y += style.line_step
    return y


def _paint_background(page: fitz.Page, theme: Theme) -> None:
    page.draw_rect(
        fitz.Rect(0, 0, mm(theme.page_width), mm(theme.page_height)),
        color=None,
        fill=rgb(theme.background),
    )
    page.draw_rect(
        fitz.Rect(0, mm(theme.overlay_top), mm(theme.page_width), mm(theme.page_height)),
        color=None,
        fill=rgb(theme.overlay),
        fill_opacity=theme.overlay_opacity,
    )


def _paint_identity(page: fitz.Page, theme: Theme, branding: Branding) -> None:
    y = theme.footer_baseline
    page.draw_circle(
        fitz.Point(mm(theme.avatar_x), mm(y)),
        mm(theme.avatar_radius),
        color=None,
        fill=rgb(theme.accent),
    )
    _put_text(page, branding.monogram, theme.avatar_x, y + 4, theme.monogram, align="center")
    _put_text(page, branding.name, theme.profile_x, y - 2, theme.profile_name)
    _put_text(page, branding.handle, theme.profile_x, y + 8, theme.profile_handle)


def _paint_follow(page: fitz.Page, theme: Theme, branding: Branding) -> None:
    y = theme.footer_baseline
    _put_text(page, branding.follow_label, theme.follow_right, y - 2, theme.follow_label, align="right")
    _put_text(page, branding.follow_topic, theme.follow_right, y + 8, theme.follow_topic, align="right")


def _paint_title(page: fitz.Page, slide: TitleSlide, theme: Theme, branding: Branding) -> None:
    if slide.title:
        y = _put_block(page, slide.title, theme.heading_top, theme.title, theme)
        if slide.subtitle:
            _put_block(page, slide.subtitle, y + theme.subtitle_gap, theme.subtitle, theme)
    _paint_identity(page, theme, branding)
    _paint_follow(page, theme, branding)


def _paint_content(page: fitz.Page, slide: ContentSlide, theme: Theme, branding: Branding) -> None:
    if slide.headline:
        y = _put_block(page, slide.headline, theme.heading_top, theme.headline, theme)
        if slide.subtext:
            _put_block(page, slide.subtext, y + theme.body_gap, theme.body, theme)
    _paint_identity(page, theme, branding)
    _paint_follow(page, theme, branding)


def _paint_cta(page: fitz.Page, theme: Theme, branding: Branding) -> None:
    # The heading is fixed branding copy, never the slide's own title.
    _put_block(page, branding.cta_heading, theme.cta_top, theme.cta, theme)
    _paint_identity(page, theme, branding)


def _coerce(entry: Any) -> Optional[Slide]:
    if isinstance(entry, (TitleSlide, ContentSlide, CtaSlide)):
        return entry
    return slide_from_dict(entry)


def _paint_slide(page: fitz.Page, slide: Optional[Slide], theme: Theme, branding: Branding) -> None:
    _paint_background(page, theme)
    if isinstance(slide, TitleSlide):
        _paint_title(page, slide, theme, branding)
    elif isinstance(slide, ContentSlide):
        _paint_content(page, slide, theme, branding)
    elif isinstance(slide, CtaSlide):
        _paint_cta(page, theme, branding)


def render_slides(
    slides: Sequence[Any],
    *,
    theme: Optional[Theme] = None,
    branding: Optional[Branding] = None,
) -> bytes:
    """Render one page per entry of ``slides`` and return the PDF bytes.

    Entries may be ``Slide`` objects or their JSON dicts. Entries that are
    neither get a background-only page, so the page count always matches
    the input length. Output is byte-for-byte reproducible.
    """
    if isinstance(slides, (str, bytes, Mapping)) or not isinstance(slides, Sequence):
        raise TypeError("slides must be a sequence of slides")
    if not slides:
        raise RenderError("Cannot render an empty slide sequence")

    theme = theme or DEFAULT_THEME
    branding = branding or Branding.from_env()
    try:
        doc = fitz.open()
        try:
            for entry in slides:
                page = doc.new_page(width=mm(theme.page_width), height=mm(theme.page_height))
                _paint_slide(page, _coerce(entry), theme, branding)
            doc.set_metadata({})
            data = doc.tobytes(garbage=3, deflate=True, no_new_id=True)
        finally:
            doc.close()
    except Exception as exc:
        logger.exception("PDF rendering failed")
        raise RenderError(f"Failed to render carousel PDF: {exc}") from exc

    logger.info("Rendered carousel PDF with %d pages (%d bytes)", len(slides), len(data))
    return data


__all__ = ["RenderError", "render_slides", "text_width", "wrap_text"]
