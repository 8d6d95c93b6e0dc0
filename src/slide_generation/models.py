from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Union


class SlideType(str, Enum):
    TITLE = "title"
    CONTENT = "content"
    CTA = "cta"


@dataclass(frozen=True)
class TitleSlide:
    title: str
    subtitle: str = ""
    type: ClassVar[SlideType] = SlideType.TITLE

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "title": self.title, "subtitle": self.subtitle}


@dataclass(frozen=True)
class ContentSlide:
    headline: str
    subtext: str = ""
    type: ClassVar[SlideType] = SlideType.CONTENT

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "headline": self.headline, "subtext": self.subtext}


@dataclass(frozen=True)
class CtaSlide:
    title: str
    type: ClassVar[SlideType] = SlideType.CTA

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "title": self.title}


Slide = Union[TitleSlide, ContentSlide, CtaSlide]


def _text(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    return value if isinstance(value, str) else ""


def slide_from_dict(payload: Any) -> Optional[Slide]:
    """Parse one slide from its JSON shape; ``None`` when unrecognised."""

    if not isinstance(payload, Mapping):
        return None
    try:
        slide_type = SlideType(payload.get("type"))
    except (TypeError, ValueError):
        return None

    if slide_type is SlideType.TITLE:
        return TitleSlide(title=_text(payload, "title"), subtitle=_text(payload, "subtitle"))
    if slide_type is SlideType.CONTENT:
        return ContentSlide(headline=_text(payload, "headline"), subtext=_text(payload, "subtext"))
    return CtaSlide(title=_text(payload, "title"))
