from __future__ import annotations

from typing import List

from src.agents.carousel_agent.models import CarouselContent

from .models import ContentSlide, CtaSlide, Slide, TitleSlide

CTA_TITLE = "Follow for More Vibe Coding Tips"


def build_slides(content: CarouselContent, *, cta_title: str = CTA_TITLE) -> List[Slide]:
    """Title slide, the content slides in generation order, then the fixed CTA."""

    slides: List[Slide] = [TitleSlide(title=content.titleSlide.title, subtitle=content.titleSlide.subtitle)]
    slides.extend(
        ContentSlide(headline=item.headline, subtext=item.subtext) for item in content.contentSlides
    )
    slides.append(CtaSlide(title=cta_title))
    return slides


def slides_to_payload(slides: List[Slide]) -> List[dict]:
    return [slide.to_dict() for slide in slides]
