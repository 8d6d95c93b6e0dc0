"""Pydantic models that shape the carousel agent output."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

CONTENT_SLIDE_COUNT = 8


class TitleSlideContent(BaseModel):
    """Opening slide of the carousel."""

    title: str = Field(min_length=1, description="Main topic title for the first slide")
    subtitle: str = Field(min_length=1, description="Engaging subtitle for the first slide")


class ContentSlideContent(BaseModel):
    """One key point of the source material."""

    headline: str = Field(min_length=1, max_length=60, description="Concise and impactful headline")
    subtext: str = Field(
        min_length=1,
        max_length=200,
        description="Informative subtext explaining the point",
    )


class CarouselContent(BaseModel):
    """Top-level container returned by the language model."""

    titleSlide: TitleSlideContent
    contentSlides: List[ContentSlideContent] = Field(
        min_length=CONTENT_SLIDE_COUNT,
        max_length=CONTENT_SLIDE_COUNT,
        description="Exactly 8 content slides with key points",
    )
    linkedinPost: str = Field(
        min_length=1,
        description="Engaging LinkedIn post text to accompany the carousel",
    )


__all__ = ["CONTENT_SLIDE_COUNT", "CarouselContent", "ContentSlideContent", "TitleSlideContent"]
