"""Fixed design contract for carousel pages.

Coordinates are millimetres on a 190 x 238 mm portrait page (a 1080 x 1350
pixel LinkedIn image at ~144 DPI); font sizes are points.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]

MM_TO_PT = 72.0 / 25.4


def mm(value: float) -> float:
    return value * MM_TO_PT


def rgb(color: RGB) -> Tuple[float, float, float]:
    """PyMuPDF expects colour components in 0..1."""
    return tuple(component / 255.0 for component in color)  # type: ignore[return-value]


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float
    color: RGB
    line_step: float = 0.0


@dataclass(frozen=True)
class Theme:
    page_width: float = 190.0
    page_height: float = 238.0

    background: RGB = (17, 24, 39)
    overlay: RGB = (30, 58, 138)
    overlay_opacity: float = 0.3
    overlay_top: float = 120.0

    accent: RGB = (217, 70, 239)
    white: RGB = (255, 255, 255)
    muted: RGB = (156, 163, 175)
    subtitle_grey: RGB = (200, 200, 200)

    margin_left: float = 20.0
    text_width: float = 150.0
    heading_top: float = 70.0
    cta_top: float = 90.0

    title: TextStyle = TextStyle("hebo", 32, (255, 255, 255), line_step=14)
    subtitle: TextStyle = TextStyle("helv", 18, (200, 200, 200), line_step=9)
    subtitle_gap: float = 10.0
    headline: TextStyle = TextStyle("hebo", 28, (217, 70, 239), line_step=12)
    body: TextStyle = TextStyle("helv", 16, (255, 255, 255), line_step=8)
    body_gap: float = 15.0
    cta: TextStyle = TextStyle("hebo", 32, (255, 255, 255), line_step=14)

    footer_baseline: float = 200.0
    avatar_x: float = 30.0
    avatar_radius: float = 8.0
    monogram: TextStyle = TextStyle("hebo", 12, (255, 255, 255))
    profile_x: float = 45.0
    profile_name: TextStyle = TextStyle("hebo", 14, (255, 255, 255))
    profile_handle: TextStyle = TextStyle("helv", 11, (156, 163, 175))
    follow_right: float = 170.0
    follow_label: TextStyle = TextStyle("helv", 12, (255, 255, 255))
    follow_topic: TextStyle = TextStyle("helv", 10, (156, 163, 175))


@dataclass(frozen=True)
class Branding:
    monogram: str = "VC"
    name: str = "Vibe Coding"
    handle: str = "@VibeCoding"
    follow_label: str = "Follow for"
    follow_topic: str = "Vibe Coding Tips"
    cta_heading: str = "Follow For More About Vibe Coding"

    @classmethod
    def from_env(cls) -> "Branding":
        defaults = cls()
        return cls(
            monogram=os.environ.get("CAROUSEL_BRAND_MONOGRAM", defaults.monogram),
            name=os.environ.get("CAROUSEL_BRAND_NAME", defaults.name),
            handle=os.environ.get("CAROUSEL_BRAND_HANDLE", defaults.handle),
            follow_label=defaults.follow_label,
            follow_topic=os.environ.get("CAROUSEL_BRAND_TOPIC", defaults.follow_topic),
            cta_heading=os.environ.get("CAROUSEL_BRAND_CTA_HEADING", defaults.cta_heading),
        )


DEFAULT_THEME = Theme()
