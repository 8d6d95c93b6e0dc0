from .models import ContentSlide, CtaSlide, Slide, SlideType, TitleSlide, slide_from_dict
from .builder import CTA_TITLE, build_slides, slides_to_payload

__all__ = [
    "CTA_TITLE",
    "ContentSlide",
    "CtaSlide",
    "Slide",
    "SlideType",
    "TitleSlide",
    "build_slides",
    "slide_from_dict",
    "slides_to_payload",
]
