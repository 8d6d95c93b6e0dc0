import pytest
from pydantic import ValidationError

from src.agents.carousel_agent.models import CarouselContent
from src.slide_generation.models import ContentSlide, CtaSlide, TitleSlide, slide_from_dict


def _payload(slide_count=8, headline="Headline", subtext="Subtext"):
    return {
        "titleSlide": {"title": "Title", "subtitle": "Subtitle"},
        "contentSlides": [{"headline": headline, "subtext": subtext}] * slide_count,
        "linkedinPost": "Post",
    }


def test_carousel_content_accepts_eight_slides():
    content = CarouselContent.model_validate(_payload())
    assert len(content.contentSlides) == 8


@pytest.mark.parametrize("count", [0, 7, 9])
def test_carousel_content_rejects_wrong_slide_count(count):
    with pytest.raises(ValidationError):
        CarouselContent.model_validate(_payload(slide_count=count))


def test_carousel_content_rejects_long_fields():
    with pytest.raises(ValidationError):
        CarouselContent.model_validate(_payload(headline="h" * 61))
    with pytest.raises(ValidationError):
        CarouselContent.model_validate(_payload(subtext="s" * 201))


def test_carousel_content_rejects_empty_post():
    payload = _payload()
    payload["linkedinPost"] = ""
    with pytest.raises(ValidationError):
        CarouselContent.model_validate(payload)


def test_slide_json_shapes():
    assert TitleSlide("T", "S").to_dict() == {"type": "title", "title": "T", "subtitle": "S"}
    assert ContentSlide("H", "X").to_dict() == {"type": "content", "headline": "H", "subtext": "X"}
    assert CtaSlide("Follow").to_dict() == {"type": "cta", "title": "Follow"}


def test_slide_from_dict():
    assert slide_from_dict({"type": "content", "headline": "H", "subtext": "X"}) == ContentSlide("H", "X")
    assert slide_from_dict({"type": "title", "title": 42}) == TitleSlide("", "")
    assert slide_from_dict({"type": "cta"}) == CtaSlide("")


@pytest.mark.parametrize("payload", [None, "title", [], {}, {"type": "video"}, {"type": None}])
def test_slide_from_dict_unrecognised(payload):
    assert slide_from_dict(payload) is None
