from src.slide_generation.builder import CTA_TITLE, build_slides, slides_to_payload
from src.slide_generation.models import ContentSlide, CtaSlide, TitleSlide


def test_build_slides_shape(sample_content):
    slides = build_slides(sample_content)

    assert len(slides) == 10
    assert slides[0] == TitleSlide("Ship Faster With AI", "Eight habits of vibe coders")
    assert all(isinstance(slide, ContentSlide) for slide in slides[1:9])
    assert [slide.headline for slide in slides[1:9]] == [f"Habit {idx}" for idx in range(1, 9)]
    assert slides[9] == CtaSlide(CTA_TITLE)


def test_build_slides_custom_cta(sample_content):
    slides = build_slides(sample_content, cta_title="Follow me")
    assert slides[-1].title == "Follow me"


def test_slides_to_payload(sample_content):
    payload = slides_to_payload(build_slides(sample_content))
    assert [item["type"] for item in payload] == ["title"] + ["content"] * 8 + ["cta"]
    assert payload[-1] == {"type": "cta", "title": "Follow for More Vibe Coding Tips"}


def test_cta_caption_ignores_environment(monkeypatch):
    """The closing caption is fixed copy, not a deployment setting."""
    import importlib

    from src.slide_generation import builder

    monkeypatch.setenv("CAROUSEL_CTA_TITLE", "Buy my course")
    reloaded = importlib.reload(builder)
    assert reloaded.CTA_TITLE == "Follow for More Vibe Coding Tips"
