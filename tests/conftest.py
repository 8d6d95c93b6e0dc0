import pytest

from src.agents.carousel_agent.models import CarouselContent

LONG_TEXT = (
    "Vibe coding is the practice of describing intent to an AI assistant and iterating "
    "on the result instead of writing every line by hand. "
) * 3


@pytest.fixture
def long_text():
    return LONG_TEXT


@pytest.fixture
def sample_content():
    return CarouselContent.model_validate({
        "titleSlide": {"title": "Ship Faster With AI", "subtitle": "Eight habits of vibe coders"},
        "contentSlides": [
            {"headline": f"Habit {idx}", "subtext": f"Explanation of habit number {idx}."}
            for idx in range(1, 9)
        ],
        "linkedinPost": "Two hooks.\nStill reading?\n\nThree insights and a call to action.",
    })


@pytest.fixture
def app():
    from app import create_app

    flask_app = create_app()
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
