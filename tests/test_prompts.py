from src.agents.carousel_agent.prompts import CAROUSEL_PROMPT, assemble_prompt
from src.content_extraction import Attachment, NormalizedText, SourceKind


def test_prompt_mentions_the_required_shape():
    assert "exactly 10 slides" in CAROUSEL_PROMPT
    assert "EXACTLY 8 content slides" in CAROUSEL_PROMPT
    assert "maximum 60 characters" in CAROUSEL_PROMPT
    assert "maximum 200 characters" in CAROUSEL_PROMPT
    assert "No hashtags" in CAROUSEL_PROMPT


def test_document_label():
    prompt = assemble_prompt(NormalizedText(text="Body text", kind=SourceKind.FILE))
    assert prompt == f"{CAROUSEL_PROMPT}\n\nDocument content:\nBody text"


def test_web_label_includes_url():
    normalized = NormalizedText(text="Article", kind=SourceKind.URL, origin="https://example.com/a")
    assert assemble_prompt(normalized).endswith("\n\nWeb content from https://example.com/a:\nArticle")


def test_both_transcript_kinds_share_a_label():
    for kind in (SourceKind.YOUTUBE_AUTO, SourceKind.YOUTUBE_MANUAL):
        prompt = assemble_prompt(NormalizedText(text="Transcript", kind=kind))
        assert prompt.endswith("\n\nYouTube video transcript:\nTranscript")


def test_pdf_attachment_gets_instructions_only():
    normalized = NormalizedText(
        text="", kind=SourceKind.FILE, attachment=Attachment(data=b"%PDF", mime_type="application/pdf")
    )
    assert assemble_prompt(normalized) == CAROUSEL_PROMPT
