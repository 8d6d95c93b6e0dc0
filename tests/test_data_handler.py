import io

import pytest
from werkzeug.datastructures import FileStorage

from src.agents.carousel_agent import data_handler
from src.content_extraction import (
    EmptyContentError,
    FileSource,
    InputValidationError,
    InsufficientContentError,
    ManualTranscriptSource,
    SourceKind,
    VideoTranscriptSource,
    WebSource,
)


def _upload(data: bytes, filename: str, content_type: str) -> FileStorage:
    return FileStorage(stream=io.BytesIO(data), filename=filename, content_type=content_type)


def test_source_from_form_file():
    upload = _upload(b"%PDF-1.7 ...", "deck.pdf", "application/pdf")
    source = data_handler.source_from_form({"inputType": "file"}, {"file": upload})
    assert isinstance(source, FileSource)
    assert source.mime_type == "application/pdf"
    assert source.filename == "deck.pdf"
    assert source.data == b"%PDF-1.7 ..."


def test_source_from_form_url_and_youtube(long_text):
    assert data_handler.source_from_form(
        {"inputType": "url", "url": " https://example.com/a "}, {}
    ) == WebSource(url="https://example.com/a")
    assert data_handler.source_from_form(
        {"inputType": "youtube", "youtubeInputMethod": "auto-transcript", "youtubeUrl": "https://youtu.be/x"},
        {},
    ) == VideoTranscriptSource(url="https://youtu.be/x")
    manual = data_handler.source_from_form(
        {"inputType": "youtube", "youtubeInputMethod": "manual", "manualTranscript": long_text}, {}
    )
    assert isinstance(manual, ManualTranscriptSource)
    assert manual.text == long_text


@pytest.mark.parametrize(
    "form, message",
    [
        ({"inputType": "file"}, "No file provided"),
        ({"inputType": "url"}, "No URL provided"),
        ({"inputType": "youtube"}, "No YouTube URL provided"),
        (
            {"inputType": "youtube", "youtubeInputMethod": "manual", "manualTranscript": "too short"},
            "Please provide a transcript with at least 100 characters",
        ),
        ({"inputType": "fax"}, "Invalid input type or missing content"),
        ({}, "Invalid input type or missing content"),
    ],
)
def test_source_from_form_missing_fields(form, message):
    with pytest.raises(InputValidationError) as excinfo:
        data_handler.source_from_form(form, {})
    assert str(excinfo.value) == message


def test_normalize_text_file(long_text):
    source = FileSource(data=("  " + long_text + "\n").encode("utf-8"), mime_type="text/plain", filename="notes.txt")
    normalized = data_handler.normalize(source)
    assert normalized.text == long_text.strip()
    assert normalized.kind is SourceKind.FILE
    assert normalized.attachment is None


def test_normalize_markdown_by_extension_ignores_bad_bytes(long_text):
    data = b"\xff\xfe" + long_text.encode("utf-8")
    source = FileSource(data=data, mime_type="application/octet-stream", filename="README.md")
    assert data_handler.normalize(source).text == long_text.strip()


def test_normalize_empty_text_file():
    source = FileSource(data=b"   \n ", mime_type="text/plain", filename="empty.txt")
    with pytest.raises(EmptyContentError) as excinfo:
        data_handler.normalize(source)
    assert str(excinfo.value) == "File appears to be empty"


def test_normalize_short_text_file():
    source = FileSource(data=b"Just a line.", mime_type="text/plain", filename="short.txt")
    with pytest.raises(InsufficientContentError):
        data_handler.normalize(source)


def test_normalize_pdf_is_forwarded_as_attachment():
    source = FileSource(data=b"%PDF-1.4 fake", mime_type="", filename="Slides.PDF")
    normalized = data_handler.normalize(source)
    assert normalized.text == ""
    assert normalized.attachment.data == b"%PDF-1.4 fake"
    assert normalized.attachment.mime_type == "application/pdf"


def test_normalize_empty_pdf():
    with pytest.raises(EmptyContentError):
        data_handler.normalize(FileSource(data=b"", mime_type="application/pdf", filename="x.pdf"))


def test_normalize_rejects_unsupported_files():
    source = FileSource(data=b"PK\x03\x04", mime_type="application/zip", filename="archive.zip")
    with pytest.raises(InputValidationError) as excinfo:
        data_handler.normalize(source)
    assert str(excinfo.value).startswith("Unsupported file type")


def test_normalize_web_source(monkeypatch, long_text):
    seen = []

    def fake_fetch(url):
        seen.append(url)
        return long_text

    monkeypatch.setattr(data_handler, "fetch_web_content", fake_fetch)
    normalized = data_handler.normalize(WebSource(url="https://example.com/post"))
    assert seen == ["https://example.com/post"]
    assert normalized.origin == "https://example.com/post"
    assert normalized.kind is SourceKind.URL


def test_normalize_video_source(monkeypatch, long_text):
    monkeypatch.setattr(data_handler, "fetch_youtube_transcript", lambda url: long_text)
    normalized = data_handler.normalize(VideoTranscriptSource(url="https://youtu.be/abc"))
    assert normalized.text == long_text
    assert normalized.kind is SourceKind.YOUTUBE_AUTO


def test_manual_transcript_passes_through_unchanged(long_text):
    text = "  " + long_text + "  "
    assert data_handler.normalize(ManualTranscriptSource(text=text)).text == text


def test_manual_transcript_too_short():
    with pytest.raises(InsufficientContentError):
        data_handler.normalize(ManualTranscriptSource(text="x" * 99))


def test_describe(long_text):
    normalized = data_handler.normalize(ManualTranscriptSource(text=long_text))
    assert data_handler.describe(normalized) == f"youtube_manual text ({len(long_text)} chars)"
