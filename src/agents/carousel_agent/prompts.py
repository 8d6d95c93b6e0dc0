"""Prompt text used to steer the carousel agent LLM."""

from __future__ import annotations

from src.content_extraction.sources import NormalizedText, SourceKind

CAROUSEL_PROMPT: str = '''Analyze the provided content and create a LinkedIn carousel post with exactly 10 slides AND a LinkedIn post to accompany it.

IMPORTANT: You must provide:
1. ONE title slide with a main topic title and engaging subtitle
2. EXACTLY 8 content slides, each with a headline and subtext covering the main points from the content
3. ONE LinkedIn post text that promotes the carousel

Requirements for content slides:
- Each slide should cover a distinct key point or insight from the content
- Headlines must be concise and impactful (maximum 60 characters)
- Subtext should be informative but readable (maximum 200 characters)
- Make each slide valuable on its own
- Use professional, engaging language suitable for LinkedIn
- Focus on practical insights and actionable tips
- Ensure all 8 slides are unique and cover different aspects of the content

Requirements for LinkedIn post:
- Write an engaging LinkedIn post (300-500 words) that promotes the carousel
- The post should educate founders, entrepreneurs, executives, and professionals
- Goals: educate, not overwhelm; add value, not hype; position the author as a trusted advisor
- Open with two compelling hooks in the first 2 lines, short and sharp. LinkedIn truncates after ~2 lines.
- Mention three key insights from the carousel
- Frame the strategic importance: why should the reader care now?
- Subtly position the author as a helpful guide: trustworthy, experienced, approachable.
- End with a clear CTA, e.g. "Read the slides," "Connect if you're evaluating AI," or "Drop a question in the comments."
- Use emojis strategically for better engagement
- Tone: confident, practical, forward-looking; conversational but not chatty; no jargon, buzzwords or overpromising
- Output format: just the LinkedIn post text. No hashtags. No markdown or other extra formatting.

The 10th slide will be a CTA slide and will be added automatically.
Please extract the most important 8 key points from the content and create engaging content for each, plus the LinkedIn post.'''

# Appended when the model is called without instructor's schema handling.
JSON_OUTPUT_FORMAT: str = '''Respond with a single JSON object and nothing else, using exactly this shape:
{
  "titleSlide": {"title": "...", "subtitle": "..."},
  "contentSlides": [{"headline": "...", "subtext": "..."}, ... exactly 8 entries ...],
  "linkedinPost": "..."
}'''


def content_label(normalized: NormalizedText) -> str:
    if normalized.kind is SourceKind.URL:
        return f"Web content from {normalized.origin}:"
    if normalized.kind in (SourceKind.YOUTUBE_AUTO, SourceKind.YOUTUBE_MANUAL):
        return "YouTube video transcript:"
    return "Document content:"


def assemble_prompt(normalized: NormalizedText) -> str:
    """Combine the instruction block with the labelled source content."""

    if normalized.attachment is not None and not normalized.text:
        return CAROUSEL_PROMPT
    return f"{CAROUSEL_PROMPT}\n\n{content_label(normalized)}\n{normalized.text}"


__all__ = ["CAROUSEL_PROMPT", "JSON_OUTPUT_FORMAT", "assemble_prompt", "content_label"]
