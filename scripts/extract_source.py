#!/usr/bin/env python3
"""Preview the prompt-ready text extracted from a content source."""

from __future__ import annotations

import argparse
import mimetypes
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from src.agents.carousel_agent.data_handler import describe, normalize
from src.content_extraction import (
    ExtractionError,
    FileSource,
    InputValidationError,
    SourceDescriptor,
    VideoTranscriptSource,
    WebSource,
)


def _build_source(args: argparse.Namespace) -> SourceDescriptor:
    if args.url:
        return WebSource(url=args.url)
    if args.youtube:
        return VideoTranscriptSource(url=args.youtube)
    path = Path(args.file)
    mime_type = mimetypes.guess_type(path.name)[0] or ""
    return FileSource(data=path.read_bytes(), mime_type=mime_type, filename=path.name)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Print the normalized text for a content source.")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--url", help="Web article URL")
    group.add_argument("--youtube", help="YouTube video URL (automatic transcript)")
    group.add_argument("--file", help="Local .txt/.md/.pdf file")
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        normalized = normalize(_build_source(args))
    except (OSError, ExtractionError, InputValidationError) as exc:
        print(f"Extraction failed: {exc}", file=sys.stderr)
        return 1

    print(describe(normalized))
    if normalized.text:
        print()
        print(normalized.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
