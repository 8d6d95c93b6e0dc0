#!/usr/bin/env python3
"""Render a saved slides payload to a carousel PDF."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from src.slide_rendering import RenderError, render_slides


def _load_slides(path: Path) -> List[Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("slides")
    if not isinstance(data, list):
        raise ValueError(f"{path} does not contain a slides list")
    return data


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Render a slides JSON payload to PDF.")
    parser.add_argument("slides", help="JSON file holding a slides list or {\"slides\": [...]}")
    parser.add_argument(
        "-o",
        "--output",
        default="linkedin-carousel.pdf",
        help="Destination PDF path (default: linkedin-carousel.pdf).",
    )
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        slides = _load_slides(Path(args.slides))
        pdf_bytes = render_slides(slides)
    except (OSError, ValueError, RenderError) as exc:
        print(f"Rendering failed: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output)
    output.write_bytes(pdf_bytes)
    print(f"Wrote {len(slides)} pages to {output} ({len(pdf_bytes)} bytes)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
