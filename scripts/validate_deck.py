#!/usr/bin/env python3
"""Validate a deck configuration and check that every slide can be read.

Prints one summary line per slide with the number of lines of each content
type, so marker typos show up before the talk.

Usage:
    python scripts/validate_deck.py <config_file>
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.parsers.slide_loader import SlideReadError, load_slide
from src.schemas.deck_config import ConfigParseError, DeckConfig
from src.schemas.slide_schema import ContentType


async def check_slides(config: DeckConfig) -> int:
    """Load every slide, print a summary line each, return the failure count."""
    failures = 0
    for number, slide in enumerate(config.slides, start=1):
        try:
            content = await load_slide(slide)
        except SlideReadError as e:
            print(f"  {number}. FAILED: {e}", file=sys.stderr)
            failures += 1
            continue
        counts = content.count_by_type()
        summary = ", ".join(f"{counts[t]} {t.value}" for t in ContentType)
        print(f"  {number}. {slide.file_path.name}: {len(content.items)} lines ({summary})")
    return failures


def main():
    parser = argparse.ArgumentParser(description="Validate a deck configuration and its slides")
    parser.add_argument("config_file", type=Path, help="Deck configuration, JSON or YAML")
    args = parser.parse_args()

    try:
        config = DeckConfig.load(args.config_file)
    except ConfigParseError as e:
        print(f"Validation FAILED: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Configuration: {args.config_file} ({len(config.slides)} slides)")
    failures = asyncio.run(check_slides(config))
    if failures:
        print(f"Validation FAILED: {failures} slide(s) could not be read", file=sys.stderr)
        sys.exit(1)
    print("Validation PASSED")


if __name__ == "__main__":
    main()
