#!/usr/bin/env python3
"""Present a slide deck in the terminal.

Keys: Right arrow or Space = next slide, Left arrow = previous slide,
Ctrl-C = quit.

Usage:
    python scripts/present.py [config.json] [-v] [--log-file viewer.log]
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from src.parsers.slide_loader import SlideReadError
from src.schemas.deck_config import ConfigParseError
from src.viewer.presenter import present


def configure_logging(verbose: bool, log_file: Path | None) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        filename=str(log_file) if log_file else None,
    )


def main():
    parser = argparse.ArgumentParser(description="Present a slide deck in the terminal")
    parser.add_argument("config", type=Path, nargs="?", default=Path("config.json"),
                        help="Deck configuration, JSON or YAML (default: config.json)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debug output")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write log records to this file instead of stderr")
    args = parser.parse_args()

    configure_logging(args.verbose, args.log_file)

    if not sys.stdin.isatty():
        print("Error: standard input is not a terminal", file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(present(args.config))
    except (ConfigParseError, SlideReadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
