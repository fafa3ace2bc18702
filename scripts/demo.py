#!/usr/bin/env python3
"""
Demo for the dollar-expression validator.

Usage:
    # Validate the built-in sample:
    python scripts/demo.py

    # Validate your own text:
    python scripts/demo.py 'price: $5, total: $$ a + b $$'

    # Print the parsed document as JSON:
    python scripts/demo.py --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dollar import DollarError, validate
from dollar.main import configure_logging
from dollar.settings import get_settings

SAMPLE = "abc $def $$ some $exp $$ other exp $ another exp \\$ $$ \\$$ $$"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Validate dollar-expressions in a string.")
    parser.add_argument("text", nargs="?", default=SAMPLE, help="Text to validate.")
    parser.add_argument("--json", action="store_true", help="Print the document as JSON.")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        document = validate(args.text, settings=settings)
    except DollarError as exc:
        print(exc)
        return 1

    if args.json:
        print(json.dumps(document.asdict(), indent=2))
    else:
        print(document.nodes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
