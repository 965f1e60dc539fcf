"""Classify chat messages from the command line and print the intents as JSON.

Usage:
    python -m src.cli "Find a comedy over 7.5 from 2015 to 2020" "Recommend sci-fi 7+"
    python -m src.cli            # runs the built-in sample messages
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from src.config.logging import configure_logging
from src.intent.normalize import DEFAULT_MAX_LEN
from src.intent.rules_parser import classify
from src.intent.schema import intent_to_payload

SAMPLE_MESSAGES: tuple[str, ...] = (
    "Find a comedy over 7.5 from 2015 to 2020",
    "Find a movie starring Tom Hanks",
    'Tell me about "Inception"',
    "What's Interstellar about",
    "Find movies from 2020",
    "Recommend sci-fi 7+",
    "What’s it about?",
)


def classify_all(messages: Sequence[str], *, max_len: int = DEFAULT_MAX_LEN) -> list[dict[str, Any]]:
    """Classify each message and pair it with its intent payload."""

    return [
        {"input": text, "intent": intent_to_payload(classify(text, max_len=max_len))}
        for text in messages
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""

    parser = argparse.ArgumentParser(description="Classify movie-chat messages into intents.")
    parser.add_argument(
        "messages",
        nargs="*",
        help="Messages to classify (defaults to the built-in samples).",
    )
    parser.add_argument(
        "--max-len",
        type=int,
        default=DEFAULT_MAX_LEN,
        help="Maximum message length kept after sanitization.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or INFO).")
    args = parser.parse_args(argv)

    if args.max_len < 1:
        parser.error("--max-len must be a positive integer")

    configure_logging(args.log_level)

    results = classify_all(args.messages or SAMPLE_MESSAGES, max_len=args.max_len)
    json.dump(results, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
