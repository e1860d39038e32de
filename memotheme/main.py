"""Command line entry point for memotheme."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from . import __version__
from .container import get_container
from .domain.exceptions import MemoThemeError
from .infra.catalog import load_themes

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="memotheme - Automatic theme suggestions for personal memos"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser(
        "analyze", help="Suggest themes for a text"
    )
    analyze.add_argument("text", help="Memo text to analyze")
    analyze.add_argument(
        "--themes",
        type=Path,
        required=True,
        help="JSON file containing the theme catalog",
    )
    analyze.add_argument(
        "--explain",
        action="store_true",
        help="Print the full score table instead of only the selected IDs",
    )

    learn = subparsers.add_parser(
        "learn", help="Learn from a change of a memo's themes"
    )
    learn.add_argument("--content", required=True, help="Memo content")
    learn.add_argument(
        "--old", nargs="*", default=[], help="Theme IDs before the change"
    )
    learn.add_argument(
        "--new", nargs="*", default=[], help="Theme IDs after the change"
    )

    lookup = subparsers.add_parser(
        "lookup", help="Show the theme most associated with a word"
    )
    lookup.add_argument("word", help="Word to look up")

    subparsers.add_parser("reset", help="Clear all learned data")

    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> None:
    """Execute a parsed command, printing results as JSON."""
    analyzer = get_container().analyzer

    if args.command == "analyze":
        themes = load_themes(args.themes)
        result = analyzer.analyze_text_detailed(args.text, themes)
        if args.explain:
            print(result.model_dump_json(indent=2))
        else:
            print(json.dumps(result.theme_ids))
    elif args.command == "learn":
        learned = analyzer.learn_from_memo_edit(args.content, args.old, args.new)
        print(json.dumps({"learned": learned}))
    elif args.command == "lookup":
        print(json.dumps(analyzer.get_most_relevant_theme_for_word(args.word)))
    elif args.command == "reset":
        analyzer.reset_all_data()
        print(json.dumps({"reset": True}))


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    try:
        run(args)
    except MemoThemeError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
