"""CLI for printing every occurrence of a word with its surrounding context."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging
from pathlib import Path
import sys

import orjson
from pydantic import ValidationError

from context_search.config import Settings
from context_search.exceptions import InvalidArgumentError, InvalidInputError
from context_search.observability.logging import configure_logging
from context_search.search.analyzers import available_word_shapes, get_word_pattern
from context_search.search.models import ContextMatch
from context_search.searcher import Searcher


logger = logging.getLogger(__name__)


def build_argument_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show each occurrence of WORD in a text file with surrounding words",
    )
    parser.add_argument("path", type=Path, help="Text file to search")
    parser.add_argument("words", nargs="+", metavar="WORD", help="Word(s) to look up (case-insensitive)")
    parser.add_argument(
        "-c",
        "--context",
        type=int,
        default=settings.context_size,
        help=f"Words of context on each side (default: {settings.context_size})",
    )
    parser.add_argument(
        "--encoding",
        default=settings.encoding,
        help=f"Text encoding of PATH (default: {settings.encoding})",
    )
    shape = parser.add_mutually_exclusive_group()
    shape.add_argument(
        "--word-shape",
        choices=available_word_shapes(),
        help=f"Named word-shape rule (default: {settings.word_shape})",
    )
    shape.add_argument("--word-pattern", help="Custom word-shape regex")
    parser.add_argument("--json", action="store_true", help="Emit results as JSON")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def _resolve_word_pattern(args: argparse.Namespace, settings: Settings) -> str:
    if args.word_pattern:
        return args.word_pattern
    if args.word_shape:
        return get_word_pattern(args.word_shape)
    return settings.resolve_word_pattern()


def _print_text(results: dict[str, list[ContextMatch]]) -> None:
    show_headers = len(results) > 1
    for word, matches in results.items():
        if show_headers:
            sys.stdout.write(f"== {word} ({len(matches)})\n")
        for match in matches:
            sys.stdout.write(match.context + "\n")


def _print_json(results: dict[str, list[ContextMatch]]) -> None:
    payload = {word: [match.model_dump() for match in matches] for word, matches in results.items()}
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        sys.stderr.write(f"Invalid configuration: {exc}\n")
        return 1

    parser = build_argument_parser(settings)
    args = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=settings.log_json, stream=sys.stderr)

    try:
        searcher = Searcher.from_file(
            args.path,
            encoding=args.encoding,
            word_pattern=_resolve_word_pattern(args, settings),
        )
        results = {word: searcher.search_matches(word, args.context) for word in args.words}
    except (InvalidInputError, InvalidArgumentError) as exc:
        logger.error("%s", exc)
        return 1

    if args.json:
        _print_json(results)
    else:
        _print_text(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
