"""Word-shape rules and case folding shared by indexing and querying.

A word-shape rule is a regular expression describing one maximal word run.
Everything the rule does not match is separator text. Rules are registered
by name so configuration can pick one without spelling out a regex.
"""

from __future__ import annotations

import re

from context_search.exceptions import InvalidArgumentError


# ASCII letters and digits; apostrophe only after the first character so
# "animal's" stays one word while a leading quote is punctuation.
DEFAULT_WORD_PATTERN = r"(?i)[a-z0-9][a-z0-9']*"
UNICODE_WORD_PATTERN = r"[^\W_](?:[^\W_]|')*"
DIGITS_WORD_PATTERN = r"[0-9]+"

_WORD_SHAPES: dict[str, str] = {
    "default": DEFAULT_WORD_PATTERN,
    "ascii": DEFAULT_WORD_PATTERN,
    "unicode": UNICODE_WORD_PATTERN,
    "digits": DIGITS_WORD_PATTERN,
}


def available_word_shapes() -> list[str]:
    return sorted(_WORD_SHAPES)


def get_word_pattern(name: str | None) -> str:
    """Return the regex source for a named word shape, defaulting to ``default``."""

    if name is None:
        return _WORD_SHAPES["default"]
    normalized = name.lower()
    if normalized not in _WORD_SHAPES:
        msg = f"Unknown word shape '{name}'. Available: {available_word_shapes()}"
        raise ValueError(msg)
    return _WORD_SHAPES[normalized]


def compile_word_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile and validate a word-shape rule.

    Raises:
        InvalidArgumentError: if the regex is malformed or matches the empty
            string (such a rule cannot partition text into non-empty runs).
    """
    if isinstance(pattern, re.Pattern):
        compiled = pattern
    else:
        try:
            compiled = re.compile(pattern)
        except re.error as exc:
            raise InvalidArgumentError(f"Invalid word pattern {pattern!r}: {exc}") from exc
    if compiled.fullmatch("") is not None:
        raise InvalidArgumentError(f"Word pattern {compiled.pattern!r} must not match the empty string")
    return compiled


def fold_case(text: str) -> str:
    """Normalize word text for index keys and queries."""
    return text.lower()
