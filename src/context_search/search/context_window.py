"""Context window extraction around indexed word occurrences.

A window covers the matched word plus up to ``context_size`` words on each
side. Bounds are found by walking the segment sequence, so the window text is
a single slice of the original buffer with its spacing, punctuation and line
terminators untouched.

Boundary rules:
- Stops on the ``context_size``-th word; trailing separators are excluded
- Runs out at the document start: the window starts at the first word
- Runs out at the document end: the window extends to the end, never padded
"""

from __future__ import annotations

from collections.abc import Sequence

from context_search.exceptions import InvalidArgumentError
from context_search.search.models import ContextMatch, Segment
from context_search.search.segment_index import SegmentIndex


def validate_context_size(context_size: int) -> int:
    """Return ``context_size`` if it is a non-negative integer.

    Raises:
        InvalidArgumentError: for negative values and non-integers (bools
            included).
    """
    if isinstance(context_size, bool) or not isinstance(context_size, int):
        raise InvalidArgumentError(f"context_size must be an integer, got {type(context_size).__name__}")
    if context_size < 0:
        raise InvalidArgumentError(f"context_size must be >= 0, got {context_size}")
    return context_size


def find_window_start(segments: Sequence[Segment], position: int, context_size: int) -> int:
    """Find the first segment of the window around ``position``.

    Args:
        segments: The full segment sequence.
        position: Index of the matched word segment.
        context_size: Number of words to include before the match.

    Returns:
        Index of the ``context_size``-th word before ``position``, or of the
        first word of the document if it starts sooner. Leading separators
        are never part of the window.
    """
    remaining = context_size
    index = position
    start = position
    while remaining and index > 0:
        index -= 1
        if segments[index].is_word:
            remaining -= 1
            start = index
    return start


def find_window_end(segments: Sequence[Segment], position: int, context_size: int) -> int:
    """Find the last segment of the window around ``position``.

    Counterpart of :func:`find_window_start`, except that running out of
    words returns the last segment index, so trailing punctuation at the end
    of the document stays in the window.
    """
    remaining = context_size
    index = position
    last = len(segments) - 1
    while remaining and index < last:
        index += 1
        if segments[index].is_word:
            remaining -= 1
    if remaining:
        return last
    return index


def extract_context_window(index: SegmentIndex, position: int, context_size: int) -> ContextMatch:
    """Build the context window for the word segment at ``position``."""
    segments = index.segments
    first = segments[find_window_start(segments, position, context_size)]
    last = segments[find_window_end(segments, position, context_size)]
    return ContextMatch(
        word=index.segment_text(position),
        context=index.text[first.start : last.end],
        position=position,
        start_char=first.start,
        end_char=last.end,
    )


def find_context_windows(index: SegmentIndex, word: str, context_size: int) -> list[ContextMatch]:
    """Return one window per occurrence of ``word``, in document order.

    Occurrences are never merged: overlapping or identical windows are
    reported separately.
    """
    if not isinstance(word, str):
        raise InvalidArgumentError(f"word must be a string, got {type(word).__name__}")
    validate_context_size(context_size)
    return [extract_context_window(index, position, context_size) for position in index.positions(word)]
