"""Lossless tokenizer that partitions text into word and separator segments.

Unlike an analyzer tokenizer, nothing is dropped: every character of the
buffer belongs to exactly one segment, so joining the segments in order
reproduces the input verbatim.
"""

from __future__ import annotations

import re

from context_search.exceptions import ExhaustedIteratorError
from context_search.search.analyzers import DEFAULT_WORD_PATTERN, compile_word_pattern
from context_search.search.models import Segment, SegmentKind


class TextTokenizer:
    """Cursor over a text buffer yielding maximal word/separator runs.

    Pull-style interface (``has_next``/``next``) for callers that want raw
    strings, plus the iterator protocol over :class:`Segment` objects.
    The cursor only moves forward; a consumed tokenizer cannot be rewound.
    """

    def __init__(self, text: str, pattern: str | re.Pattern[str] = DEFAULT_WORD_PATTERN) -> None:
        self.text = text
        self.pattern = compile_word_pattern(pattern)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def has_next(self) -> bool:
        return self._offset < len(self.text)

    def next(self) -> str:
        """Return the raw text of the next segment and advance."""
        return self.next_segment().text_in(self.text)

    def next_segment(self) -> Segment:
        if not self.has_next():
            raise ExhaustedIteratorError(f"Tokenizer exhausted at offset {self._offset}")

        start = self._offset
        match = self.pattern.match(self.text, start)
        if match is not None and match.end() > start:
            segment = Segment(SegmentKind.WORD, start, match.end())
        else:
            segment = Segment(SegmentKind.SEPARATOR, start, self._next_word_start(start + 1))
        self._offset = segment.end
        return segment

    def is_word(self, text: str) -> bool:
        """True when the whole of ``text`` matches the word-shape rule."""
        return self.pattern.fullmatch(text) is not None

    def _next_word_start(self, position: int) -> int:
        # Zero-width matches (e.g. lookaheads) never start a word.
        while position < len(self.text):
            match = self.pattern.search(self.text, position)
            if match is None:
                break
            if match.end() > match.start():
                return match.start()
            position = match.start() + 1
        return len(self.text)

    def __iter__(self) -> TextTokenizer:
        return self

    def __next__(self) -> Segment:
        if not self.has_next():
            raise StopIteration
        return self.next_segment()
