"""Position index over a tokenized document.

The index owns one buffer plus two structures derived from it:

- ``segments``: every segment of the buffer in document order, offsets only
- ``postings``: case-folded word text -> ascending segment positions

Both are immutable once built so a single index can serve any number of
read-only queries.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import re
from types import MappingProxyType

from context_search.search.analyzers import DEFAULT_WORD_PATTERN, fold_case
from context_search.search.models import Segment
from context_search.search.tokenizer import TextTokenizer


@dataclass(frozen=True, slots=True)
class SegmentIndex:
    """Immutable segment sequence plus word postings for one document."""

    text: str
    segments: tuple[Segment, ...]
    postings: Mapping[str, tuple[int, ...]]

    @classmethod
    def build(cls, tokenizer: TextTokenizer) -> SegmentIndex:
        """Consume ``tokenizer`` completely and index its word segments."""
        segments: list[Segment] = []
        postings: dict[str, list[int]] = {}
        for position, segment in enumerate(tokenizer):
            segments.append(segment)
            if segment.is_word:
                key = fold_case(segment.text_in(tokenizer.text))
                postings.setdefault(key, []).append(position)

        frozen = {key: tuple(positions) for key, positions in postings.items()}
        return cls(
            text=tokenizer.text,
            segments=tuple(segments),
            postings=MappingProxyType(frozen),
        )

    @classmethod
    def from_text(cls, text: str, pattern: str | re.Pattern[str] = DEFAULT_WORD_PATTERN) -> SegmentIndex:
        return cls.build(TextTokenizer(text, pattern))

    def positions(self, word: str) -> tuple[int, ...]:
        """Segment positions of ``word`` (any casing), empty when absent."""
        return self.postings.get(fold_case(word), ())

    def segment_text(self, position: int) -> str:
        return self.segments[position].text_in(self.text)

    @property
    def word_count(self) -> int:
        return sum(len(positions) for positions in self.postings.values())

    @property
    def vocabulary_size(self) -> int:
        return len(self.postings)

    def __len__(self) -> int:
        return len(self.segments)
