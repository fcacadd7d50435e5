"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict


class SegmentKind(str, Enum):
    """Classification of a segment under the active word-shape rule."""

    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True, slots=True)
class Segment:
    """A half-open ``[start, end)`` span of the indexed buffer.

    Segments only carry offsets; the text lives in the buffer that produced
    them and is recovered with :meth:`text_in`.
    """

    kind: SegmentKind
    start: int
    end: int

    @property
    def is_word(self) -> bool:
        return self.kind is SegmentKind.WORD

    def __len__(self) -> int:
        return self.end - self.start

    def text_in(self, buffer: str) -> str:
        return buffer[self.start : self.end]


class ContextMatch(BaseModel):
    """Value object for a single occurrence and its context window.

    ``start_char``/``end_char`` locate the window in the source buffer,
    ``position`` is the index of the matched word in the segment sequence.
    """

    model_config = ConfigDict(frozen=True)

    word: str
    context: str
    position: int
    start_char: int
    end_char: int
