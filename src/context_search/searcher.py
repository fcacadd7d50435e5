"""Context searcher over a single in-memory document."""

from __future__ import annotations

import logging
from pathlib import Path
import re

from context_search.exceptions import InvalidInputError
from context_search.loader import load_text
from context_search.search.analyzers import DEFAULT_WORD_PATTERN
from context_search.search.context_window import find_context_windows
from context_search.search.models import ContextMatch
from context_search.search.segment_index import SegmentIndex
from context_search.search.tokenizer import TextTokenizer


logger = logging.getLogger(__name__)


class Searcher:
    """Answer "word with N words of context" queries against one document.

    The document is tokenized and indexed once at construction; every later
    call to :meth:`search` reads the frozen index only.
    """

    def __init__(self, text: str, *, word_pattern: str | re.Pattern[str] | None = None) -> None:
        if not isinstance(text, str):
            raise InvalidInputError(f"Document must be text, got {type(text).__name__}")
        tokenizer = TextTokenizer(text, word_pattern or DEFAULT_WORD_PATTERN)
        self._index = SegmentIndex.build(tokenizer)
        logger.debug(
            "Indexed %d segments, %d words, %d distinct",
            len(self._index),
            self._index.word_count,
            self._index.vocabulary_size,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        encoding: str = "utf-8",
        word_pattern: str | re.Pattern[str] | None = None,
    ) -> Searcher:
        return cls(load_text(path, encoding=encoding), word_pattern=word_pattern)

    @property
    def index(self) -> SegmentIndex:
        return self._index

    def search(self, word: str, context_size: int) -> list[str]:
        """Return each occurrence of ``word`` with ``context_size`` words either side.

        Matching is case-insensitive; the returned text keeps the document's
        own casing and spacing. No occurrences yields an empty list.

        Raises:
            InvalidArgumentError: if ``context_size`` is negative.
        """
        return [match.context for match in self.search_matches(word, context_size)]

    def search_matches(self, word: str, context_size: int) -> list[ContextMatch]:
        matches = find_context_windows(self._index, word, context_size)
        logger.debug("Query %r (context %d): %d hits", word, context_size, len(matches))
        return matches
