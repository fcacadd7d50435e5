"""Load a document from disk as a single text buffer."""

from __future__ import annotations

import logging
from pathlib import Path

from context_search.exceptions import InvalidInputError


logger = logging.getLogger(__name__)


def load_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Read the whole file at ``path``.

    Newline translation is disabled so ``\\r\\n`` and lone ``\\r`` survive
    into the buffer exactly as stored.

    Raises:
        InvalidInputError: if the file is missing, unreadable, cannot be
            decoded with ``encoding`` or contains NUL characters.
    """
    file_path = Path(path)
    try:
        with file_path.open(encoding=encoding, newline="") as handle:
            text = handle.read()
    except LookupError as exc:
        raise InvalidInputError(f"Unknown encoding {encoding!r} for {file_path}") from exc
    except UnicodeDecodeError as exc:
        raise InvalidInputError(f"Document is not valid {encoding} text: {file_path}") from exc
    except OSError as exc:
        raise InvalidInputError(f"Cannot read document {file_path}: {exc.strerror or exc}") from exc

    if "\x00" in text:
        raise InvalidInputError(f"Document looks binary (NUL characters found): {file_path}")

    logger.debug("Loaded %s (%d characters)", file_path, len(text))
    return text
