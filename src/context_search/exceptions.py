"""Error taxonomy for context search."""


class ContextSearchError(Exception):
    """Base error for the context search package."""


class InvalidInputError(ContextSearchError, ValueError):
    """Raised when a document cannot be loaded or is not textual."""


class InvalidArgumentError(ContextSearchError, ValueError):
    """Raised when a caller passes an argument outside its contract."""


class ExhaustedIteratorError(ContextSearchError):
    """Raised when a tokenizer is advanced past the end of its buffer."""
