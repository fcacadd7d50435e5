"""Centralized configuration for context-search using Pydantic Settings."""

import codecs

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from context_search.exceptions import InvalidArgumentError
from context_search.search.analyzers import compile_word_pattern, get_word_pattern


class Settings(BaseSettings):
    """Typed configuration loaded from ``CONTEXT_SEARCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CONTEXT_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    # Tokenization
    word_shape: str = Field(default="default", description="Named word-shape rule (default, ascii, unicode, digits)")
    word_pattern: str = Field(
        default="",
        description="Custom word-shape regex; overrides word_shape when set",
    )

    # Querying
    context_size: int = Field(default=3, ge=0, description="Words of context on each side of a hit")

    # Loading
    encoding: str = Field(default="utf-8", min_length=1, description="Encoding used to decode documents")

    # Logging
    log_level: str = Field(default="warning", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    @field_validator("word_shape")
    @classmethod
    def _check_word_shape(cls, value: str) -> str:
        get_word_pattern(value)
        return value.lower()

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {value}") from exc
        return value

    @model_validator(mode="after")
    def _check_word_pattern(self) -> "Settings":
        if self.word_pattern:
            try:
                compile_word_pattern(self.word_pattern)
            except InvalidArgumentError as exc:
                raise ValueError(str(exc)) from exc
        return self

    def resolve_word_pattern(self) -> str:
        """Return the regex source in effect: the custom pattern, else the named shape."""
        if self.word_pattern:
            return self.word_pattern
        return get_word_pattern(self.word_shape)
