# morsecode/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from morsecode.core.definitions import (
    DEFAULT_LETTER_DELIMITER,
    DEFAULT_REPLACEMENT_CHAR,
    DEFAULT_WORD_DELIMITER,
    UnknownHandling,
)
from morsecode.core.domain import TranslationConfig


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'MORSE_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MORSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Translation defaults
    unknown_handling: UnknownHandling = Field(
        default=UnknownHandling.THROW_ERROR,
        description="Policy for characters or tokens missing from the dictionary.",
    )

    replacement_char: str = Field(
        default=DEFAULT_REPLACEMENT_CHAR,
        description="Placeholder emitted when unknown_handling is 'replace'.",
    )

    preserve_case: bool = Field(
        default=False, description="Skip uppercasing input text before encoding."
    )

    letter_delimiter: str = Field(
        default=DEFAULT_LETTER_DELIMITER,
        description="Separator between Morse tokens within a word.",
    )

    word_delimiter: str = Field(
        default=DEFAULT_WORD_DELIMITER, description="Separator between encoded words."
    )

    # Runtime
    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def to_translation_config(self) -> TranslationConfig:
        """Builds the per-call configuration from these defaults."""
        return TranslationConfig(
            unknown_handling=self.unknown_handling,
            replacement_char=self.replacement_char,
            preserve_case=self.preserve_case,
            letter_delimiter=self.letter_delimiter,
            word_delimiter=self.word_delimiter,
        )


# Singleton settings instance
settings = Settings()
