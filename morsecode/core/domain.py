# morsecode/core/domain.py

"""Domain models for translation configuration and results."""

from dataclasses import dataclass, field
from typing import Any, Dict

from morsecode.core.definitions import (
    DEFAULT_LETTER_DELIMITER,
    DEFAULT_REPLACEMENT_CHAR,
    DEFAULT_WORD_DELIMITER,
    UnknownHandling,
)


@dataclass(frozen=True)
class TranslationConfig:
    """Immutable settings for a single encode or decode call.

    Attributes:
        unknown_handling: Policy for symbols missing from the dictionary
        replacement_char: Placeholder emitted under UnknownHandling.REPLACE
        preserve_case: If False, text is uppercased before encoding
        letter_delimiter: Separator between tokens within a word
        word_delimiter: Separator between encoded words
    """

    unknown_handling: UnknownHandling = UnknownHandling.THROW_ERROR
    replacement_char: str = DEFAULT_REPLACEMENT_CHAR
    preserve_case: bool = False
    letter_delimiter: str = DEFAULT_LETTER_DELIMITER
    word_delimiter: str = DEFAULT_WORD_DELIMITER

    def __post_init__(self) -> None:
        # Accept the policy by value, e.g. "replace"
        object.__setattr__(
            self, "unknown_handling", UnknownHandling(self.unknown_handling)
        )


@dataclass
class TranslationResult:
    """Result object returned by the translation service.

    Attributes:
        source_text: Input as received
        output_text: Translated output, empty on failure
        direction: Either "encode" or "decode"
        metadata: Additional processing information
    """

    source_text: str
    output_text: str
    direction: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return "error" not in self.metadata
