# morsecode/engine/encoder.py

"""Text to Morse code encoder."""

import logging
from typing import List, Optional

from morsecode.core.domain import TranslationConfig
from morsecode.core.exceptions import UnknownCharacterError
from morsecode.engine.dictionary import MorseDictionary
from morsecode.logic.unknown_handling import get_strategy

logger = logging.getLogger(__name__)


class Encoder:
    """Converts plain text into delimited Morse tokens.

    Holds no mutable state; one instance may serve concurrent calls with
    different configurations.
    """

    def __init__(self, dictionary: Optional[MorseDictionary] = None) -> None:
        self._dictionary = dictionary

    @property
    def dictionary(self) -> MorseDictionary:
        if self._dictionary is not None:
            return self._dictionary
        return MorseDictionary.get_instance()

    def encode(self, text: str, config: TranslationConfig) -> str:
        """Encodes text to Morse code.

        Args:
            text: Plain text, split into words on whitespace runs
            config: Delimiters, case policy and unknown-symbol policy

        Returns:
            Morse string, letters joined by config.letter_delimiter and
            words by config.word_delimiter

        Raises:
            UnknownCharacterError: If a character is unsupported and the
                policy is UnknownHandling.THROW_ERROR
        """
        if not config.preserve_case:
            text = text.upper()

        dictionary = self.dictionary
        strategy = get_strategy(config.unknown_handling)
        encoded_words: List[str] = []

        for word in text.split():
            tokens: List[str] = []

            for char in word:
                token = dictionary.morse_for(char)
                if token is None:
                    token = strategy.resolve(
                        char, config.replacement_char, UnknownCharacterError
                    )
                    if token is None:
                        continue
                tokens.append(token)

            # Words whose characters were all ignored produce no output
            if tokens:
                encoded_words.append(config.letter_delimiter.join(tokens))

        logger.debug(
            "Encoded text",
            extra={"text_length": len(text), "word_count": len(encoded_words)},
        )
        return config.word_delimiter.join(encoded_words)
