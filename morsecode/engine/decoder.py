# morsecode/engine/decoder.py

"""Morse code to text decoder."""

import logging
from typing import List, Optional

from morsecode.core.domain import TranslationConfig
from morsecode.core.exceptions import UnknownTokenError
from morsecode.engine.dictionary import MorseDictionary
from morsecode.logic.tokens import split_exact
from morsecode.logic.unknown_handling import get_strategy

logger = logging.getLogger(__name__)


class Decoder:
    """Converts delimited Morse tokens back into text."""

    def __init__(self, dictionary: Optional[MorseDictionary] = None) -> None:
        self._dictionary = dictionary

    @property
    def dictionary(self) -> MorseDictionary:
        if self._dictionary is not None:
            return self._dictionary
        return MorseDictionary.get_instance()

    def decode(self, morse: str, config: TranslationConfig) -> str:
        """Decodes Morse code to text.

        Words are always rejoined with a single space, whatever the
        configured word delimiter is.

        Args:
            morse: Morse string using config's delimiters
            config: Delimiters and unknown-symbol policy

        Returns:
            Decoded text, empty for blank input

        Raises:
            UnknownTokenError: If a token is unmapped and the policy is
                UnknownHandling.THROW_ERROR
        """
        morse = morse.strip()
        if not morse:
            return ""

        dictionary = self.dictionary
        strategy = get_strategy(config.unknown_handling)
        decoded_words: List[str] = []

        for morse_word in split_exact(morse, config.word_delimiter):
            chars: List[str] = []

            for token in split_exact(morse_word, config.letter_delimiter):
                char = dictionary.char_for(token)
                if char is None:
                    char = strategy.resolve(
                        token, config.replacement_char, UnknownTokenError
                    )
                    if char is None:
                        continue
                chars.append(char)

            if chars:
                decoded_words.append("".join(chars))

        logger.debug(
            "Decoded Morse",
            extra={"morse_length": len(morse), "word_count": len(decoded_words)},
        )
        return " ".join(decoded_words)
