# morsecode/core/definitions.py

"""Constants and enumerations shared by the encoder and decoder."""

from enum import Enum


class UnknownHandling(str, Enum):
    """Policy applied when a character or token has no dictionary entry."""

    IGNORE = "ignore"
    REPLACE = "replace"
    THROW_ERROR = "throw_error"


class Direction:
    """Constants naming the two translation directions."""

    ENCODE = "encode"
    DECODE = "decode"


# Morse token alphabet
DOT = "."
DASH = "-"

DEFAULT_REPLACEMENT_CHAR = "?"
DEFAULT_LETTER_DELIMITER = " "
DEFAULT_WORD_DELIMITER = " / "
