# morsecode/logic/tokens.py

"""Token validation and delimiter splitting helpers."""

import re
from typing import List

# Non-empty sequence over the Morse alphabet
MORSE_TOKEN = re.compile(r"[.\-]+")


def is_morse_token(token: str) -> bool:
    """Checks that a token is a non-empty string of dots and dashes."""
    return isinstance(token, str) and bool(MORSE_TOKEN.fullmatch(token))


def split_exact(text: str, delimiter: str) -> List[str]:
    """Splits on an exact delimiter substring.

    An empty delimiter performs no split, so the whole text is one piece.
    """
    if not delimiter:
        return [text]
    return text.split(delimiter)
