# morsecode/engine/dictionary.py

"""Bidirectional character to Morse token dictionary."""

import logging
import threading
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from morsecode.core.exceptions import ConfigurationError, InitializationError
from morsecode.core.loader import SymbolTableLoader
from morsecode.logic.tokens import is_morse_token

logger = logging.getLogger(__name__)


class MorseDictionary:
    """Immutable bijection between characters and Morse tokens.

    The default instance is built once from the packaged symbol table and
    shared process-wide. Custom instances can be created from any table,
    e.g. a restricted alphabet for a specialised encoder.
    """

    _instance: Optional["MorseDictionary"] = None
    _lock = threading.Lock()

    def __init__(self, table: Optional[Mapping[str, str]] = None) -> None:
        """Build forward and reverse lookups.

        Args:
            table: Character to token mapping. Defaults to the packaged table.

        Raises:
            InitializationError: If the table is not a valid bijection.
        """
        if table is None:
            try:
                table = SymbolTableLoader.get_instance().get_table()
            except ConfigurationError as e:
                raise InitializationError("Default symbol table unavailable") from e

        forward: Dict[str, str] = {}
        reverse: Dict[str, str] = {}

        for char, token in table.items():
            if not isinstance(char, str) or len(char) != 1:
                raise InitializationError(f"Dictionary key must be one character: {char!r}")
            if not is_morse_token(token):
                raise InitializationError(f"Invalid Morse token for {char!r}: {token!r}")
            if token in reverse:
                raise InitializationError(
                    f"Token {token!r} is shared by {reverse[token]!r} and {char!r}"
                )
            forward[char] = token
            reverse[token] = char

        self._forward: Mapping[str, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, str] = MappingProxyType(reverse)

        logger.debug("MorseDictionary built", extra={"symbol_count": len(forward)})

    @classmethod
    def get_instance(cls) -> "MorseDictionary":
        """Returns the shared dictionary built from the packaged table.

        Raises:
            InitializationError: If the packaged table is invalid
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    instance = cls()
                    cls._instance = instance
                    logger.info(
                        "Default Morse dictionary initialized",
                        extra={"symbol_count": len(instance)},
                    )
        return cls._instance

    def morse_for(self, character: str) -> Optional[str]:
        """Returns the token for an exact character, or None if unsupported."""
        return self._forward.get(character)

    def char_for(self, token: str) -> Optional[str]:
        """Returns the character for an exact token, or None if unmapped."""
        return self._reverse.get(token)

    def characters(self) -> Iterator[str]:
        return iter(self._forward)

    def as_dict(self) -> Mapping[str, str]:
        """Read-only view of the character to token mapping."""
        return self._forward

    def __contains__(self, character: object) -> bool:
        return character in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self):
        return f"<MorseDictionary symbols={len(self._forward)} id={id(self)}>"
