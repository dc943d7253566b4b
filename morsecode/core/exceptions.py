# morsecode/core/exceptions.py

"""Custom exception hierarchy for the Morse translator.

This module defines the specific error types used throughout the application
to differentiate between configuration, initialization, and translation errors.
"""


class MorseError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(MorseError):
    """Raised when settings or the symbol table file fail to load or validate."""

    pass


class InitializationError(MorseError):
    """Raised when the dictionary or translator fails to initialize."""

    pass


class TranslationError(MorseError):
    """Base class for failures caused by a specific input symbol."""

    def __init__(self, symbol: str, message: str) -> None:
        super().__init__(message)
        self.symbol = symbol


class UnknownCharacterError(TranslationError):
    """Raised during encoding when a character has no Morse token."""

    def __init__(self, character: str) -> None:
        super().__init__(character, f"Unknown character: {character!r}")
        self.character = character


class UnknownTokenError(TranslationError):
    """Raised during decoding when a token has no dictionary character."""

    def __init__(self, token: str) -> None:
        super().__init__(token, f"Unknown Morse token: {token!r}")
        self.token = token
