# morsecode/core/__init__.py

"""Core domain models and utilities used across the Morse translator.

This package provides the configuration value object, the unknown-handling
policy enumeration, exceptions, and the symbol table loader shared by the
rest of the application.
"""

from morsecode.core.definitions import UnknownHandling
from morsecode.core.domain import TranslationConfig, TranslationResult
from morsecode.core.exceptions import (
    ConfigurationError,
    InitializationError,
    MorseError,
    TranslationError,
    UnknownCharacterError,
    UnknownTokenError,
)

__all__ = [
    "ConfigurationError",
    "InitializationError",
    "MorseError",
    "TranslationConfig",
    "TranslationError",
    "TranslationResult",
    "UnknownCharacterError",
    "UnknownHandling",
    "UnknownTokenError",
]
