# morsecode/logic/unknown_handling.py

"""Strategies applied to characters and tokens missing from the dictionary."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type, Union

from morsecode.core.definitions import UnknownHandling
from morsecode.core.exceptions import TranslationError

logger = logging.getLogger(__name__)


class UnknownSymbolStrategy(ABC):
    """Base class for unknown-symbol policies."""

    policy: UnknownHandling

    @abstractmethod
    def resolve(
        self, symbol: str, replacement: str, error_type: Type[TranslationError]
    ) -> Optional[str]:
        """Decides what to emit for an unmapped symbol.

        Args:
            symbol: The character (encode) or token (decode) with no entry
            replacement: Configured replacement string
            error_type: Exception class raised when the policy aborts

        Returns:
            Substitute to emit, or None to omit the symbol

        Raises:
            TranslationError: If the policy aborts the translation
        """
        pass


class IgnoreStrategy(UnknownSymbolStrategy):
    """Drops the unknown symbol."""

    policy = UnknownHandling.IGNORE

    def resolve(self, symbol, replacement, error_type):
        logger.debug(f"Ignoring unknown symbol {symbol!r}")
        return None


class ReplaceStrategy(UnknownSymbolStrategy):
    """Emits the configured replacement in place of the unknown symbol."""

    policy = UnknownHandling.REPLACE

    def resolve(self, symbol, replacement, error_type):
        logger.debug(f"Replacing unknown symbol {symbol!r} with {replacement!r}")
        return replacement


class ThrowErrorStrategy(UnknownSymbolStrategy):
    """Aborts the translation at the unknown symbol."""

    policy = UnknownHandling.THROW_ERROR

    def resolve(self, symbol, replacement, error_type):
        raise error_type(symbol)


_STRATEGIES: Dict[UnknownHandling, UnknownSymbolStrategy] = {
    UnknownHandling.IGNORE: IgnoreStrategy(),
    UnknownHandling.REPLACE: ReplaceStrategy(),
    UnknownHandling.THROW_ERROR: ThrowErrorStrategy(),
}


def get_strategy(policy: Union[UnknownHandling, str]) -> UnknownSymbolStrategy:
    """Factory method returning the shared strategy for a policy.

    Args:
        policy: UnknownHandling member or its string value (e.g. 'replace')

    Returns:
        Stateless strategy instance

    Raises:
        ValueError: If the policy is not a known UnknownHandling value
    """
    return _STRATEGIES[UnknownHandling(policy)]
