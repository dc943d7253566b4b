# morsecode/service/pipeline.py

"""Main translation service pipeline."""

import logging
import threading
from typing import Optional

from morsecode.service.config import settings
from morsecode.engine.translator import MorseTranslator
from morsecode.engine.dictionary import MorseDictionary
from morsecode.core.definitions import Direction
from morsecode.core.domain import TranslationConfig, TranslationResult
from morsecode.core.exceptions import InitializationError, TranslationError

logger = logging.getLogger(__name__)


class TranslatorService:
    """Singleton service wrapper for the Morse translator.

    Manages translator lifecycle and provides thread-safe access to
    the translation functionality.
    """

    _instance: Optional[MorseTranslator] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> MorseTranslator:
        """Returns singleton translator instance.

        Returns:
            MorseTranslator backed by the default dictionary

        Raises:
            InitializationError: If the dictionary cannot be built
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing Morse translator")
                        MorseDictionary.get_instance()
                        cls._instance = MorseTranslator()
                        logger.info("Morse translator initialized successfully")

                    except Exception as e:
                        logger.error(
                            "Failed to initialize Morse translator", exc_info=True
                        )
                        if isinstance(e, InitializationError):
                            raise
                        raise InitializationError(
                            "Morse translator initialization failed"
                        ) from e

        return cls._instance


def _translate(
    direction: str, source: str, config: Optional[TranslationConfig]
) -> TranslationResult:
    if not isinstance(source, str):
        logger.error(f"Invalid input type received: {type(source)}")
        return TranslationResult(
            source_text=str(source),
            output_text="",
            direction=direction,
            metadata={"error": "Invalid input format", "status": "failed"},
        )

    config = config or settings.to_translation_config()

    try:
        translator = TranslatorService.get_instance()

        logger.info(
            f"Starting {direction} request",
            extra={
                "input_length": len(source),
                "unknown_handling": config.unknown_handling.value,
            },
        )

        if direction == Direction.ENCODE:
            output = translator.encode(source, config)
        else:
            output = translator.decode(source, config)

        return TranslationResult(
            source_text=source,
            output_text=output,
            direction=direction,
            metadata={"status": "ok", "output_length": len(output)},
        )

    except TranslationError as e:
        logger.warning(
            f"{direction} rejected: {e}",
            extra={"input_length": len(source), "error_type": type(e).__name__},
        )
        return TranslationResult(
            source_text=source,
            output_text="",
            direction=direction,
            metadata={
                "error": str(e),
                "status": "failed",
                "error_type": type(e).__name__,
                "symbol": e.symbol,
            },
        )

    except InitializationError as e:
        logger.error(
            f"Known error during {direction}: {type(e).__name__}",
            exc_info=True,
            extra={"input_length": len(source)},
        )
        return TranslationResult(
            source_text=source,
            output_text="",
            direction=direction,
            metadata={
                "error": "The translation service failed to initialize.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            f"Unexpected critical error in {direction} pipeline",
            exc_info=True,
            extra={"input_length": len(source)},
        )
        return TranslationResult(
            source_text=source,
            output_text="",
            direction=direction,
            metadata={
                "error": "An unexpected system error occurred.",
                "status": "failed",
            },
        )


def encode_text(
    text: str, config: Optional[TranslationConfig] = None
) -> TranslationResult:
    """Main entry point for text to Morse translation.

    Args:
        text: Plain text to encode
        config: Per-call configuration, defaults to the global settings

    Returns:
        TranslationResult with the Morse output and metadata.
        On failure, returns a result indicating the error safely.
    """
    return _translate(Direction.ENCODE, text, config)


def decode_morse(
    morse: str, config: Optional[TranslationConfig] = None
) -> TranslationResult:
    """Main entry point for Morse to text translation.

    Args:
        morse: Morse code using the configured delimiters
        config: Per-call configuration, defaults to the global settings

    Returns:
        TranslationResult with the decoded text and metadata.
        On failure, returns a result indicating the error safely.
    """
    return _translate(Direction.DECODE, morse, config)
