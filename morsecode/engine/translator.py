# morsecode/engine/translator.py

"""Facade composing an encoder and a decoder."""

from typing import Optional

from morsecode.core.domain import TranslationConfig
from morsecode.engine.decoder import Decoder
from morsecode.engine.encoder import Encoder


class MorseTranslator:
    """Delegates encode and decode calls to replaceable strategies.

    Any object with a matching ``encode(text, config)`` or
    ``decode(morse, config)`` method can be injected.
    """

    def __init__(
        self, encoder: Optional[Encoder] = None, decoder: Optional[Decoder] = None
    ) -> None:
        self.encoder = encoder if encoder is not None else Encoder()
        self.decoder = decoder if decoder is not None else Decoder()

    def encode(self, text: str, config: Optional[TranslationConfig] = None) -> str:
        return self.encoder.encode(text, config or TranslationConfig())

    def decode(self, morse: str, config: Optional[TranslationConfig] = None) -> str:
        return self.decoder.decode(morse, config or TranslationConfig())

    def __repr__(self):
        return (
            f"<MorseTranslator encoder={type(self.encoder).__name__} "
            f"decoder={type(self.decoder).__name__}>"
        )
