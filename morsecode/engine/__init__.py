# morsecode/engine/__init__.py

"""Engine package providing the dictionary, encoder, decoder and facade.

These components implement the two symmetric translation passes over the
shared read-only symbol dictionary.
"""

from morsecode.engine.decoder import Decoder
from morsecode.engine.dictionary import MorseDictionary
from morsecode.engine.encoder import Encoder
from morsecode.engine.translator import MorseTranslator

__all__ = ["Decoder", "Encoder", "MorseDictionary", "MorseTranslator"]
