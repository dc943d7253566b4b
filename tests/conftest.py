# tests/conftest.py

"""Shared fixtures for the Morse translator test suite."""

import pytest

from morsecode.core.definitions import UnknownHandling
from morsecode.core.domain import TranslationConfig
from morsecode.engine.dictionary import MorseDictionary

HELLO_WORLD_MORSE = ".... . .-.. .-.. --- / .-- --- .-. .-.. -.."


@pytest.fixture
def default_config():
    return TranslationConfig()


@pytest.fixture
def ignore_config():
    return TranslationConfig(unknown_handling=UnknownHandling.IGNORE)


@pytest.fixture
def replace_config():
    return TranslationConfig(unknown_handling=UnknownHandling.REPLACE)


@pytest.fixture
def dictionary():
    return MorseDictionary.get_instance()


@pytest.fixture
def letters_only_dictionary():
    """Restricted dictionary without digits or punctuation."""
    table = {
        char: token
        for char, token in MorseDictionary.get_instance().as_dict().items()
        if char.isalpha()
    }
    return MorseDictionary(table)
