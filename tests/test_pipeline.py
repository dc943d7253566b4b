# tests/test_pipeline.py

import pytest

from morsecode.core.domain import TranslationConfig
from morsecode.core.exceptions import InitializationError
from morsecode.engine.dictionary import MorseDictionary
from morsecode.engine.translator import MorseTranslator
from morsecode.service import pipeline
from morsecode.service.config import Settings
from morsecode.service.pipeline import TranslatorService, decode_morse, encode_text

from conftest import HELLO_WORLD_MORSE


@pytest.fixture
def fresh_service(monkeypatch):
    monkeypatch.setattr(TranslatorService, "_instance", None)


def test_service_singleton():
    assert TranslatorService.get_instance() is TranslatorService.get_instance()


def test_encode_text(default_config):
    result = encode_text("Hello World", default_config)

    assert result.ok
    assert result.direction == "encode"
    assert result.source_text == "Hello World"
    assert result.output_text == HELLO_WORLD_MORSE
    assert result.metadata["status"] == "ok"


def test_decode_morse(default_config):
    result = decode_morse(HELLO_WORLD_MORSE, default_config)

    assert result.ok
    assert result.direction == "decode"
    assert result.output_text == "HELLO WORLD"


def test_empty_input_is_not_an_error(default_config):
    assert encode_text("", default_config).output_text == ""
    assert decode_morse("", default_config).ok


def test_unknown_character_reported(default_config):
    result = encode_text("A#", default_config)

    assert not result.ok
    assert result.output_text == ""
    assert result.metadata["error_type"] == "UnknownCharacterError"
    assert result.metadata["symbol"] == "#"


def test_unknown_token_reported(default_config):
    result = decode_morse(".- ........", default_config)

    assert not result.ok
    assert result.metadata["error_type"] == "UnknownTokenError"
    assert result.metadata["symbol"] == "........"


def test_config_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(
        pipeline, "settings", Settings(_env_file=None, word_delimiter="|")
    )

    assert encode_text("SOS SOS").output_text == "... --- ...|... --- ..."


def test_invalid_input_type(default_config):
    result = encode_text(12345, default_config)

    assert not result.ok
    assert result.source_text == "12345"
    assert result.metadata["error"] == "Invalid input format"


def test_initialization_failure(monkeypatch, fresh_service, default_config):
    def broken(cls):
        raise InitializationError("bad table")

    monkeypatch.setattr(MorseDictionary, "get_instance", classmethod(broken))

    result = encode_text("SOS", default_config)

    assert not result.ok
    assert result.metadata["error_type"] == "InitializationError"


def test_unexpected_initialization_error_is_wrapped(monkeypatch, fresh_service):
    def broken(cls):
        raise RuntimeError("boom")

    monkeypatch.setattr(MorseDictionary, "get_instance", classmethod(broken))

    with pytest.raises(InitializationError):
        TranslatorService.get_instance()


class ExplodingEncoder:
    def encode(self, text, config):
        raise RuntimeError("boom")


def test_unexpected_error_is_contained(monkeypatch, default_config):
    monkeypatch.setattr(
        TranslatorService, "_instance", MorseTranslator(encoder=ExplodingEncoder())
    )

    result = encode_text("SOS", default_config)

    assert not result.ok
    assert result.metadata["error"] == "An unexpected system error occurred."
    assert decode_morse("...", TranslationConfig()).output_text == "S"
