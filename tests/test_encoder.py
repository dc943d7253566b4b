# tests/test_encoder.py

import pytest

from morsecode.core.definitions import UnknownHandling
from morsecode.core.domain import TranslationConfig
from morsecode.core.exceptions import UnknownCharacterError
from morsecode.engine.encoder import Encoder

from conftest import HELLO_WORLD_MORSE


@pytest.fixture
def encoder():
    return Encoder()


def test_hello_world(encoder, default_config):
    assert encoder.encode("Hello World", default_config) == HELLO_WORLD_MORSE


def test_empty_input(encoder, default_config):
    assert encoder.encode("", default_config) == ""
    assert encoder.encode(" \t\n ", default_config) == ""


def test_whitespace_runs_are_one_separator(encoder, default_config):
    assert encoder.encode("  SOS \t\n SOS  ", default_config) == "... --- ... / ... --- ..."


def test_digits_and_punctuation(encoder, default_config):
    assert encoder.encode("73!", default_config) == "--... ...-- -.-.--"
    assert encoder.encode("a@b.c", default_config) == ".- .--.-. -... .-.-.- -.-."


def test_custom_delimiters(encoder):
    config = TranslationConfig(letter_delimiter="/", word_delimiter="///")

    expected = "///".join(
        ["/".join(["....", ".."]), "/".join(["-", "....", ".", ".-.", "."])]
    )

    assert encoder.encode("hi there", config) == expected


def test_word_delimiter_only_changes_word_separator(encoder, default_config):
    piped = TranslationConfig(word_delimiter="|")

    assert encoder.encode("Hello World", piped) == HELLO_WORLD_MORSE.replace(" / ", "|")


def test_unicode_uppercasing(encoder, default_config):
    # "ß".upper() expands to "SS"
    assert encoder.encode("straße", default_config) == "... - .-. .- ... ... ."


def test_preserve_case_treats_lowercase_as_unknown(encoder):
    config = TranslationConfig(preserve_case=True)

    assert encoder.encode("SOS", config) == "... --- ..."
    with pytest.raises(UnknownCharacterError) as exc_info:
        encoder.encode("SoS", config)
    assert exc_info.value.character == "o"


def test_throw_error_identifies_character(encoder, default_config):
    with pytest.raises(UnknownCharacterError) as exc_info:
        encoder.encode("AB CD#E", default_config)

    assert exc_info.value.character == "#"
    assert exc_info.value.symbol == "#"
    assert "#" in str(exc_info.value)


def test_non_bmp_character_reported_whole(encoder, default_config):
    with pytest.raises(UnknownCharacterError) as exc_info:
        encoder.encode("A\U0001F600", default_config)

    assert exc_info.value.character == "\U0001F600"


def test_ignore_matches_encoding_without_character(letters_only_dictionary):
    encoder = Encoder(letters_only_dictionary)
    config = TranslationConfig(unknown_handling=UnknownHandling.IGNORE)

    assert encoder.encode("A1B", config) == encoder.encode("AB", config)
    assert encoder.encode("A1B", config) == ".- -..."


def test_ignore_drops_words_left_empty(encoder, ignore_config):
    assert encoder.encode("A ## B", ignore_config) == ".- / -..."
    assert encoder.encode("###", ignore_config) == ""


def test_replace_emits_placeholder_token(encoder, replace_config):
    assert encoder.encode("A#B", replace_config) == ".- ? -..."


def test_replace_uses_configured_placeholder(encoder):
    config = TranslationConfig(unknown_handling="replace", replacement_char="*")

    assert encoder.encode("é e", config) == "* / ."


def test_restricted_dictionary_rejects_digits(letters_only_dictionary, default_config):
    with pytest.raises(UnknownCharacterError):
        Encoder(letters_only_dictionary).encode("A1B", default_config)
