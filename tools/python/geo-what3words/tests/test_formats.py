"""
Tests — Address Format Classification
======================================
Unit tests for :func:`~geo_what3words.formats.valid_words_format`.

No network access: classification is purely local.
"""

from __future__ import annotations

import pytest

from geo_what3words.client import What3WordsClient
from geo_what3words.formats import WordsFormat, valid_words, valid_words_format


class TestThreeWords:
    @pytest.mark.parametrize(
        "words",
        [
            "abc.def.ghi",
            "prom.cape.pump",
            "a.b.c",
            "три.пример.слова",   # Cyrillic
            "ılık.şeker.ağaç",    # Turkish dotless i and cedilla
            "straße.größe.maß",   # German eszett
            "éclair.façade.naïve",
        ],
    )
    def test_lowercase_unicode_triples_are_three_words(self, words: str) -> None:
        assert valid_words_format(words) is WordsFormat.THREE_WORDS

    @pytest.mark.parametrize(
        "words",
        [
            "Abc.def.ghi",
            "abc.dEf.ghi",
            "abc.def.ghI",
            "Три.пример.слова",
            "PROM.CAPE.PUMP",
        ],
    )
    def test_any_uppercase_letter_is_invalid(self, words: str) -> None:
        assert valid_words_format(words) is WordsFormat.INVALID

    @pytest.mark.parametrize(
        "words",
        [
            "abc.def",
            "abc.def.ghi.jkl",
            "abc..ghi",
            ".def.ghi",
            "abc.def.",
            "abc.d3f.ghi",
            "abc.de-f.ghi",
            "abc.de f.ghi",
            "abc,def,ghi",
            "abc.def.ghi\n",
        ],
    )
    def test_wrong_shape_or_characters_is_invalid(self, words: str) -> None:
        assert valid_words_format(words) is WordsFormat.INVALID


class TestOneWord:
    @pytest.mark.parametrize(
        "words",
        [
            "*exampleword",
            "*libertytech",
            "*one-two12",
            "*abcdef",                      # 6 characters, the minimum
            "*" + "a" * 31,                 # 31 characters, the maximum
            "*москва2016",
        ],
    )
    def test_valid_onewords(self, words: str) -> None:
        assert valid_words_format(words) is WordsFormat.ONE_WORD

    @pytest.mark.parametrize(
        "words",
        [
            "*abcde",                       # too short
            "*" + "a" * 32,                 # too long
            "*LibertyTech",
            "*liberty_tech",
            "*liberty.tech",
            "libertytech",
            "**libertytech",
            "*",
        ],
    )
    def test_invalid_onewords(self, words: str) -> None:
        assert valid_words_format(words) is WordsFormat.INVALID


class TestEmptyInput:
    def test_empty_string_is_invalid(self) -> None:
        assert valid_words_format("") is WordsFormat.INVALID

    def test_none_is_invalid(self) -> None:
        assert valid_words_format(None) is WordsFormat.INVALID


class TestWordsFormatValues:
    def test_values_match_word_counts(self) -> None:
        assert int(WordsFormat.THREE_WORDS) == 3
        assert int(WordsFormat.ONE_WORD) == 1
        assert int(WordsFormat.INVALID) == 0

    def test_invalid_is_falsy(self) -> None:
        assert not valid_words_format("nope")
        assert valid_words_format("one.two.three")

    def test_alias_and_client_method_agree(self) -> None:
        assert valid_words is valid_words_format
        assert What3WordsClient.valid_words("one.two.three") is WordsFormat.THREE_WORDS
        client = What3WordsClient(api_key="test-key")
        assert client.valid_words("*one-two12") is WordsFormat.ONE_WORD
        assert client.valid_words_format("") is WordsFormat.INVALID
