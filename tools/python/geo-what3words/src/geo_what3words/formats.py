"""
geo-what3words — Address Format Classification
===============================================
Local, network-free check of whether a string *looks like* a three-word
address or a OneWord.  The remote API is the only authority on whether the
address actually exists; this module only rules out strings that cannot.

Rules:
    * Three words — exactly three dot-separated, non-empty groups of
      lowercase letters.  "Lowercase" follows Unicode case classification,
      so ``"три.пример.слова"`` and ``"ılık.şeker.ağaç"`` qualify.
    * OneWord — a ``*`` followed by 6 to 31 characters, each a lowercase
      letter, an ASCII digit or ``-``.

Usage::

    from geo_what3words.formats import WordsFormat, valid_words_format

    valid_words_format("prom.cape.pump")   # WordsFormat.THREE_WORDS
    valid_words_format("*libertytech")     # WordsFormat.ONE_WORD
    valid_words_format("Prom.cape.pump")   # WordsFormat.INVALID
"""

from __future__ import annotations

from enum import IntEnum

ONEWORD_PREFIX = "*"
ONEWORD_MIN_LENGTH = 6
ONEWORD_MAX_LENGTH = 31

_ASCII_DIGITS = frozenset("0123456789")


class WordsFormat(IntEnum):
    """Tri-state result of :func:`valid_words_format`.

    The integer values are the number of words the string encodes, so
    ``INVALID`` is falsy and can be used directly in a boolean test.
    """

    INVALID = 0
    ONE_WORD = 1
    THREE_WORDS = 3


def _is_lower_word(token: str) -> bool:
    return bool(token) and all(ch.islower() for ch in token)


def _is_oneword_char(ch: str) -> bool:
    return ch.islower() or ch in _ASCII_DIGITS or ch == "-"


def valid_words_format(words: str | None) -> WordsFormat:
    """Classify *words* as a three-word address, a OneWord, or neither.

    Args:
        words: Candidate address string.  ``None`` and ``""`` are accepted
               and classified as :attr:`WordsFormat.INVALID`.

    Returns:
        The :class:`WordsFormat` classification.  Never raises.
    """
    if not words:
        return WordsFormat.INVALID

    tokens = words.split(".")
    if len(tokens) == 3 and all(_is_lower_word(t) for t in tokens):
        return WordsFormat.THREE_WORDS

    if words.startswith(ONEWORD_PREFIX):
        body = words[len(ONEWORD_PREFIX):]
        if (
            ONEWORD_MIN_LENGTH <= len(body) <= ONEWORD_MAX_LENGTH
            and all(_is_oneword_char(ch) for ch in body)
        ):
            return WordsFormat.ONE_WORD

    return WordsFormat.INVALID


# Short alias kept alongside the descriptive name.
valid_words = valid_words_format
