"""Caller-side checks for words and patterns handed to the trie.

The trie trusts its input; anything typed by a user or read from a file
should pass through here first.
"""

from __future__ import annotations

from lexicon.constants import ALPHABET, PATTERN_ALPHABET
from lexicon.errors import InvalidInputError


def _check(text: str, allowed: frozenset[str], kind: str) -> str:
    normalized = text.strip().lower()
    if not normalized and kind == "word":
        raise InvalidInputError(normalized, 0, kind)
    for i, ch in enumerate(normalized):
        if ch not in allowed:
            raise InvalidInputError(normalized, i, kind)
    return normalized


def validate_word(word: str) -> str:
    """Lower-cased ``word``, or InvalidInputError if it is not all letters."""
    return _check(word, ALPHABET, "word")


def validate_pattern(pattern: str) -> str:
    """Lower-cased ``pattern``; letters plus ``*``, ``?`` and ``_`` only."""
    return _check(pattern, PATTERN_ALPHABET, "pattern")


def is_valid_word(word: str) -> bool:
    try:
        validate_word(word)
    except InvalidInputError:
        return False
    return True
