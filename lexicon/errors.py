"""Exceptions raised around the lexicon trie (never by the trie itself)."""

from __future__ import annotations


class LexiconError(ValueError):
    """Base class for lexicon errors."""


class InvalidInputError(LexiconError):
    """A word or pattern holds a character outside the supported alphabet."""

    def __init__(self, text: str, position: int, kind: str = "word"):
        self.text = text
        self.position = position
        self.kind = kind
        if not text:
            message = f"empty {kind}"
        else:
            message = (
                f"invalid character {text[position]!r} at position {position} "
                f"in {kind} {text!r}"
            )
        super().__init__(message)


class WordListError(LexiconError):
    """A word list could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read word list {path!r}: {reason}")
