"""Shared constants for the lexicon package."""

from __future__ import annotations

import os
import string

# Root vertex character; never a letter so it never appears in a word.
ROOT_CHAR = " "

ALPHABET = frozenset(string.ascii_lowercase)

# ── Wildcard symbols ─────────────────────────────────────────────────────
#   '?' and '_'  exactly one arbitrary character
#   '*'          zero or more arbitrary characters

WILDCARD_ONE = frozenset("?_")
WILDCARD_ANY = "*"
PATTERN_ALPHABET = ALPHABET | WILDCARD_ONE | {WILDCARD_ANY}

# ── Word-list discovery ──────────────────────────────────────────────────

DEFAULT_SEARCH_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    os.path.join("words", "ospd.txt"),
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

MINIMAL_WORDS: frozenset[str] = frozenset({
    "a", "an", "and", "are", "bat", "be", "but", "can", "car", "card",
    "cart", "cat", "chat", "cot", "cut", "day", "dog", "door", "for",
    "get", "had", "has", "her", "him", "his", "how", "is", "it", "its",
    "lexicon", "may", "new", "not", "now", "of", "old", "on", "one", "or",
    "our", "out", "say", "see", "she", "the", "to", "too", "trie", "two",
    "use", "was", "way", "who", "word", "words", "you",
})
