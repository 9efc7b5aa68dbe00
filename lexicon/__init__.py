"""Lexicon -- word set backed by a prefix trie."""

from lexicon.constants import ALPHABET, PATTERN_ALPHABET, ROOT_CHAR, WILDCARD_ANY, WILDCARD_ONE
from lexicon.errors import InvalidInputError, LexiconError, WordListError
from lexicon.node import LexiconNode
from lexicon.trie import LexiconTrie, WordsView
from lexicon.validation import is_valid_word, validate_pattern, validate_word
from lexicon.loader import load_default, load_word_list, read_word_list

__all__ = [
    "ALPHABET",
    "PATTERN_ALPHABET",
    "ROOT_CHAR",
    "WILDCARD_ANY",
    "WILDCARD_ONE",
    "InvalidInputError",
    "LexiconError",
    "LexiconNode",
    "LexiconTrie",
    "WordListError",
    "WordsView",
    "is_valid_word",
    "load_default",
    "load_word_list",
    "read_word_list",
    "validate_pattern",
    "validate_word",
]
