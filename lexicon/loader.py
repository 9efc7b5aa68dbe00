"""Fill a lexicon from a one-word-per-line word list."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from lexicon.constants import DEFAULT_SEARCH_PATHS, MINIMAL_WORDS
from lexicon.errors import WordListError
from lexicon.trie import LexiconTrie
from lexicon.validation import is_valid_word

log = logging.getLogger("lexicon")


def read_word_list(path: str) -> Iterator[str]:
    """Yield the lower-cased words of ``path``, skipping blank and
    non-alphabetic lines.

    Raises WordListError if the file cannot be opened or decoded.
    """
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if not word:
                    continue
                if not is_valid_word(word):
                    skipped += 1
                    continue
                yield word
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(path, str(exc)) from exc
    if skipped:
        log.debug("Skipped %d non-alphabetic lines in %s", skipped, path)


def load_word_list(lexicon: LexiconTrie, path: str) -> int:
    """Add every word of ``path`` to ``lexicon``.

    Returns the number of words read, duplicates included.
    """
    read = 0
    before = lexicon.num_words()
    for word in read_word_list(path):
        lexicon.add_word(word)
        read += 1
    log.info(
        "Loaded %s words from %s (%s new)",
        f"{read:,}", path, f"{lexicon.num_words() - before:,}",
    )
    return read


def load_default(lexicon: LexiconTrie, dict_path: str | None = None) -> str | None:
    """Load the first word list found, trying ``dict_path`` first.

    Falls back to a small built-in list when no file is found.  Returns the
    path loaded, or None for the built-in list.
    """
    if dict_path and not os.path.exists(dict_path):
        raise WordListError(dict_path, "no such file")

    search_paths: list[str] = []
    if dict_path:
        search_paths.append(dict_path)
    search_paths.extend(DEFAULT_SEARCH_PATHS)

    for path in search_paths:
        if os.path.exists(path):
            if load_word_list(lexicon, path):
                return path
            log.warning("Word list %s is empty, trying the next one", path)

    log.warning("No word list found -- using built-in minimal word list.")
    log.warning("Pass --dict PATH or save a list as words.txt for best results.")
    lexicon.add_words(MINIMAL_WORDS)
    return None
