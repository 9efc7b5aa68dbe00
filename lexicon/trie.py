"""Word set backed by a prefix trie.

Supports exact and prefix lookups, insertion, deletion with pruning of
unneeded prefixes, ordered enumeration, same-length spelling suggestions
and wildcard pattern matching.

Words are lower-cased on the way in.  Input outside the lower-case
alphabet (and, for patterns, the wildcard symbols) is not checked here;
see :mod:`lexicon.validation`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from lexicon.constants import WILDCARD_ANY, WILDCARD_ONE
from lexicon.node import LexiconNode

log = logging.getLogger("lexicon")


class WordsView:
    """Restartable, ordered view over the words of a :class:`LexiconTrie`.

    Every ``iter()`` starts a fresh depth-first walk.  Adding or removing a
    word while a walk is in progress makes that walk raise RuntimeError.
    """

    __slots__ = ("_trie", "_prefix")

    def __init__(self, trie: LexiconTrie, prefix: str = ""):
        self._trie = trie
        self._prefix = prefix

    def __iter__(self) -> Iterator[str]:
        return self._trie.words_with_prefix(self._prefix)

    def __len__(self) -> int:
        if not self._prefix:
            return self._trie.num_words()
        return sum(1 for _ in self)

    def __contains__(self, word: object) -> bool:
        return (
            isinstance(word, str)
            and word.lower().startswith(self._prefix)
            and self._trie.contains_word(word)
        )

    def __repr__(self) -> str:
        return f"WordsView({list(self)!r})"


class LexiconTrie:
    """Set of lower-case words stored as a prefix trie."""

    def __init__(self, words: Iterable[str] | None = None):
        self.root = LexiconNode()
        self._size = 0
        self._version = 0
        if words is not None:
            self.add_words(words)

    # mutation

    def add_word(self, word: str) -> bool:
        """Add ``word``.  Returns False if it was already present."""
        word = word.lower()
        node = self.root
        for ch in word:
            child = node.get_child(ch)
            if child is None:
                child = node.add_child(ch)
            node = child
        if node.is_terminal:
            return False
        node.mark_word()
        self._size += 1
        self._version += 1
        return True

    def add_words(self, words: Iterable[str]) -> int:
        """Add every word in ``words``; returns how many were new."""
        added = sum(1 for w in words if self.add_word(w))
        log.debug("Added %d new words (%d total)", added, self._size)
        return added

    def remove_word(self, word: str) -> bool:
        """Remove ``word`` and any prefix nodes no other word needs.

        Returns False, leaving the trie untouched, if ``word`` is absent.
        """
        word = word.lower()
        if not self.contains_word(word):
            return False
        self._size -= 1
        self._version += 1
        self._remove(self.root, word, 0)
        return True

    def _remove(self, node: LexiconNode, word: str, idx: int) -> bool:
        """Unwind ``word`` below ``node``; True if ``node`` is now dead."""
        if idx == len(word):
            node.unmark_word()
            return node.is_leafless()

        ch = word[idx]
        child = node.get_child(ch)
        if not self._remove(child, word, idx + 1):
            return False
        node.remove_child(ch)
        return not node.is_terminal and node.is_leafless()

    def clear(self) -> None:
        """Remove every word."""
        log.debug("Clearing lexicon of %d words", self._size)
        self.root = LexiconNode()
        self._size = 0
        self._version += 1

    # lookup

    def contains_word(self, word: str) -> bool:
        node = self._walk(word.lower())
        return node is not None and node.is_terminal

    def contains_prefix(self, prefix: str) -> bool:
        """True if some word starts with ``prefix``.  The empty prefix always matches."""
        return self._walk(prefix.lower()) is not None

    def num_words(self) -> int:
        return self._size

    def _walk(self, s: str) -> LexiconNode | None:
        node = self.root
        for ch in s:
            node = node.get_child(ch)
            if node is None:
                return None
        return node

    # enumeration

    def words(self) -> WordsView:
        """All words, in alphabetical order."""
        return WordsView(self)

    def words_with_prefix(self, prefix: str) -> Iterator[str]:
        """Yield, in alphabetical order, every word starting with ``prefix``."""
        prefix = prefix.lower()
        node = self._walk(prefix)
        if node is None:
            return
        version = self._version
        # iter_words appends the node's own character
        for word in node.iter_words(prefix[:-1]):
            yield word
            if self._version != version:
                raise RuntimeError("lexicon changed size during iteration")

    # pattern search

    def suggest_corrections(self, target: str, max_distance: int) -> set[str]:
        """Words of the same length as ``target`` differing in at most
        ``max_distance`` positions.

        Only substitutions count; words of any other length are never
        suggested.  A mismatching branch is followed only while mismatch
        budget remains.
        """
        found: set[str] = set()
        if max_distance < 0:
            return found
        self._suggest(self.root, target.lower(), "", max_distance, found)
        return found

    def _suggest(
        self,
        node: LexiconNode,
        target: str,
        prefix: str,
        budget: int,
        found: set[str],
    ) -> None:
        depth = len(prefix)
        if depth == len(target):
            if node.is_terminal:
                found.add(prefix)
            return

        want = target[depth]
        for child in node:
            if child.char == want:
                self._suggest(child, target, prefix + child.char, budget, found)
            elif budget > 0:
                self._suggest(child, target, prefix + child.char, budget - 1, found)

    def match_pattern(self, pattern: str) -> set[str]:
        """Words matching ``pattern``.

        Letters match themselves, ``?`` and ``_`` match exactly one
        character and ``*`` matches any run of characters, including none.
        """
        found: set[str] = set()
        self._match(self.root, pattern.lower(), 0, "", found, set())
        return found

    def _match(
        self,
        node: LexiconNode,
        pattern: str,
        pos: int,
        prefix: str,
        found: set[str],
        seen: set[tuple[int, int]],
    ) -> None:
        # each node has exactly one path, so (node, pos) fixes the outcome
        state = (id(node), pos)
        if state in seen:
            return
        seen.add(state)

        if pos == len(pattern):
            if node.is_terminal:
                found.add(prefix)
            return

        sym = pattern[pos]
        if sym == WILDCARD_ANY:
            self._match(node, pattern, pos + 1, prefix, found, seen)
            for child in node:
                self._match(child, pattern, pos, prefix + child.char, found, seen)
        elif sym in WILDCARD_ONE:
            for child in node:
                self._match(child, pattern, pos + 1, prefix + child.char, found, seen)
        else:
            child = node.get_child(sym)
            if child is not None:
                self._match(child, pattern, pos + 1, prefix + sym, found, seen)

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())

    def __repr__(self) -> str:
        return f"LexiconTrie({self._size} words)"
