"""Single vertex of the lexicon trie."""

from __future__ import annotations

from collections.abc import Iterator

from sortedcontainers import SortedDict

from lexicon.constants import ROOT_CHAR


class LexiconNode:
    """One letter of the trie plus its children, kept in character order.

    A node is *terminal* when the path from the root down to it spells a
    word in the lexicon.  Words are never stored; they are rebuilt from the
    path while walking the tree.
    """

    __slots__ = ("char", "children", "is_terminal")

    def __init__(self, char: str = ROOT_CHAR):
        self.char = char
        self.children: SortedDict = SortedDict()
        self.is_terminal: bool = False

    # child management

    def add_child(self, ch: str) -> LexiconNode:
        """Create, attach and return the child for ``ch``.

        The caller guarantees no child for ``ch`` exists yet.
        """
        child = LexiconNode(ch)
        self.children[ch] = child
        return child

    def get_child(self, ch: str) -> LexiconNode | None:
        """Child for ``ch``, or None."""
        return self.children.get(ch)

    def remove_child(self, ch: str) -> None:
        """Detach the (dead) child for ``ch``."""
        del self.children[ch]

    def mark_word(self) -> None:
        self.is_terminal = True

    def unmark_word(self) -> None:
        self.is_terminal = False

    def is_leafless(self) -> bool:
        """True if the node has no children."""
        return not self.children

    def is_dead(self) -> bool:
        """A leafless, non-terminal node; must never stay in the tree."""
        return not self.is_terminal and not self.children

    # traversal

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """Yield every word in this subtree in lexicographic order.

        ``prefix`` is the path from the root down to, but excluding, this
        node.  The root's sentinel character is not part of any word.
        """
        if self.char != ROOT_CHAR:
            prefix += self.char
        if self.is_terminal:
            yield prefix
        for child in self.children.values():
            yield from child.iter_words(prefix)

    def __iter__(self) -> Iterator[LexiconNode]:
        return iter(self.children.values())

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"LexiconNode({self.char!r}{mark}, children={list(self.children)})"
