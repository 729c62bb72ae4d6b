"""Prefix trie backing word suggestions.

Children are keyed by single ``str`` characters, so prefixes are matched per
Unicode code point with no case folding.  Callers that want case-insensitive
matching normalise before inserting and querying (see ``WordList``).
"""

from __future__ import annotations

from typing import Iterable, Iterator


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("letter", "children", "is_terminal")

    def __init__(self, letter: str = ""):
        self.letter = letter
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.letter!r}{mark}, {len(self.children)} children)"


class Trie:
    """Prefix trie storing whole words.

    Words are never removed.  ``words_with_prefix`` and iteration return words
    in lexicographic (code point) order.  Inserting the empty string marks the
    root as terminal, so ``""`` then counts as a stored word.
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_iterable(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with ``prefix``."""
        return self._walk(prefix) is not None

    def words_with_prefix(self, prefix: str) -> list[str]:
        """All stored words starting with ``prefix``, the prefix itself included.

        Returns an empty list when nothing matches.
        """
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._collect(prefix, node))

    def size(self) -> int:
        """Number of distinct words inserted."""
        return self._size

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(prefix: str, start: TrieNode) -> Iterator[str]:
        # Explicit stack; children pushed in reverse so they pop in sorted order.
        stack: list[tuple[str, TrieNode]] = [(prefix, start)]
        while stack:
            path, node = stack.pop()
            if node.is_terminal:
                yield path
            for ch in sorted(node.children, reverse=True):
                stack.append((path + ch, node.children[ch]))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return self._collect("", self.root)
