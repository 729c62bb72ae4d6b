"""Autocomplete -- trie-backed prefix suggestions."""

from autocomplete.constants import DEFAULT_LIMIT, MAX_WORD_LENGTH, MIN_WORD_LENGTH
from autocomplete.trie import Trie, TrieNode
from autocomplete.wordlist import WordList
from autocomplete.cli import run_cli

__all__ = [
    "DEFAULT_LIMIT",
    "MAX_WORD_LENGTH",
    "MIN_WORD_LENGTH",
    "Trie",
    "TrieNode",
    "WordList",
    "run_cli",
]
