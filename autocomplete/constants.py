"""Constants for the autocomplete word list."""

import os

MIN_WORD_LENGTH = 1
MAX_WORD_LENGTH = 32

DEFAULT_LIMIT = 10

# Tried in order after an explicit --dict path.
WORDLIST_SEARCH_PATHS = [
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]
