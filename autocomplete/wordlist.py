"""Word list loaded into a trie for prefix suggestions."""

from __future__ import annotations

import logging
import os

from autocomplete import constants
from autocomplete.trie import Trie

log = logging.getLogger("autocomplete")

FALLBACK_WORDS = (
    "able", "about", "above", "accept", "account", "across", "act", "action",
    "add", "address", "after", "again", "against", "age", "agree", "air",
    "all", "allow", "also", "always", "among", "and", "animal", "answer",
    "any", "appear", "apple", "apply", "area", "argue", "arm", "around",
    "art", "ask", "back", "bad", "bag", "ball", "bank", "bar", "base", "be",
    "bear", "beat", "beautiful", "because", "become", "bed", "before",
    "begin", "believe", "best", "better", "between", "big", "bird", "black",
    "blue", "board", "boat", "body", "book", "both", "box", "boy", "bring",
    "build", "business", "buy", "call", "camera", "can", "car", "card",
    "care", "carry", "case", "cat", "catch", "cause", "center", "chair",
    "change", "check", "child", "choose", "city", "class", "clear", "close",
    "cold", "color", "come", "common", "company", "computer", "cover",
    "data", "day", "dear", "decide", "deep", "dog", "door", "down", "draw",
    "dream", "drive", "early", "earth", "east", "easy", "eat", "edge",
    "end", "enough", "enter", "even", "event", "every", "face", "fact",
    "fall", "family", "far", "fast", "father", "feel", "field", "file",
    "find", "fine", "fire", "first", "fish", "five", "floor", "fly",
    "follow", "food", "form", "free", "friend", "from", "front", "full",
    "game", "garden", "give", "glass", "go", "good", "great", "green",
    "ground", "group", "grow", "hand", "happy", "hard", "have", "head",
    "hear", "heart", "help", "here", "high", "home", "hope", "house",
    "idea", "image", "index", "input", "inside", "island", "join", "just",
    "keep", "key", "kind", "king", "know", "land", "large", "last", "late",
    "learn", "leave", "left", "letter", "light", "like", "line", "list",
    "listen", "little", "live", "long", "look", "love", "machine", "make",
    "man", "many", "map", "mark", "matter", "mean", "meet", "memory", "mind",
    "minute", "model", "money", "month", "more", "morning", "mother",
    "mountain", "move", "music", "name", "near", "need", "never", "new",
    "next", "night", "north", "note", "number", "object", "ocean", "offer",
    "office", "often", "old", "open", "order", "other", "page", "paper",
    "part", "pass", "path", "people", "picture", "place", "plan", "plant",
    "play", "point", "power", "prefix", "present", "program", "put",
    "question", "quick", "quiet", "rain", "read", "ready", "real", "red",
    "remember", "rest", "right", "river", "road", "rock", "room", "run",
    "same", "save", "say", "school", "sea", "search", "second", "see",
    "send", "set", "ship", "short", "show", "side", "simple", "size",
    "sleep", "small", "snow", "song", "sound", "south", "space", "speak",
    "stand", "star", "start", "state", "stay", "step", "stop", "story",
    "street", "strong", "study", "sun", "system", "table", "take", "talk",
    "teach", "tell", "test", "text", "thing", "think", "time", "today",
    "together", "train", "travel", "tree", "true", "try", "turn", "type",
    "under", "until", "use", "value", "very", "voice", "wait", "walk",
    "want", "warm", "watch", "water", "way", "week", "west", "white",
    "wind", "window", "word", "work", "world", "write", "year", "yellow",
    "young", "zero", "zone",
)


def normalize(word: str) -> str:
    return word.strip().lower()


class WordList:
    """Words loaded from a file (or a built-in fallback) into a ``Trie``."""

    def __init__(self, path: str | None = None):
        self.trie = Trie()
        self.source: str | None = None
        self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(constants.WORDLIST_SEARCH_PATHS)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                log.debug("Word list not found at %s", candidate)
                continue
            if self._load_file(candidate):
                self.source = candidate
                log.info("Loaded %s words from %s", f"{self.trie.size():,}", candidate)
                return

        log.warning("No word list found -- using built-in fallback words.")
        log.warning("Pass --dict PATH or save a word list as words.txt for real suggestions.")
        for word in FALLBACK_WORDS:
            self.trie.insert(word)

    def _load_file(self, path: str) -> bool:
        rejected = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = normalize(line)
                if not word:
                    continue
                if self.accepts(word):
                    self.trie.insert(word)
                else:
                    rejected += 1
        if rejected:
            log.debug("Skipped %d unusable lines in %s", rejected, path)
        return self.trie.size() > 0

    @staticmethod
    def accepts(word: str) -> bool:
        return (
            constants.MIN_WORD_LENGTH <= len(word) <= constants.MAX_WORD_LENGTH
            and word.isalpha()
        )

    def add(self, word: str) -> bool:
        """Insert ``word`` if it passes the loader's filter."""
        word = normalize(word)
        if not self.accepts(word):
            return False
        self.trie.insert(word)
        return True

    def suggest(self, prefix: str, limit: int | None = None) -> list[str]:
        words = self.trie.words_with_prefix(normalize(prefix))
        if limit is not None:
            return words[:limit]
        return words

    def is_valid(self, word: str) -> bool:
        return self.trie.contains(normalize(word))

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return self.trie.size()
