"""
Word Dictionary

Read-only lookup of valid words, loaded once before the server accepts
connections.
"""

import random
from typing import Iterable, Optional, Tuple

from ..config.game_settings import WORD_LENGTH, normalize_words


class WordDictionary:
    """Immutable set of lowercase five-letter words."""

    def __init__(self, words: Iterable[str]):
        normalized = normalize_words(words)
        if not normalized:
            raise ValueError("Word list cannot be empty")
        self._ordered: Tuple[str, ...] = tuple(normalized)
        self._words = frozenset(normalized)

    def __contains__(self, word) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self):
        return iter(self._ordered)

    def is_valid(self, word) -> bool:
        """True if `word` has exactly five letters and is listed (case-insensitive)."""
        if not word or not isinstance(word, str) or len(word) != WORD_LENGTH:
            return False
        return word.lower() in self._words

    def random_word(self, rng: Optional[random.Random] = None) -> str:
        return (rng or random).choice(self._ordered)
