"""
Computer Strategist

Picks the computer opponent's guesses by elimination: only words consistent
with every clue seen so far are kept, and one of them is chosen at random.
"""

import random
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.game import GuessFeedback, LetterStatus
from ..utils.game_logger import game_logger
from .dictionary import WordDictionary
from .evaluator import evaluate

# A history entry is the guessed word with the verdicts it received.
HistoryEntry = Tuple[str, Sequence[LetterStatus]]


def _as_entry(item) -> HistoryEntry:
    if isinstance(item, GuessFeedback):
        return item.word, item.verdicts
    guess, verdicts = item
    return guess, tuple(LetterStatus(v) if isinstance(v, str) else v for v in verdicts)


class ComputerStrategist:
    """
    Constraint-based guesser for the single-player computer seat.

    Deterministic for a given seeded `rng`.
    """

    def __init__(self, dictionary: WordDictionary, rng: Optional[random.Random] = None):
        self.dictionary = dictionary
        self.rng = rng or random.Random()

    def candidates(self, history: Iterable) -> List[str]:
        """
        Return dictionary words consistent with every (guess, verdicts) pair.

        History entries may be GuessFeedback objects or (guess, verdicts)
        tuples; verdicts may be LetterStatus members or their string values.
        """
        possible = list(self.dictionary)
        for item in history:
            guess, verdicts = _as_entry(item)
            verdicts = tuple(verdicts)
            possible = [word for word in possible if evaluate(guess, word).verdicts == verdicts]
            if not possible:
                break
        return possible

    def next_guess(self, history: Iterable = ()) -> str:
        """Pick the next guess given the clues observed so far."""
        history = list(history)
        if not history:
            return self.dictionary.random_word(self.rng)

        possible = self.candidates(history)
        if not possible:
            # Clues contradict each other; evaluator and history disagree
            game_logger.logger.warning(
                f"Strategist found no consistent candidates after {len(history)} guesses; "
                f"falling back to a random word"
            )
            return self.dictionary.random_word(self.rng)

        return self.rng.choice(possible)
