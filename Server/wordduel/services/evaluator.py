"""
Guess Evaluator

Implements the Wordle letter evaluation shared by single- and multiplayer games.
"""

from typing import List, Optional

from ..config.game_settings import WORD_LENGTH
from ..models.game import GuessFeedback, LetterStatus


def evaluate(guess: str, target: str, seat: Optional[int] = None) -> GuessFeedback:
    """
    Evaluate `guess` against `target`.

    Exact matches are consumed first so that a repeated guess letter is only
    marked PRESENT while unused copies remain in the target.

    Args:
        guess: The guessed word
        target: The word being guessed
        seat: Guessing seat, recorded on multiplayer feedback

    Returns:
        GuessFeedback with the word lowercased and one verdict per letter

    Raises:
        ValueError: If either word is not WORD_LENGTH letters long
    """
    guess = guess.lower()
    target = target.lower()
    if len(guess) != WORD_LENGTH or len(target) != WORD_LENGTH:
        raise ValueError(f"Guess and target must both be {WORD_LENGTH} letters")

    verdicts: List[Optional[LetterStatus]] = [None] * WORD_LENGTH

    # Working copies track letter consumption
    target_chars: List[Optional[str]] = list(target)
    guess_chars: List[Optional[str]] = list(guess)

    # First pass: exact position matches
    for i in range(WORD_LENGTH):
        if guess_chars[i] == target_chars[i]:
            verdicts[i] = LetterStatus.CORRECT
            target_chars[i] = None
            guess_chars[i] = None

    # Second pass: present elsewhere or absent
    for i in range(WORD_LENGTH):
        letter = guess_chars[i]
        if letter is None:
            continue
        if letter in target_chars:
            verdicts[i] = LetterStatus.PRESENT
            target_chars[target_chars.index(letter)] = None
        else:
            verdicts[i] = LetterStatus.ABSENT

    return GuessFeedback(word=guess, verdicts=tuple(verdicts), seat=seat)