"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Per-letter verdict produced by the guess evaluator."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class SessionPhase(Enum):
    """Lifecycle phase of a multiplayer session."""
    WAITING_FOR_OPPONENT = "waiting"
    AWAITING_WORDS = "submitWord"
    PLAYING = "playing"
    GAME_OVER = "gameover"


@dataclass(frozen=True)
class GuessFeedback:
    """A guessed word together with its per-letter verdicts."""
    word: str
    verdicts: Tuple[LetterStatus, ...]
    seat: Optional[int] = None  # Only set for multiplayer guesses

    @property
    def is_win(self) -> bool:
        return all(verdict == LetterStatus.CORRECT for verdict in self.verdicts)

    @property
    def result(self) -> List[str]:
        return [verdict.value for verdict in self.verdicts]

    def to_dict(self) -> Dict:
        return {
            'seat': self.seat,
            'word': self.word,
            'result': self.result,
            'correctPositions': [verdict == LetterStatus.CORRECT for verdict in self.verdicts]
        }


@dataclass
class SinglePlayerGame:
    """Server-side state of a game against the computer."""
    game_id: str
    player_word: str
    computer_word: str
    player_guesses: List[GuessFeedback] = field(default_factory=list)
    computer_guesses: List[GuessFeedback] = field(default_factory=list)
    current_turn: str = "player"
    game_over: bool = False
    winner: Optional[str] = None  # "player" or "computer"
    last_activity: float = 0.0
