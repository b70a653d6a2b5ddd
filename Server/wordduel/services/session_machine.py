"""
Session State Machine

One GameSession per multiplayer game. It is the only code that mutates a
session: every transition checks all of its preconditions before changing
anything, so a failed request leaves the session exactly as it was.
"""

import time
from typing import Dict, List, Optional, Set

from ..models.errors import (
    AlreadyStarted, GameFull, InvalidWord, NotYourTurn, PlayerNotFound, WrongPhase
)
from ..models.game import GuessFeedback, SessionPhase
from .dictionary import WordDictionary
from .evaluator import evaluate

SEATS = (1, 2)


class GameSession:
    """
    Two-seat word duel.

    Seat 1 is the creator. Words are stored and reported in uppercase.
    """

    def __init__(self, code: str, creator_id: str, dictionary: WordDictionary, clock=time.monotonic):
        self.code = code
        self.dictionary = dictionary
        self._clock = clock

        self.participants: Dict[str, int] = {creator_id: 1}
        self.secret_words: Dict[int, str] = {}
        self.turn: int = 1
        self.guess_log: List[GuessFeedback] = []
        self.phase: SessionPhase = SessionPhase.WAITING_FOR_OPPONENT
        self.winner: Optional[int] = None
        self.winning_word: Optional[str] = None
        self.rematch_votes: Set[str] = set()

        self.created_at = self._clock()
        self.last_activity = self.created_at

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def seat_of(self, connection_id: str) -> int:
        seat = self.participants.get(connection_id)
        if seat is None:
            raise PlayerNotFound()
        return seat

    def is_empty(self) -> bool:
        return not self.participants

    @staticmethod
    def opponent_of(seat: int) -> int:
        return 2 if seat == 1 else 1

    def guess_log_payload(self) -> List[Dict]:
        return [entry.to_dict() for entry in self.guess_log]

    def summary(self) -> Dict:
        return {
            'code': self.code,
            'players': len(self.participants),
            'phase': self.phase.value
        }

    def touch(self):
        self.last_activity = self._clock()

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def join(self, connection_id: str) -> int:
        """Seat a second player. Re-joining returns the existing seat unchanged."""
        if connection_id in self.participants:
            return self.participants[connection_id]
        if len(self.participants) >= len(SEATS):
            raise GameFull()
        if self.phase != SessionPhase.WAITING_FOR_OPPONENT:
            raise AlreadyStarted()

        taken = set(self.participants.values())
        seat = next(s for s in SEATS if s not in taken)
        self.participants[connection_id] = seat
        self.phase = SessionPhase.AWAITING_WORDS
        self.touch()
        return seat

    def submit_word(self, connection_id: str, word: str) -> bool:
        """
        Store the sender's secret word.

        Returns:
            bool: True if this submission started the game
        """
        seat = self.seat_of(connection_id)
        if self.phase != SessionPhase.AWAITING_WORDS:
            raise WrongPhase("Words can only be submitted before the game starts")
        if not self.dictionary.is_valid(word):
            raise InvalidWord("Invalid word! Please use a word from our dictionary.")

        self.secret_words[seat] = word.upper()
        self.touch()

        if len(self.secret_words) == len(SEATS):
            self.phase = SessionPhase.PLAYING
            self.turn = 1
            self.guess_log = []
            return True
        return False

    def make_guess(self, connection_id: str, guess: str) -> GuessFeedback:
        """Evaluate the sender's guess against the opponent's word."""
        seat = self.seat_of(connection_id)
        if self.phase != SessionPhase.PLAYING:
            raise WrongPhase("Game is not in playing phase")
        if self.turn != seat:
            raise NotYourTurn()
        if not self.dictionary.is_valid(guess):
            raise InvalidWord()

        opponent_word = self.secret_words[self.opponent_of(seat)]
        feedback = evaluate(guess, opponent_word, seat=seat)
        feedback = GuessFeedback(word=feedback.word.upper(), verdicts=feedback.verdicts, seat=seat)

        self.guess_log.append(feedback)
        self.touch()

        if feedback.is_win:
            self.winner = seat
            self.winning_word = opponent_word
            self.phase = SessionPhase.GAME_OVER
        else:
            self.turn = self.opponent_of(seat)
        return feedback

    def vote_rematch(self, connection_id: str) -> bool:
        """
        Record a play-again vote.

        Returns:
            bool: True if this vote completed the handshake and reset the game
        """
        self.seat_of(connection_id)
        if self.phase != SessionPhase.GAME_OVER:
            raise WrongPhase("Play again is only available after the game is over")

        self.rematch_votes.add(connection_id)
        self.touch()

        if len(self.rematch_votes) < len(SEATS):
            return False

        self.secret_words = {}
        self.turn = 1
        self.guess_log = []
        self.winner = None
        self.winning_word = None
        self.rematch_votes = set()
        self.phase = SessionPhase.AWAITING_WORDS
        return True

    def remove_participant(self, connection_id: str) -> Optional[int]:
        """Drop a connection from the session; the phase is left as is."""
        seat = self.participants.pop(connection_id, None)
        self.rematch_votes.discard(connection_id)
        if seat is not None:
            self.touch()
        return seat
