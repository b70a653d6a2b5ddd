"""
Single Player Service

Games against the computer: the player guesses the computer's secret word
while the computer strategist guesses the player's.
"""

import time
import uuid
from typing import Callable, Dict, List, Optional

from ..models.errors import GameNotFound, InvalidWord, WrongPhase
from ..models.game import SinglePlayerGame
from .dictionary import WordDictionary
from .evaluator import evaluate
from .strategist import ComputerStrategist


class SinglePlayerService:
    """
    Single-player game store keyed by an opaque game id.

    Games, finished or abandoned, stay in the store until `reap_idle_games`
    removes them.
    """

    def __init__(self, dictionary: WordDictionary, strategist: Optional[ComputerStrategist] = None,
                 clock: Callable[[], float] = time.monotonic):
        self.dictionary = dictionary
        self.strategist = strategist or ComputerStrategist(dictionary)
        self.clock = clock
        self.games: Dict[str, SinglePlayerGame] = {}

    def validate_word(self, word: str) -> bool:
        return self.dictionary.is_valid(word)

    def start_game(self, player_word: str) -> str:
        """
        Creates a game with the player's secret word.

        Returns:
            str: Unique game ID for this session

        Raises:
            InvalidWord: If the player's word is not in the dictionary
        """
        if not self.dictionary.is_valid(player_word):
            raise InvalidWord()

        game_id = str(uuid.uuid4())
        self.games[game_id] = SinglePlayerGame(
            game_id=game_id,
            player_word=player_word.lower(),
            computer_word=self.strategist.next_guess([]),
            last_activity=self.clock()
        )
        return game_id

    def get_game(self, game_id: str) -> SinglePlayerGame:
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFound()
        return game

    def make_player_guess(self, game_id: str, guess: str) -> Dict:
        """
        Play one round: the player's guess, then the computer's reply.

        Returns:
            dict: Response body with both sides' feedback and terminal state
        """
        game = self.get_game(game_id)
        if not self.dictionary.is_valid(guess):
            raise InvalidWord()
        if game.game_over:
            raise WrongPhase("Game is already over")

        game.last_activity = self.clock()
        player_feedback = evaluate(guess, game.computer_word)
        game.player_guesses.append(player_feedback)

        if player_feedback.is_win:
            self._finish(game, 'player')
            return {
                'playerGuessResult': player_feedback.result,
                'gameOver': True,
                'winner': 'player',
                'computerWord': game.computer_word,
                'playerWord': game.player_word,
                'canShareWord': True,
                'message': (
                    f"Congratulations! You won! You correctly guessed the computer's word: "
                    f"{game.computer_word}. The computer was trying to guess your word: {game.player_word}"
                )
            }

        computer_guess = self.strategist.next_guess(game.computer_guesses)
        computer_feedback = evaluate(computer_guess, game.player_word)
        game.computer_guesses.append(computer_feedback)
        computer_result = {'guess': computer_feedback.word, 'result': computer_feedback.result}

        if computer_feedback.is_win:
            self._finish(game, 'computer')
            return {
                'playerGuessResult': player_feedback.result,
                'computerGuessResult': computer_result,
                'gameOver': True,
                'winner': 'computer',
                'computerWord': game.computer_word,
                'canShareWord': False,
                'message': (
                    f"Game Over! The computer won by guessing your word: {game.player_word}. "
                    f"The computer's word was: {game.computer_word}"
                )
            }

        return {
            'playerGuessResult': player_feedback.result,
            'computerGuessResult': computer_result,
            'gameOver': False,
            'winner': None,
            'currentTurn': game.current_turn,
            'message': 'Your turn! Make your next guess.'
        }

    def _finish(self, game: SinglePlayerGame, winner: str):
        game.game_over = True
        game.winner = winner

    def reap_idle_games(self, timeout_seconds: float, now: Optional[float] = None) -> List[str]:
        """
        Drop games with no guess for `timeout_seconds`.

        Returns:
            list: IDs of the removed games
        """
        now = self.clock() if now is None else now
        expired = [
            game_id for game_id, game in list(self.games.items())
            if now - game.last_activity >= timeout_seconds
        ]
        for game_id in expired:
            self.games.pop(game_id, None)
        return expired


# Global service instance
_singleplayer_service = None


def get_singleplayer_service() -> Optional[SinglePlayerService]:
    """Get the global single-player service instance."""
    return _singleplayer_service


def initialize_singleplayer_service(dictionary: WordDictionary,
                                    strategist: Optional[ComputerStrategist] = None) -> SinglePlayerService:
    """Initialize the global single-player service instance."""
    global _singleplayer_service
    _singleplayer_service = SinglePlayerService(dictionary, strategist)
    return _singleplayer_service
