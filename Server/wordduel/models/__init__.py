"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GuessFeedback, LetterStatus, SessionPhase, SinglePlayerGame
from .errors import (
    GameError, GameNotFound, PlayerNotFound, InvalidWord, NotYourTurn,
    GameFull, AlreadyStarted, WrongPhase, InvalidRequest
)
from .events import (
    CreateGameRequest, JoinGameRequest, SubmitWordRequest, MakeGuessRequest,
    PlayAgainRequest, REQUEST_TYPES, Outgoing, RoomChange
)

__all__ = [
    'GuessFeedback', 'LetterStatus', 'SessionPhase', 'SinglePlayerGame',
    'GameError', 'GameNotFound', 'PlayerNotFound', 'InvalidWord', 'NotYourTurn',
    'GameFull', 'AlreadyStarted', 'WrongPhase', 'InvalidRequest',
    'CreateGameRequest', 'JoinGameRequest', 'SubmitWordRequest', 'MakeGuessRequest',
    'PlayAgainRequest', 'REQUEST_TYPES', 'Outgoing', 'RoomChange'
]
