"""
Game Errors

Every failure a client can trigger is a GameError. The message is what the
originating connection sees in its error event.
"""


class GameError(Exception):
    """Base class for recoverable game errors."""
    default_message = "Game error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class GameNotFound(GameError):
    default_message = "Game not found"


class PlayerNotFound(GameError):
    default_message = "Player not found in game"


class InvalidWord(GameError):
    default_message = "Invalid word"


class NotYourTurn(GameError):
    default_message = "Not your turn"


class GameFull(GameError):
    default_message = "Game is full"


class AlreadyStarted(GameError):
    default_message = "Game has already started"


class WrongPhase(GameError):
    default_message = "Action not allowed in the current game phase"


class InvalidRequest(GameError):
    default_message = "Invalid request"
