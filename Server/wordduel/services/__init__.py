"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import WordDictionary
from .evaluator import evaluate
from .strategist import ComputerStrategist
from .session_machine import GameSession
from .session_registry import SessionRegistry
from .singleplayer_service import (
    SinglePlayerService, get_singleplayer_service, initialize_singleplayer_service
)

__all__ = [
    'WordDictionary', 'evaluate', 'ComputerStrategist',
    'GameSession', 'SessionRegistry',
    'SinglePlayerService', 'get_singleplayer_service', 'initialize_singleplayer_service'
]
