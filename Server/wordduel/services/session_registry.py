"""
Session Registry

Owns every live multiplayer session, keyed by its shareable code, plus the
reverse index from connection id to session code.
"""

import random
import string
import time
from typing import Dict, List, Optional, Tuple

from ..models.errors import GameNotFound
from .dictionary import WordDictionary
from .session_machine import GameSession

CODE_ALPHABET = string.ascii_uppercase + string.digits
MAX_CODE_ATTEMPTS = 100


class SessionRegistry:
    """
    In-memory session store.

    Not thread-safe on its own; callers serialize access (see
    SessionProtocolHandler).
    """

    def __init__(self, dictionary: WordDictionary, code_length: int = 6,
                 rng: Optional[random.Random] = None, clock=time.monotonic):
        self.dictionary = dictionary
        self.code_length = code_length
        self.rng = rng or random.SystemRandom()
        self.clock = clock
        self.sessions: Dict[str, GameSession] = {}
        self.connection_to_code: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self.sessions)

    def __contains__(self, code) -> bool:
        return code in self.sessions

    def _generate_code(self) -> str:
        for _ in range(MAX_CODE_ATTEMPTS):
            code = ''.join(self.rng.choice(CODE_ALPHABET) for _ in range(self.code_length))
            if code not in self.sessions:
                return code
        raise RuntimeError("Could not generate a unique session code")

    def create(self, creator_id: str) -> Tuple[str, GameSession]:
        """Register a new session with `creator_id` in seat 1."""
        code = self._generate_code()
        session = GameSession(code, creator_id, self.dictionary, clock=self.clock)
        self.sessions[code] = session
        self.bind(creator_id, code)
        return code, session

    def get(self, code: Optional[str]) -> GameSession:
        session = self.sessions.get(code) if code else None
        if session is None:
            raise GameNotFound()
        return session

    def remove(self, code: str) -> Optional[GameSession]:
        session = self.sessions.pop(code, None)
        if session is not None:
            for connection_id in list(session.participants):
                if self.connection_to_code.get(connection_id) == code:
                    del self.connection_to_code[connection_id]
        return session

    def bind(self, connection_id: str, code: str):
        self.connection_to_code[connection_id] = code

    def unbind(self, connection_id: str) -> Optional[str]:
        return self.connection_to_code.pop(connection_id, None)

    def find_by_participant(self, connection_id: str) -> Optional[str]:
        return self.connection_to_code.get(connection_id)

    def idle_sessions(self, timeout_seconds: float, now: Optional[float] = None) -> List[str]:
        """Codes of sessions with no activity for `timeout_seconds`."""
        now = self.clock() if now is None else now
        return [
            code for code, session in self.sessions.items()
            if now - session.last_activity >= timeout_seconds
        ]

    def summaries(self) -> List[Dict]:
        return [session.summary() for session in self.sessions.values()]
