"""
Socket Event Models

Inbound request DTOs validated at the protocol boundary, and the outbound
messages and room changes the protocol handler asks the transport to perform.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidRequest


def _required_string(data: Any, key: str) -> str:
    if not isinstance(data, dict):
        raise InvalidRequest("Request body is required")
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequest(f"'{key}' is required")
    return value.strip()


def _optional_string(data: Any, key: str) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass(frozen=True)
class CreateGameRequest:
    event = 'create-game'

    @classmethod
    def from_payload(cls, data: Any) -> 'CreateGameRequest':
        return cls()


@dataclass(frozen=True)
class JoinGameRequest:
    code: str
    event = 'join-game'

    @classmethod
    def from_payload(cls, data: Any) -> 'JoinGameRequest':
        return cls(code=_required_string(data, 'code').upper())


@dataclass(frozen=True)
class SubmitWordRequest:
    word: str
    event = 'submit-word'

    @classmethod
    def from_payload(cls, data: Any) -> 'SubmitWordRequest':
        return cls(word=_required_string(data, 'word'))


@dataclass(frozen=True)
class MakeGuessRequest:
    code: str
    guess: str
    event = 'make-guess'

    @classmethod
    def from_payload(cls, data: Any) -> 'MakeGuessRequest':
        return cls(
            code=_required_string(data, 'code').upper(),
            guess=_required_string(data, 'guess')
        )


@dataclass(frozen=True)
class PlayAgainRequest:
    code: Optional[str] = None  # Falls back to the sender's session
    event = 'play-again'

    @classmethod
    def from_payload(cls, data: Any) -> 'PlayAgainRequest':
        code = _optional_string(data, 'code')
        return cls(code=code.upper() if code else None)


REQUEST_TYPES = {
    request_type.event: request_type
    for request_type in (
        CreateGameRequest, JoinGameRequest, SubmitWordRequest,
        MakeGuessRequest, PlayAgainRequest
    )
}


@dataclass(frozen=True)
class Outgoing:
    """
    One event to deliver.

    Exactly one of `to` (a connection id) or `room` (a session code) is set.
    `skip` excludes a connection from a room broadcast.
    """
    event: str
    data: Optional[Dict] = None
    to: Optional[str] = None
    room: Optional[str] = None
    skip: Optional[str] = None


@dataclass(frozen=True)
class RoomChange:
    """Ask the transport to move a connection in or out of a session room."""
    action: str  # "join", "leave" or "close"
    code: str
    connection_id: Optional[str] = None
