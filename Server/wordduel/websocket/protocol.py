"""
Session Protocol Handler

Turns inbound client events into session transitions and the resulting
transitions into outgoing events. Independent of the socket transport: every
call returns an ordered list of RoomChange and Outgoing actions for the
transport to apply.
"""

import threading
from typing import Any, List, Optional, Union

from ..models.errors import GameError, InvalidRequest
from ..models.events import (
    REQUEST_TYPES, CreateGameRequest, JoinGameRequest, MakeGuessRequest,
    Outgoing, PlayAgainRequest, RoomChange, SubmitWordRequest
)
from ..services.session_registry import SessionRegistry
from ..utils.game_logger import game_logger

Action = Union[Outgoing, RoomChange]

INTERNAL_ERROR_MESSAGE = 'Internal server error'
OPPONENT_LEFT_MESSAGE = 'Your opponent has disconnected'
SESSION_EXPIRED_MESSAGE = 'Game closed after a period of inactivity'


class SessionProtocolHandler:
    """
    Dispatches client events to the session they target.

    `lock` serializes every event, disconnect and reap so that each one,
    including the delivery of its actions by the transport, runs to
    completion before the next starts.
    """

    def __init__(self, registry: SessionRegistry):
        self.registry = registry
        self.lock = threading.RLock()
        self.dispatch = {
            CreateGameRequest.event: self._create_game,
            JoinGameRequest.event: self._join_game,
            SubmitWordRequest.event: self._submit_word,
            MakeGuessRequest.event: self._make_guess,
            PlayAgainRequest.event: self._play_again,
        }

    def handle(self, event: str, connection_id: str, payload: Any = None) -> List[Action]:
        """Validate and apply one inbound event; errors go back to the sender only."""
        with self.lock:
            try:
                request_type = REQUEST_TYPES.get(event)
                if request_type is None:
                    raise InvalidRequest(f"Unknown event '{event}'")
                request = request_type.from_payload(payload)
                game_logger.log_socket_event(
                    connection_id, event,
                    getattr(request, 'code', None) or self.registry.find_by_participant(connection_id)
                )
                return self.dispatch[event](connection_id, request)
            except GameError as e:
                game_logger.logger.info(f"Rejected '{event}' from {connection_id}: {e.message}")
                return [Outgoing('error', {'message': e.message}, to=connection_id)]
            except Exception as e:
                game_logger.log_error(connection_id, e, event)
                return [Outgoing('error', {'message': INTERNAL_ERROR_MESSAGE}, to=connection_id)]

    def disconnect(self, connection_id: str) -> List[Action]:
        """Remove a closed connection from its session, if it had one."""
        with self.lock:
            try:
                game_logger.log_socket_event(
                    connection_id, 'disconnect', self.registry.find_by_participant(connection_id)
                )
                return self._leave_current_session(connection_id, leave_room=False)
            except Exception as e:
                game_logger.log_error(connection_id, e, 'disconnect')
                return []

    def reap_idle_sessions(self, timeout_seconds: float, now: Optional[float] = None) -> List[Action]:
        """Destroy sessions idle for at least `timeout_seconds`."""
        actions: List[Action] = []
        with self.lock:
            for code in self.registry.idle_sessions(timeout_seconds, now):
                session = self.registry.remove(code)
                if session is None:
                    continue
                game_logger.log_game_event(
                    code, 'session_expired', 'system',
                    phase=session.phase.value, players=len(session.participants)
                )
                actions.append(Outgoing('session-expired', {'message': SESSION_EXPIRED_MESSAGE}, room=code))
                actions.append(RoomChange('close', code))
        return actions

    # ------------------------------------------------------------------
    # Event transitions
    # ------------------------------------------------------------------

    def _create_game(self, connection_id: str, request: CreateGameRequest) -> List[Action]:
        actions = self._leave_current_session(connection_id)
        code, session = self.registry.create(connection_id)
        seat = session.seat_of(connection_id)
        game_logger.log_game_event(code, 'game_created', connection_id, seat=seat)

        actions.append(RoomChange('join', code, connection_id))
        actions.append(Outgoing('game-created', {'code': code, 'seat': seat}, to=connection_id))
        return actions

    def _join_game(self, connection_id: str, request: JoinGameRequest) -> List[Action]:
        session = self.registry.get(request.code)
        rejoining = connection_id in session.participants
        seat = session.join(connection_id)

        actions: List[Action] = []
        if not rejoining:
            previous = self.registry.find_by_participant(connection_id)
            if previous and previous != request.code:
                actions.extend(self._leave_current_session(connection_id))
            self.registry.bind(connection_id, request.code)
            game_logger.log_game_event(request.code, 'player_joined', connection_id, seat=seat)

        actions.append(RoomChange('join', request.code, connection_id))
        actions.append(Outgoing('join-success', {'code': request.code, 'seat': seat}, to=connection_id))
        if not rejoining:
            actions.append(Outgoing('game-ready', room=request.code))
        return actions

    def _submit_word(self, connection_id: str, request: SubmitWordRequest) -> List[Action]:
        session = self.registry.get(self.registry.find_by_participant(connection_id))
        started = session.submit_word(connection_id, request.word)

        actions: List[Action] = [Outgoing('word-accepted', to=connection_id)]
        if started:
            game_logger.log_game_event(session.code, 'game_started', connection_id, turn=session.turn)
            actions.append(Outgoing('game-started', {'turn': session.turn}, room=session.code))
        return actions

    def _make_guess(self, connection_id: str, request: MakeGuessRequest) -> List[Action]:
        session = self.registry.get(request.code)
        feedback = session.make_guess(connection_id, request.guess)
        guess_log = session.guess_log_payload()

        # guess-result always precedes game-over
        actions: List[Action] = [
            Outgoing('guess-result', {'guessLog': guess_log, 'turn': session.turn}, room=session.code)
        ]
        if feedback.is_win:
            game_logger.log_game_event(
                session.code, 'game_won', connection_id,
                winner=session.winner, guesses=len(session.guess_log)
            )
            actions.append(Outgoing('game-over', {
                'winner': session.winner,
                'winningWord': session.winning_word,
                'guessLog': guess_log
            }, room=session.code))
        return actions

    def _play_again(self, connection_id: str, request: PlayAgainRequest) -> List[Action]:
        code = request.code or self.registry.find_by_participant(connection_id)
        session = self.registry.get(code)
        restarted = session.vote_rematch(connection_id)

        if restarted:
            game_logger.log_game_event(session.code, 'game_restarted', connection_id)
            return [Outgoing('game-restart', room=session.code)]
        return [Outgoing('play-again-vote', {'count': len(session.rematch_votes)}, room=session.code)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _leave_current_session(self, connection_id: str, leave_room: bool = True) -> List[Action]:
        code = self.registry.unbind(connection_id)
        if not code or code not in self.registry:
            return []

        session = self.registry.get(code)
        seat = session.remove_participant(connection_id)
        game_logger.log_game_event(code, 'player_left', connection_id, seat=seat)

        actions: List[Action] = []
        if leave_room:
            actions.append(RoomChange('leave', code, connection_id))

        if session.is_empty():
            self.registry.remove(code)
            game_logger.log_game_event(code, 'game_closed', connection_id)
            actions.append(RoomChange('close', code))
        else:
            actions.append(Outgoing(
                'player-disconnected', {'message': OPPONENT_LEFT_MESSAGE},
                room=code, skip=connection_id
            ))
        return actions
