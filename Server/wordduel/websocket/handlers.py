"""
WebSocket Event Handlers

Binds the session protocol handler to Flask-SocketIO events and applies the
actions it returns: room membership changes and room-scoped emits.
"""

from flask import request
from flask_socketio import join_room, leave_room
from ..models.events import REQUEST_TYPES, RoomChange
from ..utils.game_logger import game_logger


def room_name(code: str) -> str:
    return f"game_{code}"


def deliver_actions(socketio, actions):
    """Apply protocol actions in order."""
    for action in actions:
        if isinstance(action, RoomChange):
            room = room_name(action.code)
            if action.action == 'join':
                join_room(room, sid=action.connection_id)
            elif action.action == 'leave':
                leave_room(room, sid=action.connection_id)
            else:
                socketio.close_room(room)
            continue

        args = () if action.data is None else (action.data,)
        try:
            if action.to is not None:
                socketio.emit(action.event, *args, to=action.to)
            else:
                socketio.emit(action.event, *args, to=room_name(action.room), skip_sid=action.skip)
        except Exception as emit_error:
            game_logger.logger.error(f"Failed to emit '{action.event}': {emit_error}")


def register_websocket_handlers(socketio, protocol):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect(*args):
        """Handle WebSocket connection."""
        game_logger.log_socket_event(request.sid, 'connect')

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        with protocol.lock:
            deliver_actions(socketio, protocol.disconnect(request.sid))

    def make_handler(event):
        def handle_event(data=None, *args):
            with protocol.lock:
                deliver_actions(socketio, protocol.handle(event, request.sid, data))
        handle_event.__name__ = f"handle_{event.replace('-', '_')}"
        return handle_event

    for event in REQUEST_TYPES:
        socketio.on_event(event, make_handler(event))


def reap_idle_sessions(socketio, protocol, timeout_seconds):
    """Expire idle sessions and tell their remaining players. Returns the count."""
    with protocol.lock:
        actions = protocol.reap_idle_sessions(timeout_seconds)
        deliver_actions(socketio, actions)
    return sum(1 for action in actions if isinstance(action, RoomChange))


__all__ = ['register_websocket_handlers', 'deliver_actions', 'reap_idle_sessions', 'room_name']
