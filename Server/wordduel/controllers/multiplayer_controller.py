"""
Multiplayer Controller

Multiplayer play runs over WebSocket; these HTTP endpoints only expose
read-only views of the live sessions.
"""

from flask import Blueprint, current_app, request, jsonify
from ..services.singleplayer_service import get_singleplayer_service
from ..utils.game_logger import game_logger

multiplayer_bp = Blueprint('multiplayer', __name__)


@multiplayer_bp.route('/multiplayer/active-games', methods=['GET'])
def active_games():
    """List live sessions with their player count and phase."""
    try:
        protocol = current_app.protocol
        with protocol.lock:
            games = protocol.registry.summaries()

        game_logger.log_user_action(request, 'active_games')
        return jsonify(games)

    except Exception as e:
        game_logger.log_error(request, e, 'active_games')
        return jsonify({'error': 'Internal server error'}), 500


@multiplayer_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        protocol = current_app.protocol
        singleplayer_service = get_singleplayer_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_sessions': len(protocol.registry),
            'active_singleplayer_games': len(singleplayer_service.games) if singleplayer_service else 0,
            'dictionary_size': len(protocol.registry.dictionary),
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
