"""
Single Player Controller

Handles the HTTP endpoints for games against the computer.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import GameError, GameNotFound
from ..services.singleplayer_service import get_singleplayer_service
from ..utils.decorators import require_json
from ..utils.game_logger import game_logger

singleplayer_bp = Blueprint('singleplayer', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


@singleplayer_bp.route('/validate', methods=['POST'])
@require_json('word')
def validate_word(data=None):
    """Check whether a word is in the dictionary."""
    try:
        service = get_singleplayer_service()
        if not service:
            return _service_unavailable()

        word = data['word']
        game_logger.log_user_action(request, 'validate_word', word_length=len(str(word)))

        response_data = {'valid': service.validate_word(word)}
        game_logger.log_server_response(request, 'validate_word', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'validate_word')
        return jsonify({'error': 'Internal server error'}), 500


@singleplayer_bp.route('/start', methods=['POST'])
@require_json('playerWord')
def start_game(data=None):
    """Start a game with the player's secret word."""
    try:
        service = get_singleplayer_service()
        if not service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'start_game')

        try:
            game_id = service.start_game(data['playerWord'])
        except GameError as e:
            error_response = {'error': e.message}
            game_logger.log_server_response(request, 'start_game', False, error_response)
            return jsonify(error_response), 400

        response_data = {'gameId': game_id}
        game_logger.log_server_response(request, 'start_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'start_game')
        return jsonify({'error': 'Internal server error'}), 500


@singleplayer_bp.route('/player-guess', methods=['POST'])
@require_json('gameId', 'guess')
def player_guess(data=None):
    """Submit the player's guess and get the computer's reply."""
    game_id = data['gameId']
    try:
        service = get_singleplayer_service()
        if not service:
            return _service_unavailable()

        guess = data['guess']
        game_logger.log_user_action(request, 'player_guess', game_id, guess=guess)

        try:
            response_data = service.make_player_guess(game_id, guess)
        except GameError as e:
            status = 404 if isinstance(e, GameNotFound) else 400
            error_response = {'error': e.message}
            game_logger.log_server_response(request, 'player_guess', False, error_response, game_id)
            return jsonify(error_response), status

        game_logger.log_server_response(
            request, 'player_guess', True, response_data, game_id,
            game_over=response_data['gameOver']
        )
        if response_data['gameOver']:
            game_logger.log_game_event(
                game_id, 'game_won', request.remote_addr,
                mode='singleplayer', winner=response_data['winner']
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'player_guess', game_id)
        return jsonify({'error': 'Internal server error'}), 500
