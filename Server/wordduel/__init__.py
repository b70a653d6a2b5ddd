"""
Word Duel Game Server Application Package

Five-letter word duels, either against a computer opponent over HTTP or
against another player over WebSocket.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, dictionary=None, strategist=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        dictionary: WordDictionary to serve; loaded from config_class.WORD_LIST_PATH if omitted
        strategist: ComputerStrategist for single-player games; built from the dictionary if omitted

    Returns:
        Tuple of (Flask app, SocketIO) with all services initialized
    """
    from .config.game_settings import load_word_list
    from .services.dictionary import WordDictionary
    from .services.session_registry import SessionRegistry
    from .services.singleplayer_service import initialize_singleplayer_service
    from .websocket.protocol import SessionProtocolHandler

    app = Flask(__name__)
    app.config.from_object(config_class)

    # The dictionary is loaded once, before any connection is accepted
    if dictionary is None:
        dictionary = WordDictionary(load_word_list(config_class.WORD_LIST_PATH))

    registry = SessionRegistry(dictionary, code_length=config_class.SESSION_CODE_LENGTH)
    protocol = SessionProtocolHandler(registry)
    initialize_singleplayer_service(dictionary, strategist)

    # Initialize extensions
    CORS(app, origins=config_class.CORS_ORIGINS)
    socketio = SocketIO(app, cors_allowed_origins=config_class.CORS_ORIGINS, logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.singleplayer_controller import singleplayer_bp
    from .controllers.multiplayer_controller import multiplayer_bp

    app.register_blueprint(singleplayer_bp, url_prefix='/api/singleplayer')
    app.register_blueprint(multiplayer_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio, protocol)

    # Store instances for use in other modules
    app.socketio = socketio
    app.protocol = protocol

    return app, socketio
