"""
Word Duel Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import threading
import time
from wordduel import create_app
from wordduel.config import Config
from wordduel.services.singleplayer_service import get_singleplayer_service
from wordduel.websocket.handlers import reap_idle_sessions
from wordduel.utils.game_logger import game_logger


def run_reaper_pass(app, socketio, timeout_seconds=None):
    """
    Close multiplayer sessions and drop single-player games idle for
    `timeout_seconds` (IDLE_SESSION_TIMEOUT_SECONDS by default).

    Returns:
        tuple: (sessions closed, single-player games removed)
    """
    if timeout_seconds is None:
        timeout_seconds = app.config['IDLE_SESSION_TIMEOUT_SECONDS']

    with app.app_context():
        reaped_sessions = reap_idle_sessions(socketio, app.protocol, timeout_seconds)
        singleplayer_service = get_singleplayer_service()
        reaped_games = singleplayer_service.reap_idle_games(timeout_seconds) if singleplayer_service else []

    if reaped_sessions or reaped_games:
        print(f"Session reaper closed {reaped_sessions} idle session(s) and {len(reaped_games)} single-player game(s)")
        game_logger.logger.info(
            f"Session reaper: Removed {reaped_sessions} idle sessions, {len(reaped_games)} single-player games"
        )
    return reaped_sessions, len(reaped_games)


def session_reaper_worker(app, socketio):
    """
    Background worker that runs a reaper pass every REAPER_INTERVAL_SECONDS.
    """
    print("Session reaper worker started")
    while True:
        try:
            run_reaper_pass(app, socketio)
        except Exception as e:
            game_logger.logger.error(f"Error in session reaper worker: {e}")

        time.sleep(Config.REAPER_INTERVAL_SECONDS)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print(f"✓ Dictionary loaded with {len(app.protocol.registry.dictionary)} words")
        print("✓ Flask application created successfully")

        reaper_thread = threading.Thread(target=session_reaper_worker, args=(app, socketio), daemon=True)
        reaper_thread.start()
        print(f"✓ Session reaper started - checking every {Config.REAPER_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Word Duel Server Starting")

        print(f"\nStarting Word Duel Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Duel Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
