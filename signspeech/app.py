"""
Sign Speech Service
Serves sign pose resolution and pushes playback state to avatar clients
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO, emit

from . import __version__
from .api import sign_api
from .shared.config import SERVER_CONFIG, configure_logging
from .translator import SignTranslator

logger = logging.getLogger(__name__)

VERSION = __version__


def create_app(translator=None):
    """Build the Flask app and its SocketIO server."""
    app = Flask(__name__)
    app.config['SECRET_KEY'] = SERVER_CONFIG['secret_key']

    # CORS - allow the web client to call us
    CORS(app, resources={r"/*": {"origins": SERVER_CONFIG['cors_origins']}})

    socketio = SocketIO(app, cors_allowed_origins="*")

    translator = translator or SignTranslator()
    app.extensions['sign_translator'] = translator

    # Push every playback state change to connected avatars
    def broadcast(state):
        socketio.emit('pose_update', state.to_dict())

    translator.sequencer.subscribe(broadcast)

    app.register_blueprint(sign_api, url_prefix='/signs')

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        """Health check for monitoring"""
        return jsonify({
            'status': 'healthy',
            'service': 'sign-speech',
            'version': VERSION
        })

    # Status endpoint
    @app.route('/status', methods=['GET'])
    def status():
        """Detailed status"""
        return jsonify({
            'status': 'operational',
            'service': 'sign-speech',
            'playing': translator.sequencer.is_running,
            'known_words': len(translator.get_available_signs()),
            'endpoints': {
                'signs': '/signs',
                'health': '/health'
            }
        })

    @socketio.on('connect')
    def on_connect():
        emit('pose_update', translator.sequencer.state.to_dict())

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app, socketio


def main():
    configure_logging()
    port = SERVER_CONFIG['port']
    app, socketio = create_app()

    logger.info("=" * 60)
    logger.info("Starting Sign Speech Service")
    logger.info("=" * 60)
    logger.info(f"Port: {port}")
    logger.info(f"  Health: http://localhost:{port}/health")
    logger.info(f"  Signs:  http://localhost:{port}/signs/*")
    logger.info("=" * 60)

    socketio.run(app, host='0.0.0.0', port=port, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
