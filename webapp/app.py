"""
Flask Application Factory

Creates and configures the Flask application instance.
"""

import logging
from datetime import datetime

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config.database import configure_database, init_database, count_reminders
from config.settings import INSECURE_DEFAULT_SECRET, load_settings
from webapp.errors import TrackerError
from webapp.routes.auth import auth_bp
from webapp.routes.reminders import reminders_bp
from webapp.routes.integrations import integrations_bp
from webapp.services.nudge_marker import start_nudge_scheduler

logger = logging.getLogger(__name__)


def register_error_handlers(app):
    """Render every error as a JSON body with an 'error' field."""

    @app.errorhandler(TrackerError)
    def handle_tracker_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'error': error.description}), error.code


def create_app(config=None):
    """
    Create and configure the Flask application.

    Args:
        config (dict, optional): Settings that override the environment

    Returns:
        Flask: The configured application
    """
    app = Flask(__name__)
    app.config.update(load_settings())
    if config:
        app.config.update(config)

    secret = app.config.get('JWT_SECRET')
    if not secret:
        app.config['JWT_SECRET'] = INSECURE_DEFAULT_SECRET
    app.config['INSECURE_SECRET'] = not secret or secret == INSECURE_DEFAULT_SECRET

    if app.config['INSECURE_SECRET']:
        logger.warning("JWT_SECRET is unset or left at its default; using an insecure default signing secret")

    configure_database(app.config['DATABASE_URL'])
    init_database()

    register_error_handlers(app)
    app.register_blueprint(auth_bp)
    app.register_blueprint(reminders_bp)
    app.register_blueprint(integrations_bp)

    if app.config['NUDGE_SWEEP_ENABLED']:
        app.extensions['nudge_scheduler'] = start_nudge_scheduler(
            interval_minutes=app.config['NUDGE_SWEEP_MINUTES'],
            timezone=app.config['TRACKER_TIMEZONE'],
        )

    @app.route('/api/health')
    def health():
        """Health check endpoint."""
        try:
            return jsonify({
                'status': 'ok',
                'reminders': count_reminders(),
                'timestamp': datetime.now().isoformat(),
            })
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            return jsonify({'status': 'error', 'message': str(e)}), 500

    return app
