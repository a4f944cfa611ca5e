"""
Flask application for ApiKey header checks.

Serves an nginx auth_request endpoint that accepts requests carrying an
"Authorization: ApiKey <key>" header and rejects the rest with 401.
"""
import os
import logging
from typing import Optional
from flask import Flask
from dotenv import load_dotenv

# Load environment variables from .env file FIRST
load_dotenv()

# Configure logging with mazza-base
# Must be done before any other imports that might log
from mazza_base import configure_logging

debug_mode = os.environ.get('DEBUG_LOCAL', 'true').lower() == 'true'
log_level = os.environ.get('LOG_LEVEL', 'INFO')
configure_logging(
    application_tag='apikey-auth',
    debug_local=debug_mode,
    local_level=log_level
)

from apikey_auth.auth import APIKeyHandler
from apikey_auth.blueprints import authn_bp, health_bp, metrics_bp
from apikey_auth.monitoring import configure_json_formatter

logger = logging.getLogger(__name__)

# Apply JSON formatting (works with both local and Loki modes)
configure_json_formatter()


def _create_handler() -> APIKeyHandler:
    """
    Create the API key handler from environment configuration.

    Returns:
        APIKeyHandler for API_KEY_HEADER (default: Authorization)
    """
    header_name = os.environ.get('API_KEY_HEADER', 'Authorization')
    logger.info("API key handler initialized", extra={
        'header_name': header_name
    })
    return APIKeyHandler(header_name=header_name)


def create_app(handler: Optional[APIKeyHandler] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        handler: Optional API key handler (for testing). If None, creates based on env.

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    if handler is None:
        handler = _create_handler()

    # Store in app config for access in route handlers
    app.config['API_KEY_HANDLER'] = handler

    # Register blueprints
    app.register_blueprint(authn_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_bp)

    return app


# Create default app instance for WSGI servers and direct execution
app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 7843))
    logger.info("Starting API key service", extra={
        'port': port,
        'endpoints': ['/authn', '/health', '/metrics']
    })
    app.run(host='0.0.0.0', port=port, debug=False)
