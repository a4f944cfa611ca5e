"""
Flask helpers for requiring an ApiKey Authorization header.
"""
import logging
from functools import wraps
from typing import Callable

from flask import current_app, g, jsonify, make_response, request

from .api_key_handler import APIKeyHandler
from .errors import AuthHeaderError
from ..monitoring import record_extraction

logger = logging.getLogger(__name__)


def current_handler() -> APIKeyHandler:
    """Return the app's configured handler, or a default one."""
    handler = current_app.config.get('API_KEY_HANDLER')
    if handler is None:
        handler = APIKeyHandler()
    return handler


def unauthorized_response(error: AuthHeaderError, scheme: str = "ApiKey"):
    """
    Build a 401 response for an extraction error.

    Args:
        error: Classified extraction error
        scheme: Scheme advertised in WWW-Authenticate

    Returns:
        Flask response with JSON body {"error": ..., "message": ...}
    """
    response = make_response(jsonify({
        'error': error.kind.value,
        'message': str(error)
    }), 401)
    response.headers['WWW-Authenticate'] = scheme
    return response


def require_api_key(func: Callable) -> Callable:
    """
    Decorator that requires a well-formed ApiKey Authorization header.

    On success the key is stored on flask.g.api_key before the view runs.
    The key is not checked against any store.

    Args:
        func: View function to decorate

    Returns:
        Wrapped view function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        handler = current_handler()
        result = handler.extract(request.headers)
        record_extraction(result)

        if not result.ok:
            logger.warning("API key rejected", extra={
                'path': request.path,
                'method': request.method,
                'reason': result.error.kind.value
            })
            return unauthorized_response(result.error, handler.scheme)

        g.api_key = result.api_key
        return func(*args, **kwargs)

    return wrapper
