"""
API key extraction components.
"""
from .errors import ErrorKind, AuthHeaderError, NoAuthHeaderError, MalformedHeaderError
from .models import ExtractionResult
from .api_key_handler import APIKeyHandler, get_api_key
from .decorators import require_api_key, unauthorized_response

__all__ = [
    'ErrorKind',
    'AuthHeaderError',
    'NoAuthHeaderError',
    'MalformedHeaderError',
    'ExtractionResult',
    'APIKeyHandler',
    'get_api_key',
    'require_api_key',
    'unauthorized_response',
]
