"""
Error kinds returned by the API key extractor.
"""
from typing import Optional
from enum import Enum


class ErrorKind(Enum):
    """Classification of extraction failures."""
    NO_AUTH_HEADER = "no_auth_header"
    MALFORMED_HEADER = "malformed_header"


class AuthHeaderError(Exception):
    """
    Base class for Authorization header extraction errors.

    Instances are returned to the caller as values, not raised. Only the
    subclasses, which carry a kind, can be instantiated.
    """
    kind: ErrorKind
    message: str = "authorization header error"

    def __init__(self, message: Optional[str] = None):
        if type(self) is AuthHeaderError:
            raise TypeError("AuthHeaderError is abstract; use NoAuthHeaderError or MalformedHeaderError")
        super().__init__(message or self.message)

    def __eq__(self, other):
        if not isinstance(other, AuthHeaderError):
            return NotImplemented
        return self.kind is other.kind and str(self) == str(other)

    def __hash__(self):
        return hash((self.kind, str(self)))


class NoAuthHeaderError(AuthHeaderError):
    """Authorization header is absent or empty."""
    kind = ErrorKind.NO_AUTH_HEADER
    message = "no authorization header included"


class MalformedHeaderError(AuthHeaderError):
    """Authorization header does not have the "ApiKey <token>" shape."""
    kind = ErrorKind.MALFORMED_HEADER
    message = "malformed authorization header"
