"""
API key authentication handler.
"""
from typing import Optional

from werkzeug.datastructures import EnvironHeaders

from .errors import MalformedHeaderError, NoAuthHeaderError
from .models import ExtractionResult

DEFAULT_HEADER_NAME = "Authorization"
DEFAULT_SCHEME = "ApiKey"


class APIKeyHandler:
    """
    Handler for API key extraction from an Authorization header.

    Accepts only the "ApiKey <api_key>" format. The scheme match is
    case-sensitive; the header name lookup is not.
    """

    def __init__(
        self,
        header_name: str = DEFAULT_HEADER_NAME,
        scheme: str = DEFAULT_SCHEME,
        reject_empty: bool = False
    ):
        """
        Initialize the API key handler.

        Args:
            header_name: Name of the header to check (default: "Authorization")
            scheme: Scheme token expected as the first field (default: "ApiKey")
            reject_empty: Treat "ApiKey " (scheme with no token) as malformed
                instead of returning an empty key
        """
        self.header_name = header_name
        self.scheme = scheme
        self.reject_empty = reject_empty

    def get_header(self, headers) -> Optional[str]:
        """
        Get the first value of the configured header.

        Args:
            headers: werkzeug Headers, or a dict mapping header names to a
                string or a list of strings (case-insensitive keys)

        Returns:
            First header value if present, None otherwise
        """
        if not headers:
            return None

        # WSGI joins repeated headers with commas; keep the first value
        if isinstance(headers, EnvironHeaders):
            value = headers.get(self.header_name)
            return value.split(',', 1)[0] if value else value

        # werkzeug Headers: case-insensitive, multi-valued
        getlist = getattr(headers, 'getlist', None)
        if callable(getlist):
            values = getlist(self.header_name)
            return values[0] if values else None

        wanted = self.header_name.lower()
        for key, value in headers.items():
            if key.lower() == wanted:
                if isinstance(value, (list, tuple)):
                    # Handle multiple values (take first)
                    return value[0] if value else None
                return value

        return None

    def extract(self, headers) -> ExtractionResult:
        """
        Extract the API key from the Authorization header.

        "ApiKey abc123" gives "abc123". The key is the first
        whitespace-delimited field after the scheme; anything after it is
        ignored. "ApiKey " (scheme followed only by spaces) gives an empty
        key and no error unless reject_empty is set.

        Args:
            headers: Header collection (see get_header)

        Returns:
            ExtractionResult with the key, or a NoAuthHeaderError /
            MalformedHeaderError
        """
        auth_header = self.get_header(headers)
        if not auth_header:
            return ExtractionResult(error=NoAuthHeaderError())

        remainder = auth_header[len(self.scheme):]
        if auth_header.startswith(self.scheme) and remainder and not remainder.strip(' '):
            if self.reject_empty:
                return ExtractionResult(error=MalformedHeaderError())
            return ExtractionResult(api_key='')

        parts = auth_header.split()
        if len(parts) < 2 or parts[0] != self.scheme:
            return ExtractionResult(error=MalformedHeaderError())

        return ExtractionResult(api_key=parts[1])


_default_handler = APIKeyHandler()


def get_api_key(headers) -> ExtractionResult:
    """
    Extract the API key from headers using the default handler.

    Args:
        headers: Header collection with an "Authorization: ApiKey <key>" entry

    Returns:
        ExtractionResult, unpackable as (api_key, error)
    """
    return _default_handler.extract(headers)
