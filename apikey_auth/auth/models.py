"""
API key extraction data models.
"""
from typing import Optional
from dataclasses import dataclass

from .errors import AuthHeaderError


@dataclass(frozen=True)
class ExtractionResult:
    """
    Result of extracting an API key from request headers.

    Unpacks as an ``(api_key, error)`` pair.

    Attributes:
        api_key: Extracted token (empty string on failure)
        error: Classified failure, or None on success
    """
    api_key: str = ''
    error: Optional[AuthHeaderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self):
        return iter((self.api_key, self.error))

    def to_dict(self) -> dict:
        """
        Convert to dictionary for logging/serialization.

        The token itself is left out; only its length is reported.

        Returns:
            Dictionary representation of the extraction result
        """
        return {
            'ok': self.ok,
            'key_length': len(self.api_key),
            'error': self.error.kind.value if self.error else None,
            'error_message': str(self.error) if self.error else None
        }
