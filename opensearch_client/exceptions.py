"""
Custom exceptions for the OpenSearch client library.
"""

from typing import Optional


class OpenSearchClientError(Exception):
    """Base exception for OpenSearch client errors."""
    pass


class ConfigurationError(OpenSearchClientError):
    """Raised when client configuration is invalid."""
    pass


class HTTPError(OpenSearchClientError):
    """Raised when the HTTP request fails in transport."""
    pass


class HTTPStatusError(HTTPError):
    """Raised when the service answers with a non-200 status."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"error response, code: {status_code}")


class ResponseReadError(HTTPError):
    """Raised when the response body cannot be read."""
    pass


class ResponseDecodeError(OpenSearchClientError):
    """Raised when the response body is not a valid search response."""
    pass
