"""
OpenSearch search client.

This module issues signed search requests compatible with the OpenSearch
v3 OpenAPI, which authenticates every call with an HMAC-SHA1 signature
over a canonical form of the request.
"""

import logging
from typing import Optional

import pydantic
import requests

from .constants import (
    DEFAULT_CONFIG,
    SEARCH_METHOD
)
from .credential import Credential
from .exceptions import (
    ConfigurationError,
    HTTPError,
    HTTPStatusError,
    ResponseReadError,
    ResponseDecodeError
)
from .headers import RequestHeaders
from .pool import BufferPool
from .request import SearchRequest
from .response import SearchResponse
from .signing import build_query, sign_request

logger = logging.getLogger(__name__)


class OpenSearchClient:
    """
    Client for the search endpoint of one OpenSearch app.

    Every call builds its own parameter and header maps, so one client can
    be shared between threads; the credential is only read while signing.
    """

    def __init__(self, host: str, app_name: str, access_key_id: str, access_key_secret: str,
                 session: Optional[requests.Session] = None, **config):
        """
        Initialize the client.

        Args:
            host: Scheme and host of the service, e.g. http://opensearch-cn-hangzhou.aliyuncs.com
            app_name: Name of the app to search
            access_key_id: Access key id
            access_key_secret: Access key secret
            session: HTTP session to use; a private one is created when omitted
            **config: Configuration options (timeout, pool_size, chunk_size)
        """
        self.host = host.rstrip('/')
        self.app_name = app_name
        self._credential = Credential(access_key_id, access_key_secret)

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.pool = BufferPool(self.config['pool_size'])

    def _validate_config(self):
        """Validate client configuration."""
        if not self.host:
            raise ConfigurationError("host cannot be empty")

        if not self.app_name:
            raise ConfigurationError("app_name cannot be empty")

        if not self._credential.key_id:
            raise ConfigurationError("access_key_id cannot be empty")

        if not self._credential.key_secret:
            raise ConfigurationError("access_key_secret cannot be empty")

        for option in ('timeout', 'pool_size', 'chunk_size'):
            if self.config[option] <= 0:
                raise ConfigurationError(f"{option} must be positive")

    @property
    def credential(self) -> Credential:
        return self._credential

    def prepare(self, request: SearchRequest):
        """
        Build the signed URL and headers for a search.

        Args:
            request: Search to run

        Returns:
            Tuple of (url, headers)
        """
        params = request.params()
        uri, query = build_query(self.app_name, params)

        headers = RequestHeaders(request.headers_map())
        sign_request(SEARCH_METHOD, uri, params, headers, self._credential)

        return f"{self.host}{uri}?{query}", headers.to_dict()

    def search(self, request: SearchRequest, timeout: Optional[float] = None) -> SearchResponse:
        """
        Run a search.

        Args:
            request: Search to run
            timeout: Per-call timeout in seconds, overriding the configured one

        Returns:
            Decoded SearchResponse

        Raises:
            HTTPError: If the request fails in transport
            HTTPStatusError: If the status is not 200
            ResponseReadError: If the body cannot be read
            ResponseDecodeError: If the body is not a valid search response
        """
        url, headers = self.prepare(request)
        logger.debug("%s %s", SEARCH_METHOD, url)

        try:
            response = self.session.request(
                SEARCH_METHOD,
                url,
                headers=headers,
                timeout=timeout if timeout is not None else self.config['timeout'],
                stream=True
            )
        except requests.RequestException as e:
            raise HTTPError(f"HTTP request failed: {e}") from e

        with response:
            if response.status_code != 200:
                logger.warning("Search on app %s failed with status %s", self.app_name, response.status_code)
                raise HTTPStatusError(response.status_code)

            with self.pool.acquire() as buffer:
                try:
                    for chunk in response.iter_content(chunk_size=self.config['chunk_size']):
                        buffer.write(chunk)
                except requests.RequestException as e:
                    raise ResponseReadError(f"client body read failure: {e}") from e

                try:
                    return SearchResponse.from_json(buffer.getvalue())
                except pydantic.ValidationError as e:
                    raise ResponseDecodeError(f"invalid search response: {e}") from e

    def close(self):
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session:
            self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
