"""
OpenSearch Client Library

A Python client library that signs search requests for the OpenSearch
v3 OpenAPI with the OPENSEARCH HMAC-SHA1 authorization scheme.

Example usage:
    from opensearch_client import OpenSearchClient, SearchRequest

    client = OpenSearchClient("http://opensearch.example.com", "my_app", "key-id", "key-secret")
    response = client.search(SearchRequest(query="title:'apple'", hits=3))
"""

from .client import OpenSearchClient
from .credential import Credential, Signer, sha_hmac1
from .encoding import encode_path, encode_query
from .headers import CanonicalizableHeaders, RequestHeaders
from .request import SearchRequest, SortField, SortOrder
from .response import SearchResponse, Result, Item, ResponseError
from .signing import (
    build_authorization,
    build_canonical_string,
    build_query,
    build_query_string,
    canonicalize_resource,
    sign_request
)
from .exceptions import (
    OpenSearchClientError,
    ConfigurationError,
    HTTPError,
    HTTPStatusError,
    ResponseReadError,
    ResponseDecodeError
)
from .constants import (
    HEADER_AUTHORIZATION,
    HEADER_NONCE,
    DEFAULT_CONFIG,
    SEARCH_API_PATH
)

__version__ = "1.0.0"
__all__ = [
    "OpenSearchClient",
    "Credential",
    "Signer",
    "sha_hmac1",
    "encode_path",
    "encode_query",
    "CanonicalizableHeaders",
    "RequestHeaders",
    "SearchRequest",
    "SortField",
    "SortOrder",
    "SearchResponse",
    "Result",
    "Item",
    "ResponseError",
    "build_authorization",
    "build_canonical_string",
    "build_query",
    "build_query_string",
    "canonicalize_resource",
    "sign_request",
    "OpenSearchClientError",
    "ConfigurationError",
    "HTTPError",
    "HTTPStatusError",
    "ResponseReadError",
    "ResponseDecodeError",
    "HEADER_AUTHORIZATION",
    "HEADER_NONCE",
    "DEFAULT_CONFIG",
    "SEARCH_API_PATH"
]
