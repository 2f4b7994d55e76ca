"""
Canonical resource, canonical string and Authorization header.

The service rebuilds the canonical string independently and compares
HMAC-SHA1 signatures, so every byte produced here is part of the protocol:

    METHOD
    Content-MD5
    Content-Type
    Date
    x-opensearch-*:value lines
    /path?sorted&escaped=params
"""

import logging
from typing import Mapping, Tuple

from .constants import (
    HEADER_CONTENT_MD5,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_AUTHORIZATION,
    AUTHORIZATION_SCHEME,
    SEARCH_API_PATH
)
from .credential import Signer
from .encoding import encode_path, encode_query
from .headers import CanonicalizableHeaders, RequestHeaders

logger = logging.getLogger(__name__)


def canonicalize_resource(uri: str, params: Mapping[str, str]) -> str:
    """
    Build the canonical resource string.

    Path separators stay literal. Parameters are emitted in ascending key
    order and those with empty values are left out.

    Args:
        uri: Request path
        params: Query parameters

    Returns:
        ``path?k1=v1&k2=v2``
    """
    path = encode_path(uri).replace("%2F", "/")
    pairs = [
        encode_query(key) + "=" + encode_query(params[key])
        for key in sorted(params)
        if params[key]
    ]
    return path + "?" + "&".join(pairs)


def build_canonical_string(method: str, uri: str, params: Mapping[str, str],
                           headers: CanonicalizableHeaders) -> str:
    """Assemble the text that gets signed."""
    return (
        method + "\n" +
        headers.get(HEADER_CONTENT_MD5, "") + "\n" +
        headers.get(HEADER_CONTENT_TYPE, "") + "\n" +
        headers.get(HEADER_DATE, "") + "\n" +
        headers.canonicalize() +
        canonicalize_resource(uri, params)
    )


def build_authorization(method: str, uri: str, params: Mapping[str, str],
                        headers: CanonicalizableHeaders, credential: Signer) -> str:
    """
    Compute the Authorization header value.

    Args:
        method: HTTP method
        uri: Request path
        params: Query parameters
        headers: Request headers
        credential: Access key used for signing

    Returns:
        ``OPENSEARCH <key id>:<base64 signature>``
    """
    canonicalized = build_canonical_string(method, uri, params, headers)
    logger.debug(
        "Signing %s %s for key %s (%d bytes canonical)",
        method, uri, credential.key_id, len(canonicalized)
    )
    signature = credential.sign(canonicalized)
    return f"{AUTHORIZATION_SCHEME} {credential.key_id}:{signature}"


def sign_request(method: str, uri: str, params: Mapping[str, str],
                 headers: RequestHeaders, credential: Signer) -> RequestHeaders:
    """
    Attach the Authorization header unless the caller already supplied one.

    Returns:
        The same header map, for chaining
    """
    if HEADER_AUTHORIZATION not in headers:
        headers.set(
            HEADER_AUTHORIZATION,
            build_authorization(method, uri, params, headers, credential)
        )
    return headers


def build_query_string(params: Mapping[str, str]) -> str:
    """
    Build the query string sent on the wire.

    Unlike the canonical resource, order is not significant here and
    empty values are kept.
    """
    return "&".join(
        encode_query(key) + "=" + encode_query(value)
        for key, value in params.items()
    )


def build_query(app_name: str, params: Mapping[str, str]) -> Tuple[str, str]:
    """
    Resolve the search path and wire query string for an app.

    Returns:
        Tuple of (uri, query string)
    """
    uri = SEARCH_API_PATH.format(app_name=app_name)
    return uri, build_query_string(params)
