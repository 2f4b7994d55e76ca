"""
Constants for the OpenSearch client library.
Compatible with the OpenSearch v3 OpenAPI signing protocol.
"""

# Signed protocol headers
HEADER_CONTENT_MD5 = "Content-MD5"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATE = "Date"
HEADER_NONCE = "X-Opensearch-Nonce"
HEADER_AUTHORIZATION = "Authorization"

# Headers carrying this prefix (case-insensitive) enter the canonical header block
CUSTOM_HEADER_PREFIX = "X-Opensearch-"

CONTENT_TYPE_JSON = "application/json"
AUTHORIZATION_SCHEME = "OPENSEARCH"

# UTC, second precision, literal Z
DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# Nonce = hundred-millisecond ticks since epoch + 6 random digits
NONCE_TICK_NS = 100_000_000
NONCE_RANDOM_MIN = 100000
NONCE_RANDOM_MAX = 999999

# Search endpoint
SEARCH_API_PATH = "/v3/openapi/apps/{app_name}/search"
SEARCH_METHOD = "GET"

# Sort order tokens treated as ascending, everything else sorts descending
ASCENDING_ORDERS = frozenset({"ASC", "asc", "INCREASE", "increase"})

# Default configuration values
DEFAULT_CONFIG = {
    'timeout': 30,                # HTTP timeout in seconds
    'pool_size': 8,               # buffers retained by the pool
    'chunk_size': 64 * 1024,      # body read chunk size
}
