"""
Request header map and canonical header block.
"""

import datetime
import random
import time
from typing import Dict, Iterator, Mapping, Optional, Protocol

from .constants import (
    HEADER_CONTENT_MD5,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_NONCE,
    CUSTOM_HEADER_PREFIX,
    CONTENT_TYPE_JSON,
    DATE_FORMAT,
    NONCE_TICK_NS,
    NONCE_RANDOM_MIN,
    NONCE_RANDOM_MAX
)

# Seeded once per process
_random = random.Random()


def formatted_date_string() -> str:
    """Current UTC time as YYYY-MM-DDTHH:MM:SSZ."""
    return datetime.datetime.now(datetime.timezone.utc).strftime(DATE_FORMAT)


def nonce() -> str:
    """
    Generate a request nonce.

    Hundred-millisecond ticks since the UTC epoch followed by a random
    six digit number in [100000, 999999].
    """
    ticks = time.time_ns() // NONCE_TICK_NS
    return f"{ticks}{_random.randint(NONCE_RANDOM_MIN, NONCE_RANDOM_MAX)}"


class CanonicalizableHeaders(Protocol):
    """Header lookup plus the canonical custom header block."""

    def get(self, key: str, default: str = "") -> str:
        ...

    def canonicalize(self) -> str:
        ...


class RequestHeaders:
    """
    Header map for one signed request.

    Seeded with Content-MD5, Content-Type, Date and X-Opensearch-Nonce;
    caller supplied headers override the seeded values. Keys are matched
    case-insensitively and keep the spelling they were first stored under,
    so only one value per header reaches both the signer and the wire.
    """

    def __init__(self, http_headers: Optional[Mapping[str, str]] = None):
        self._headers: Dict[str, str] = {}
        # lowercased key -> stored key
        self._names: Dict[str, str] = {}
        self.set(HEADER_CONTENT_MD5, "")
        self.set(HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON)
        self.set(HEADER_DATE, formatted_date_string())
        self.set(HEADER_NONCE, nonce())
        for key, value in (http_headers or {}).items():
            self.set(key, value)

    def get(self, key: str, default: str = "") -> str:
        """Return the stored value for key, or default when missing or empty."""
        name = self._names.get(key.lower())
        value = self._headers.get(name) if name is not None else None
        if value:
            return value
        return default

    def set(self, key: str, value: str):
        name = self._names.setdefault(key.lower(), key)
        self._headers[name] = value

    def canonicalize(self) -> str:
        """
        Build the canonical custom header block.

        Every header whose trimmed key starts with X-Opensearch- (any case)
        and whose trimmed value is non-empty is emitted as
        ``lowercase(key):value\\n``, ordered by key.

        Returns:
            The concatenated block, or the empty string if nothing qualifies
        """
        prefix = CUSTOM_HEADER_PREFIX.lower()
        selected = {}
        for key, value in self._headers.items():
            key = key.strip()
            value = value.strip()
            if key.lower().startswith(prefix) and value:
                selected[key] = value

        return "".join(
            f"{key.lower()}:{selected[key]}\n" for key in sorted(selected)
        )

    def to_dict(self) -> Dict[str, str]:
        """Copy of the headers to put on the wire."""
        return dict(self._headers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._names

    def __getitem__(self, key: str) -> str:
        return self._headers[self._names[key.lower()]]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"RequestHeaders({self._headers!r})"
