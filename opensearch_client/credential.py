"""
Access key credential and HMAC-SHA1 signing.
"""

import base64
import hashlib
import hmac
from typing import Protocol


class Signer(Protocol):
    """Anything that can sign canonical text under an access key id."""

    @property
    def key_id(self) -> str:
        ...

    def sign(self, text: str) -> str:
        ...


def sha_hmac1(source: str, secret: str) -> str:
    """
    Compute HMAC-SHA1 of source keyed by secret.

    Args:
        source: Text to sign
        secret: HMAC key

    Returns:
        Standard base64 (padded) encoding of the raw digest
    """
    mac = hmac.new(
        secret.encode('utf-8'),
        source.encode('utf-8'),
        hashlib.sha1
    )
    return base64.b64encode(mac.digest()).decode('ascii')


class Credential:
    """
    Access key id and secret pair.

    Immutable once constructed; signing is a pure function of the text
    and the secret, so one credential can be shared across threads.
    """

    def __init__(self, key_id: str, key_secret: str):
        self._key_id = key_id
        self._key_secret = key_secret

    @property
    def key_id(self) -> str:
        return self._key_id

    @property
    def key_secret(self) -> str:
        return self._key_secret

    def sign(self, text: str) -> str:
        """Sign text with the access key secret."""
        return sha_hmac1(text, self._key_secret)

    def __repr__(self) -> str:
        return f"Credential(key_id={self._key_id!r})"
