"""
Unit tests for credential signing.
"""

import base64
import hashlib
import hmac

import pytest

from opensearch_client import Credential, sha_hmac1


class TestCredential:
    """Test access key credential."""

    @pytest.fixture
    def credential(self):
        """Create test credential."""
        return Credential("test-key-id", "test-key-secret")

    def test_accessors(self, credential):
        """Test key id and secret accessors."""
        assert credential.key_id == "test-key-id"
        assert credential.key_secret == "test-key-secret"

    def test_read_only(self, credential):
        """Test that key id and secret cannot be reassigned."""
        with pytest.raises(AttributeError):
            credential.key_id = "other"
        with pytest.raises(AttributeError):
            credential.key_secret = "other"

    def test_sign(self, credential):
        """Test signing is base64 HMAC-SHA1 keyed by the secret."""
        text = "GET\n\napplication/json\n2023-12-15T12:00:00Z\n/path?"
        signature = credential.sign(text)

        expected = base64.b64encode(
            hmac.new(b"test-key-secret", text.encode('utf-8'), hashlib.sha1).digest()
        ).decode('ascii')
        assert signature == expected

        # SHA1 digest = 20 bytes = 28 base64 chars with one pad
        assert len(signature) == 28
        assert signature.endswith("=")

    def test_sign_deterministic(self, credential):
        """Test signing the same text twice gives the same signature."""
        assert credential.sign("text") == credential.sign("text")

    def test_sign_depends_on_secret(self, credential):
        """Test a different secret gives a different signature."""
        other = Credential("test-key-id", "other-secret")
        assert credential.sign("text") != other.sign("text")

    def test_sha_hmac1_known_vector(self):
        """Test against the RFC 2202 HMAC-SHA1 vector for key 'Jefe'."""
        signature = sha_hmac1("what do ya want for nothing?", "Jefe")
        digest = base64.b64decode(signature)
        assert digest.hex() == "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"

    def test_sha_hmac1_unicode(self):
        """Test non-ASCII text is signed as UTF-8."""
        expected = base64.b64encode(
            hmac.new(b"secret", "苹果".encode('utf-8'), hashlib.sha1).digest()
        ).decode('ascii')
        assert sha_hmac1("苹果", "secret") == expected

    def test_repr_hides_secret(self, credential):
        """Test repr does not leak the secret."""
        assert "test-key-secret" not in repr(credential)
        assert "test-key-id" in repr(credential)
