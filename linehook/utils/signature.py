"""Webhook request signature verification."""
import base64
import binascii
import hashlib
import hmac
import logging

logger = logging.getLogger(__name__)


class SignatureVerifier:
    """Verifies the HMAC-SHA256 signature the platform attaches to a callback."""

    def __init__(self, channel_secret: str):
        """
        Initialize the verifier.

        Args:
            channel_secret: Shared secret the platform signs bodies with
        """
        self._key = channel_secret.encode("utf-8")

    @staticmethod
    def sign(body: bytes, channel_secret: str) -> str:
        """
        Compute the base64 signature token for a body.

        Args:
            body: Raw request body
            channel_secret: Shared secret

        Returns:
            Base64-encoded HMAC-SHA256 digest
        """
        digest = hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256).digest()
        return base64.b64encode(digest).decode("ascii")

    def verify(self, body: bytes, signature: str) -> bool:
        """
        Check a signature token against the body.

        Args:
            body: Raw request body, exactly as received
            signature: Base64 signature token from the request header

        Returns:
            True if the token matches, False on mismatch or malformed token
        """
        try:
            decoded = base64.b64decode(signature or "", validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Base64 decode error: {e}")
            return False

        # Non-canonical tokens (stray padding bits) decode to the same digest
        if base64.b64encode(decoded).decode("ascii") != signature:
            logger.warning("Signature is not canonical base64")
            return False

        expected = hmac.new(self._key, body, hashlib.sha256).digest()
        return hmac.compare_digest(decoded, expected)


def verify_signature(body: bytes, signature: str, channel_secret: str) -> bool:
    """Verify a callback body against its signature token in one call."""
    return SignatureVerifier(channel_secret).verify(body, signature)
