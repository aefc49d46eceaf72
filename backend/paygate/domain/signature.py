"""Webhook signature verification.

The gateway signs every webhook with HMAC-SHA512 over the raw request body,
keyed by the account's secret key, and sends the hex digest in a header.
"""

import hashlib
import hmac


def compute_signature(raw_payload: bytes, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA512 digest of raw_payload."""
    return hmac.new(secret.encode("utf-8"), raw_payload, hashlib.sha512).hexdigest()


def verify_signature(raw_payload: bytes, supplied_signature: str | None, secret: str) -> bool:
    """Check a header-supplied signature against the raw payload.

    Returns False when the signature is missing or empty, when the secret is
    empty, or when the digests differ. Comparison is constant-time.
    """
    if not supplied_signature or not secret:
        return False

    expected = compute_signature(raw_payload, secret)
    return hmac.compare_digest(expected.encode("ascii"), supplied_signature.encode("utf-8"))
