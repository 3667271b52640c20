"""
Signature Service for VNPay Requests and Callbacks

HMAC-SHA512 over the canonical query string, hex encoded (128 chars).
"""
import hmac
import hashlib
from typing import Optional

CRYPTO_ALGORITHM = hashlib.sha512
CRYPTO_ENCODING = "utf-8"


def sign(secret: str, canonical_query: str) -> str:
    """
    Sign a canonical query string.

    Args:
        secret: Merchant secure secret (vnp_HashSecret)
        canonical_query: Output of canonical.to_query_string()

    Returns:
        Lowercase hex HMAC-SHA512 digest
    """
    return hmac.new(
        secret.encode(CRYPTO_ENCODING),
        canonical_query.encode(CRYPTO_ENCODING),
        CRYPTO_ALGORITHM
    ).hexdigest()


def matches(secret: str, canonical_query: str, provided_digest: Optional[str]) -> bool:
    """
    Verify a digest received from the gateway.

    Uses constant-time comparison. A missing digest never matches.
    """
    if not provided_digest:
        return False

    expected = sign(secret, canonical_query)
    return hmac.compare_digest(
        expected.encode(CRYPTO_ENCODING),
        str(provided_digest).encode(CRYPTO_ENCODING)
    )
