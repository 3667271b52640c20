"""
VNPay signing services.

canonical -> signature_service -> payment_url_service / return_service
"""
from .canonical import canonicalize, to_query_string
from .payment_url_service import build_payment_url
from .return_service import verify_return_url
from .signature_service import matches, sign
from .status_codes import get_message

__all__ = [
    "canonicalize",
    "to_query_string",
    "build_payment_url",
    "verify_return_url",
    "matches",
    "sign",
    "get_message",
]
