"""
Pydantic models for VNPay payloads and results.
"""
from .payment import BuildPaymentUrl, PaymentUrlParams, VerifyReturnUrlResult

__all__ = [
    "BuildPaymentUrl",
    "PaymentUrlParams",
    "VerifyReturnUrlResult",
]
