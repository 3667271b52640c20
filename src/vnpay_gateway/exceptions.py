"""
VNPay Exception Hierarchy

Errors raised synchronously by build/verify before any signed output exists.
All error codes use the vnpay: prefix.

A checksum mismatch on the return path is NOT an error: it is reported
as a normal verification result with isSuccess=False.
"""
from typing import Optional, Dict, Any, List


class VNPayError(Exception):
    """
    Base exception for all VNPay integration errors.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.error_code = error_code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to API error response format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(VNPayError):
    """
    Gateway configuration is unusable.

    Examples:
    - Missing secure secret
    - Missing merchant code (vnp_TmnCode)
    - Missing payment gateway URL
    """

    def __init__(self, missing_field: str, message: str):
        self.missing_field = missing_field
        super().__init__(
            "vnpay:config:missing_field",
            message,
            {"missing_field": missing_field}
        )


class PayloadValidationError(VNPayError):
    """
    Merged payment parameters violate field constraints.

    details["errors"] lists every offending field, not just the first.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        fields = ", ".join(error["field"] for error in errors)
        super().__init__(
            "vnpay:payload:invalid",
            f"Invalid payment parameters: {fields}",
            {"errors": errors}
        )
