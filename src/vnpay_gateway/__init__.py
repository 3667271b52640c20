"""
VNPay Gateway - signed payment URLs and return verification

Builds HMAC-SHA512 signed redirect URLs for the VNPay payment gateway and
verifies the signed query VNPay sends back after payment.

This package never performs network calls. It only constructs and checks
query strings.

Modules:
- config.py: GatewayConfig, GatewayDefaults, environment Settings
- services/canonical.py: canonical query serialization
- services/signature_service.py: HMAC-SHA512 sign/verify
- services/payment_url_service.py: payment URL builder
- services/return_service.py: return URL verifier
- services/status_codes.py: response code messages
- client.py: VNPay facade
- main.py: optional FastAPI demo service
"""
from .client import VNPay
from .config import GatewayConfig, GatewayDefaults
from .enums import VnpCurrCode, VnpLocale, VnpOrderType
from .exceptions import ConfigError, PayloadValidationError, VNPayError
from .models.payment import BuildPaymentUrl, VerifyReturnUrlResult

__version__ = "0.1.0"
__all__ = [
    "VNPay",
    "GatewayConfig",
    "GatewayDefaults",
    "VnpCurrCode",
    "VnpLocale",
    "VnpOrderType",
    "ConfigError",
    "PayloadValidationError",
    "VNPayError",
    "BuildPaymentUrl",
    "VerifyReturnUrlResult",
]
