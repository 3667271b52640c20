"""
VNPay client facade.

Bundles an immutable GatewayConfig with immutable request defaults.

Example:
    from vnpay_gateway import VNPay

    vnpay = VNPay.setup(
        tmn_code="TMNCODE",
        secure_secret="SECRET",
        return_url="http://localhost:8888/order/vnpay_return",
    )

    url = vnpay.build_payment_url({
        "vnp_Amount": 100000,
        "vnp_IpAddr": "192.168.0.1",
        "vnp_TxnRef": "12345678",
        "vnp_OrderInfo": "Thanh toan cho ma GD: 12345678",
    })

    result = vnpay.verify_return_url(request_query_params)
"""
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from .config import GatewayConfig, GatewayDefaults, validate_gateway_config
from .enums import VnpLocale
from .models.payment import BuildPaymentUrl, VerifyReturnUrlResult
from .services.payment_url_service import build_payment_url
from .services.return_service import verify_return_url
from .services.status_codes import get_message


class VNPay:
    """Stateless helper for building payment URLs and verifying returns."""

    def __init__(
        self,
        config: GatewayConfig,
        defaults: Optional[GatewayDefaults] = None
    ):
        self._config = config
        self._defaults = defaults or GatewayDefaults()

    @classmethod
    def setup(cls, **config: Any) -> "VNPay":
        """
        Create a client from config fields, validating them first.

        Raises:
            ConfigError: If secret, merchant code or gateway URL is missing
        """
        gateway_config = GatewayConfig(**config)
        validate_gateway_config(gateway_config)
        return cls(gateway_config)

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def defaults(self) -> GatewayDefaults:
        return self._defaults

    def with_defaults(self, **changes: Any) -> "VNPay":
        """Return a new client whose defaults have the given fields replaced."""
        return VNPay(self._config, self._defaults.with_overrides(**changes))

    def build_payment_url(
        self,
        payload: Union[BuildPaymentUrl, Mapping[str, Any]],
        now: Optional[datetime] = None
    ) -> str:
        return build_payment_url(self._config, self._defaults, payload, now=now)

    def verify_return_url(
        self,
        return_query: Mapping[str, Any],
        locale: Optional[Union[VnpLocale, str]] = None
    ) -> VerifyReturnUrlResult:
        """Verify a callback; the message uses the default locale unless one is given."""
        return verify_return_url(
            self._config,
            return_query,
            locale=locale or self._defaults.vnp_Locale
        )

    @staticmethod
    def get_response_by_status_code(
        response_code: str,
        locale: Union[VnpLocale, str] = VnpLocale.VN
    ) -> str:
        return get_message(response_code, locale)
