"""
VNPay Configuration Module

Environment-backed settings plus the immutable gateway configuration and
request defaults handed to the URL builder and the return verifier.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from .constants import (
    CURR_CODE_VND,
    PAYMENT_GATEWAY_SANDBOX,
    VNP_DEFAULT_COMMAND,
    VNP_VERSION,
)
from .enums import VnpLocale, VnpOrderType
from .exceptions import ConfigError


class GatewayConfig(BaseModel):
    """
    Merchant credentials and gateway location.

    Frozen after construction, so one instance can be shared by any number
    of concurrent build/verify calls. Empty values are accepted here and
    rejected by validate_gateway_config() at use time.
    """

    tmn_code: Optional[str] = None
    secure_secret: Optional[str] = None
    payment_gateway: Optional[str] = PAYMENT_GATEWAY_SANDBOX
    return_url: Optional[str] = None

    model_config = {
        "frozen": True,
        "extra": "forbid"
    }

    def __repr__(self) -> str:
        # Keep the secret out of logs and tracebacks
        return (
            f"GatewayConfig(tmn_code={self.tmn_code!r}, "
            f"payment_gateway={self.payment_gateway!r}, "
            f"return_url={self.return_url!r})"
        )

    __str__ = __repr__


class GatewayDefaults(BaseModel):
    """
    Default request fields merged under every payment payload.

    Field names are the wire names. Use with_overrides() to derive a new
    value; instances are never mutated.
    """

    vnp_Version: str = VNP_VERSION
    vnp_Command: str = VNP_DEFAULT_COMMAND
    vnp_CurrCode: str = CURR_CODE_VND
    vnp_Locale: VnpLocale = VnpLocale.VN
    vnp_OrderType: str = VnpOrderType.OTHER.value

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "use_enum_values": True,
        "validate_default": True
    }

    def with_overrides(self, **changes: Any) -> "GatewayDefaults":
        """Return a validated copy with the given fields replaced. None values are ignored."""
        updates = {key: value for key, value in changes.items() if value is not None}
        return GatewayDefaults.model_validate({**self.model_dump(), **updates})

    def as_params(self) -> dict:
        return self.model_dump()


def validate_gateway_config(config: GatewayConfig) -> None:
    """
    Ensure the config can be used for signing.

    Raises:
        ConfigError: for the first missing field, checked in order
            secure secret, merchant code, payment gateway.
    """
    if not config.secure_secret:
        raise ConfigError("secure_secret", "Missing secure secret")
    if not config.tmn_code:
        raise ConfigError("tmn_code", "Missing merchant code")
    if not config.payment_gateway:
        raise ConfigError("payment_gateway", "Missing payment gateway")


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field maps to a VNPAY_-prefixed variable, e.g. VNPAY_TMN_CODE,
    VNPAY_SECURE_SECRET, VNPAY_PAYMENT_GATEWAY, VNPAY_RETURN_URL.
    An unset secret surfaces as ConfigError on first use.
    """

    # Merchant credentials
    tmn_code: str = ""
    secure_secret: str = ""

    # Gateway
    payment_gateway: str = PAYMENT_GATEWAY_SANDBOX
    return_url: Optional[str] = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_prefix = "VNPAY_"
        env_file = ".env"
        case_sensitive = False

    def gateway_config(self) -> GatewayConfig:
        return GatewayConfig(
            tmn_code=self.tmn_code,
            secure_secret=self.secure_secret,
            payment_gateway=self.payment_gateway,
            return_url=self.return_url,
        )


# Global settings instance
settings = Settings()
