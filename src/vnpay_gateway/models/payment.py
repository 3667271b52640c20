"""
Pydantic Models for VNPay Payment Requests and Callback Results

Field names are the VNPay wire names (vnp_*), so a model dump can be
canonicalized and signed directly.
"""
import ipaddress
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

from ..enums import VnpCurrCode, VnpLocale
from ..utils.dates import parse_vnp_date


def _check_vnp_date(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        parse_vnp_date(value)
    except ValueError:
        raise ValueError("must be a yyyyMMddHHmmss timestamp")
    return value


def _reject_bool_amount(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value


class BuildPaymentUrl(BaseModel):
    """
    Caller payload for a payment URL.

    vnp_Amount is in major units (VND); it is multiplied by 100 when the
    URL is built. vnp_CreateDate and vnp_TmnCode are always computed.
    Additional vnp_* fields (e.g. vnp_Bill_Mobile) are passed through.
    """

    vnp_Amount: int = Field(gt=0, description="Amount in VND (major units)")
    vnp_IpAddr: str = Field(min_length=1)
    vnp_TxnRef: str = Field(min_length=1, description="Merchant-unique transaction reference")
    vnp_OrderInfo: str = Field(min_length=1)
    vnp_ReturnUrl: Optional[str] = None
    vnp_Locale: Optional[VnpLocale] = None
    vnp_BankCode: Optional[str] = None
    vnp_OrderType: Optional[str] = None
    vnp_ExpireDate: Optional[str] = None

    model_config = {
        "extra": "allow",
        "use_enum_values": True,
        "coerce_numbers_to_str": True,
        "json_schema_extra": {
            "example": {
                "vnp_Amount": 100000,
                "vnp_IpAddr": "192.168.0.1",
                "vnp_TxnRef": "12345678",
                "vnp_OrderInfo": "Thanh toan cho ma GD: 12345678",
                "vnp_ReturnUrl": "http://localhost:8888/order/vnpay_return"
            }
        }
    }

    @field_validator("vnp_Amount", mode="before")
    @classmethod
    def amount_not_bool(cls, v: Any) -> Any:
        return _reject_bool_amount(v)


class PaymentUrlParams(BaseModel):
    """
    Fully merged parameter set, validated right before signing.

    Amount here is already scaled to hundredths.
    """

    vnp_Version: str = Field(min_length=1)
    vnp_Command: str = Field(min_length=1)
    vnp_TmnCode: str = Field(min_length=1)
    vnp_Amount: int = Field(gt=0)
    vnp_CurrCode: VnpCurrCode
    vnp_IpAddr: str
    vnp_Locale: VnpLocale
    vnp_OrderInfo: str = Field(min_length=1, max_length=255)
    vnp_OrderType: str = Field(min_length=1, max_length=100)
    vnp_ReturnUrl: str
    vnp_TxnRef: str = Field(min_length=1, max_length=100)
    vnp_CreateDate: str
    vnp_BankCode: Optional[str] = None
    vnp_ExpireDate: Optional[str] = None

    model_config = {
        "extra": "allow",
        "use_enum_values": True,
        "coerce_numbers_to_str": True
    }

    @field_validator("vnp_Amount", mode="before")
    @classmethod
    def amount_not_bool(cls, v: Any) -> Any:
        return _reject_bool_amount(v)

    @field_validator("vnp_IpAddr")
    @classmethod
    def ip_address_valid(cls, v: str) -> str:
        try:
            ipaddress.ip_address(v)
        except ValueError:
            raise ValueError("must be a valid IPv4 or IPv6 address")
        return v

    @field_validator("vnp_ReturnUrl")
    @classmethod
    def return_url_absolute(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return v

    @field_validator("vnp_CreateDate", "vnp_ExpireDate")
    @classmethod
    def vnp_date_format(cls, v: Optional[str]) -> Optional[str]:
        return _check_vnp_date(v)


class VerifyReturnUrlResult(BaseModel):
    """
    Outcome of verifying a callback query.

    Carries every callback field except vnp_SecureHash and
    vnp_SecureHashType as extra attributes.
    """

    is_success: bool = Field(alias="isSuccess")
    message: str

    model_config = {
        "extra": "allow",
        "populate_by_name": True
    }

    @property
    def callback_fields(self) -> Dict[str, Any]:
        """Callback fields only, without isSuccess/message."""
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
