from enum import Enum


class VnpLocale(str, Enum):
    """Display language of the gateway page and of status messages."""
    VN = "vn"
    EN = "en"


class VnpCurrCode(str, Enum):
    VND = "VND"


class VnpOrderType(str, Enum):
    """
    Common order categories accepted by VNPay.

    The gateway also accepts merchant-specific categories, so order type
    fields are plain strings and these values are only conveniences.
    """
    TOPUP = "topup"
    BILL_PAYMENT = "billpayment"
    FASHION = "fashion"
    OTHER = "other"
