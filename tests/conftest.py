from datetime import datetime, timezone
from urllib.parse import parse_qsl

import pytest

from vnpay_gateway.config import GatewayConfig, GatewayDefaults
from vnpay_gateway.constants import SECURE_HASH_FIELD, SECURE_HASH_TYPE_FIELD
from vnpay_gateway.services.canonical import to_query_string
from vnpay_gateway.services.signature_service import sign

SECRET = "TESTSECRETKEY0123456789"
TMN_CODE = "TESTTMN1"
RETURN_URL = "http://localhost:8888/order/vnpay_return"
FIXED_NOW = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def gateway_config():
    return GatewayConfig(
        tmn_code=TMN_CODE,
        secure_secret=SECRET,
        return_url=RETURN_URL,
    )


@pytest.fixture
def defaults():
    return GatewayDefaults()


@pytest.fixture
def payload():
    return {
        "vnp_Amount": 100000,
        "vnp_IpAddr": "192.168.0.1",
        "vnp_TxnRef": "12345678",
        "vnp_OrderInfo": "Thanh toan cho ma GD: 12345678",
    }


@pytest.fixture
def split_url():
    """Split a signed URL into (base, signed query, signature)."""
    def _split(url):
        base, query = url.split("?", 1)
        signed_query, signature = query.rsplit(f"&{SECURE_HASH_FIELD}=", 1)
        return base, signed_query, signature
    return _split


@pytest.fixture
def gateway_callback(split_url):
    """
    Simulate the query VNPay sends back for a payment URL.

    Decodes the URL fields, adds the gateway's result fields, and signs
    the result the way the gateway does.
    """
    def _callback(url, secret=SECRET, response_code="00", **extra):
        _, signed_query, _ = split_url(url)
        fields = dict(parse_qsl(signed_query, keep_blank_values=True))
        fields.update({
            "vnp_ResponseCode": response_code,
            "vnp_TransactionNo": "14226112",
            "vnp_TransactionStatus": response_code,
            "vnp_BankTranNo": "VNP14226112",
            "vnp_PayDate": "20240101071500",
        })
        fields.update(extra)
        fields[SECURE_HASH_FIELD] = sign(secret, to_query_string(fields))
        fields[SECURE_HASH_TYPE_FIELD] = "HmacSHA512"
        return fields
    return _callback
