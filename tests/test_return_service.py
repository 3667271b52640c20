import hashlib
import hmac

import pytest

from vnpay_gateway.config import GatewayConfig
from vnpay_gateway.exceptions import ConfigError
from vnpay_gateway.services.payment_url_service import build_payment_url
from vnpay_gateway.services.return_service import verify_return_url

from conftest import SECRET, TMN_CODE


@pytest.fixture
def payment_url(gateway_config, defaults, payload):
    return build_payment_url(gateway_config, defaults, payload)


def test_signed_success_callback(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url)

    result = verify_return_url(gateway_config, query)

    assert result.is_success is True
    assert result.message == "Giao dịch thành công"


def test_result_carries_fields_without_signature(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url)

    data = verify_return_url(gateway_config, query).to_dict()

    assert data["isSuccess"] is True
    assert "vnp_SecureHash" not in data
    assert "vnp_SecureHashType" not in data
    assert data["vnp_TxnRef"] == "12345678"
    assert data["vnp_Amount"] == "10000000"
    expected = {k: v for k, v in query.items() if k not in ("vnp_SecureHash", "vnp_SecureHashType")}
    assert verify_return_url(gateway_config, query).callback_fields == expected


def test_failed_response_code(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url, response_code="24")

    result = verify_return_url(gateway_config, query, locale="en")

    assert result.is_success is False
    assert result.message == "Transaction canceled"


def test_unknown_response_code_uses_default_message(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url, response_code="99")

    result = verify_return_url(gateway_config, query, locale="en")

    assert result.is_success is False
    assert result.message == "Failure"


@pytest.mark.parametrize("field", ["vnp_Amount", "vnp_TxnRef", "vnp_ResponseCode", "vnp_OrderInfo"])
def test_tampered_field_fails_checksum(gateway_config, payment_url, gateway_callback, field):
    query = gateway_callback(payment_url)
    query[field] = query[field] + "1"

    result = verify_return_url(gateway_config, query)

    assert result.is_success is False
    assert result.message == "Wrong checksum"


def test_wrong_secret_fails_checksum(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url, secret="another-secret")

    result = verify_return_url(gateway_config, query)

    assert result.is_success is False
    assert result.message == "Wrong checksum"


def test_missing_signature_fails_checksum(gateway_config, payment_url, gateway_callback):
    query = gateway_callback(payment_url)
    del query["vnp_SecureHash"]

    result = verify_return_url(gateway_config, query)

    assert result.is_success is False
    assert result.message == "Wrong checksum"


@pytest.mark.parametrize("empty", ["", 0, False, None])
def test_empty_fields_do_not_change_signature(gateway_config, payment_url, gateway_callback, empty):
    query = gateway_callback(payment_url)
    query["vnp_CardType"] = empty

    assert verify_return_url(gateway_config, query).is_success is True


def test_hand_built_gateway_query(gateway_config):
    canonical = (
        "vnp_Amount=1000000&vnp_BankCode=NCB&vnp_OrderInfo=Thanh+toan+don+hang%3A+abc"
        "&vnp_ResponseCode=00&vnp_TmnCode=TESTTMN1&vnp_TxnRef=abc"
    )
    query = {
        "vnp_TxnRef": "abc",
        "vnp_Amount": "1000000",
        "vnp_OrderInfo": "Thanh toan don hang: abc",
        "vnp_BankCode": "NCB",
        "vnp_ResponseCode": "00",
        "vnp_TmnCode": TMN_CODE,
        "vnp_SecureHashType": "HmacSHA512",
        "vnp_SecureHash": hmac.new(
            SECRET.encode(), canonical.encode(), hashlib.sha512
        ).hexdigest(),
    }

    result = verify_return_url(gateway_config, query, locale="en")

    assert result.is_success is True
    assert result.message == "Approved"


def test_missing_merchant_code_raises(gateway_callback, payment_url):
    config = GatewayConfig(secure_secret=SECRET)

    with pytest.raises(ConfigError) as exc_info:
        verify_return_url(config, gateway_callback(payment_url))

    assert exc_info.value.missing_field == "tmn_code"
