import pytest
from pydantic import ValidationError

from vnpay_gateway.config import (
    GatewayConfig,
    GatewayDefaults,
    Settings,
    validate_gateway_config,
)
from vnpay_gateway.constants import PAYMENT_GATEWAY_SANDBOX
from vnpay_gateway.exceptions import ConfigError


def test_valid_config_passes(gateway_config):
    validate_gateway_config(gateway_config)


def test_missing_secret_reported_first():
    with pytest.raises(ConfigError) as exc_info:
        validate_gateway_config(GatewayConfig(payment_gateway=None))

    assert exc_info.value.missing_field == "secure_secret"
    assert exc_info.value.message == "Missing secure secret"
    assert exc_info.value.to_dict()["error_code"] == "vnpay:config:missing_field"


def test_missing_merchant_code():
    with pytest.raises(ConfigError) as exc_info:
        validate_gateway_config(GatewayConfig(secure_secret="s", tmn_code=""))

    assert exc_info.value.missing_field == "tmn_code"


def test_missing_payment_gateway():
    config = GatewayConfig(secure_secret="s", tmn_code="T", payment_gateway="")

    with pytest.raises(ConfigError) as exc_info:
        validate_gateway_config(config)

    assert exc_info.value.missing_field == "payment_gateway"


def test_gateway_defaults_to_sandbox():
    assert GatewayConfig().payment_gateway == PAYMENT_GATEWAY_SANDBOX


def test_config_is_frozen(gateway_config):
    with pytest.raises(ValidationError):
        gateway_config.secure_secret = "changed"


def test_repr_hides_secret(gateway_config):
    assert gateway_config.secure_secret not in repr(gateway_config)
    assert gateway_config.secure_secret not in str(gateway_config)


def test_defaults_values(defaults):
    assert defaults.as_params() == {
        "vnp_Version": "2.1.0",
        "vnp_Command": "pay",
        "vnp_CurrCode": "VND",
        "vnp_Locale": "vn",
        "vnp_OrderType": "other",
    }


def test_with_overrides_returns_new_value(defaults):
    updated = defaults.with_overrides(vnp_Locale="en", vnp_OrderType="billpayment", vnp_Command=None)

    assert updated.vnp_Locale == "en"
    assert updated.vnp_OrderType == "billpayment"
    assert updated.vnp_Command == "pay"
    assert defaults.vnp_Locale == "vn"
    assert defaults.vnp_OrderType == "other"


def test_with_overrides_rejects_unknown_fields(defaults):
    with pytest.raises(ValidationError):
        defaults.with_overrides(vnp_Unknown="x")


def test_with_overrides_rejects_bad_locale(defaults):
    with pytest.raises(ValidationError):
        defaults.with_overrides(vnp_Locale="fr")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("VNPAY_TMN_CODE", "ENVTMN01")
    monkeypatch.setenv("VNPAY_SECURE_SECRET", "envsecret")
    monkeypatch.setenv("VNPAY_RETURN_URL", "https://shop.example/return")

    config = Settings().gateway_config()

    assert config.tmn_code == "ENVTMN01"
    assert config.secure_secret == "envsecret"
    assert config.return_url == "https://shop.example/return"
    assert config.payment_gateway == PAYMENT_GATEWAY_SANDBOX
