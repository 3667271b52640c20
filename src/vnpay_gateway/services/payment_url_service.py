"""
Payment URL Service

Builds the signed redirect URL that sends a customer to the VNPay gateway.

Pipeline (strictly sequential, nothing is returned before validation):
1. Check gateway config
2. Merge defaults <- payload <- computed fields
3. Validate the merged set
4. Canonicalize, sign, append vnp_SecureHash
"""
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

from pydantic import BaseModel, ValidationError

from ..config import GatewayConfig, GatewayDefaults, validate_gateway_config
from ..constants import AMOUNT_MULTIPLIER, SECURE_HASH_FIELD, SECURE_HASH_TYPE_FIELD
from ..exceptions import PayloadValidationError
from ..models.payment import BuildPaymentUrl, PaymentUrlParams
from ..utils.dates import format_vnp_date
from .canonical import is_empty, to_query_string
from .signature_service import sign

logger = logging.getLogger(__name__)


def scale_amount(amount: Any) -> Any:
    """
    Convert a major-unit amount to the transmitted integer (x100).

    Non-numeric input is returned untouched so validation reports it.
    Fractional results stay Decimal and fail integer validation.
    """
    if amount is None or isinstance(amount, bool):
        return amount
    if not isinstance(amount, (int, float, Decimal, str)):
        return amount

    try:
        scaled = Decimal(str(amount).strip()) * AMOUNT_MULTIPLIER
    except InvalidOperation:
        return amount

    if not scaled.is_finite():
        return amount
    if scaled == scaled.to_integral_value():
        return int(scaled)
    return scaled


def validation_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]) or "__root__",
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def _payload_dict(payload: Union[BuildPaymentUrl, Mapping[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, BaseModel):
        data = payload.model_dump(exclude_none=True)
    else:
        data = {key: value for key, value in payload.items() if value is not None}

    # A caller can never pre-fill the signature
    data.pop(SECURE_HASH_FIELD, None)
    data.pop(SECURE_HASH_TYPE_FIELD, None)
    return data


def build_payment_url(
    config: GatewayConfig,
    defaults: GatewayDefaults,
    payload: Union[BuildPaymentUrl, Mapping[str, Any]],
    now: Optional[datetime] = None
) -> str:
    """
    Build a signed VNPay payment URL.

    Args:
        config: Gateway credentials and base URL
        defaults: Version, command, currency, locale and order type defaults
        payload: Caller fields (wire names). vnp_Amount in major units.
        now: Instant used for vnp_CreateDate, defaults to the current time

    Returns:
        "<payment_gateway>?<canonical query>&vnp_SecureHash=<hex digest>"

    Raises:
        ConfigError: Secret, merchant code or gateway URL missing
        PayloadValidationError: Merged fields violate constraints (lists all)
    """
    validate_gateway_config(config)

    payload_data = _payload_dict(payload)
    if not payload_data.get("vnp_ReturnUrl"):
        payload_data["vnp_ReturnUrl"] = config.return_url

    # Payload wins over defaults
    data = {**defaults.as_params(), **payload_data}

    data["vnp_CreateDate"] = format_vnp_date(now)
    data["vnp_Amount"] = scale_amount(data.get("vnp_Amount"))
    data["vnp_TmnCode"] = config.tmn_code

    # Same empty-value rule as the canonical query, applied before coercion
    data = {key: value for key, value in data.items() if not is_empty(value)}

    try:
        params = PaymentUrlParams.model_validate(data)
    except ValidationError as e:
        errors = validation_errors(e)
        logger.warning(
            f"Rejected payment payload for txn_ref={data.get('vnp_TxnRef')}: "
            f"{[error['field'] for error in errors]}"
        )
        raise PayloadValidationError(errors) from e

    query = to_query_string(params.model_dump())
    signature = sign(config.secure_secret, query)

    logger.info(
        f"Built VNPay payment URL for txn_ref={params.vnp_TxnRef} "
        f"amount={params.vnp_Amount}"
    )
    return f"{config.payment_gateway}?{query}&{SECURE_HASH_FIELD}={signature}"
