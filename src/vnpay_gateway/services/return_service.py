"""
Return URL Verification Service

Checks the signed query VNPay appends to the return URL after payment.
The canonical form is rebuilt with the same rules as the payment URL, so a
query signed by the gateway verifies bit-for-bit.

A wrong checksum is a normal result (isSuccess=False), never an exception.
"""
from typing import Any, Mapping, Optional, Union
import logging

from ..config import GatewayConfig, validate_gateway_config
from ..constants import (
    RESPONSE_CODE_FIELD,
    SECURE_HASH_FIELD,
    SECURE_HASH_TYPE_FIELD,
    SUCCESS_RESPONSE_CODE,
    WRONG_CHECKSUM_MESSAGE,
)
from ..enums import VnpLocale
from ..models.payment import VerifyReturnUrlResult
from .canonical import to_query_string
from .signature_service import matches
from .status_codes import get_message

logger = logging.getLogger(__name__)


def verify_return_url(
    config: GatewayConfig,
    return_query: Mapping[str, Any],
    locale: Optional[Union[VnpLocale, str]] = VnpLocale.VN
) -> VerifyReturnUrlResult:
    """
    Verify a VNPay callback query.

    Args:
        config: Gateway credentials
        return_query: Every parameter received on the return URL,
            including vnp_SecureHash and vnp_SecureHashType
        locale: Language of the resolved status message

    Returns:
        VerifyReturnUrlResult with isSuccess, message and all callback
        fields except the two signature fields

    Raises:
        ConfigError: Secret, merchant code or gateway URL missing
    """
    validate_gateway_config(config)

    fields = dict(return_query)
    secure_hash = fields.pop(SECURE_HASH_FIELD, None)
    fields.pop(SECURE_HASH_TYPE_FIELD, None)

    response_code = fields.get(RESPONSE_CODE_FIELD)
    response_code = None if response_code is None else str(response_code)

    if matches(config.secure_secret, to_query_string(fields), secure_hash):
        is_success = response_code == SUCCESS_RESPONSE_CODE
        message = get_message(response_code, locale or VnpLocale.VN)
    else:
        logger.warning(
            f"Wrong checksum on VNPay return for txn_ref={fields.get('vnp_TxnRef')}"
        )
        is_success = False
        message = WRONG_CHECKSUM_MESSAGE

    return VerifyReturnUrlResult.model_validate({
        **fields,
        "isSuccess": is_success,
        "message": message,
    })
