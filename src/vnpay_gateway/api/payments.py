"""
VNPay Payments API Endpoints

- POST /vnpay/url: build a signed payment URL for an order
- GET /vnpay/return: verify the query VNPay appends to the return URL
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import ipaddress
import logging
import uuid

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from ..client import VNPay
from ..config import settings
from ..enums import VnpLocale
from ..models.payment import BuildPaymentUrl
from ..utils.dates import format_vnp_date

logger = logging.getLogger(__name__)

router = APIRouter()

FALLBACK_CLIENT_IP = "127.0.0.1"


# ============================================================================
# Request Models
# ============================================================================

class CreatePaymentUrlRequest(BaseModel):
    """Order details for a new VNPay payment."""
    amount: int = Field(gt=0, description="Amount in VND")
    order_info: str = Field(min_length=1)
    txn_ref: Optional[str] = None  # Generated when omitted
    locale: Optional[VnpLocale] = None
    bank_code: Optional[str] = None
    order_type: Optional[str] = None
    return_url: Optional[str] = None
    expire_in_minutes: Optional[int] = Field(None, gt=0)


# ============================================================================
# Dependencies
# ============================================================================

def get_vnpay() -> VNPay:
    """Client built from environment settings."""
    return VNPay(settings.gateway_config())


def client_ip(request: Request) -> str:
    """First X-Forwarded-For hop, else the peer address, else loopback."""
    forwarded = request.headers.get("x-forwarded-for")
    candidates = [forwarded.split(",")[0].strip()] if forwarded else []
    if request.client:
        candidates.append(request.client.host)

    for candidate in candidates:
        try:
            ipaddress.ip_address(candidate)
            return candidate
        except ValueError:
            continue
    return FALLBACK_CLIENT_IP


# ============================================================================
# Endpoints
# ============================================================================

@router.post("/vnpay/url")
async def create_payment_url_endpoint(
    body: CreatePaymentUrlRequest,
    request: Request,
    vnpay: VNPay = Depends(get_vnpay)
) -> Dict[str, Any]:
    """
    Build a signed VNPay payment URL.

    Returns:
        {
            "txn_ref": str,
            "payment_url": str
        }

    Errors:
        400 with vnpay:config:* or vnpay:payload:* error codes
    """
    txn_ref = body.txn_ref or uuid.uuid4().hex[:16]

    expire_date = None
    if body.expire_in_minutes:
        expire_date = format_vnp_date(
            datetime.now(timezone.utc) + timedelta(minutes=body.expire_in_minutes)
        )

    payload = BuildPaymentUrl(
        vnp_Amount=body.amount,
        vnp_IpAddr=client_ip(request),
        vnp_TxnRef=txn_ref,
        vnp_OrderInfo=body.order_info,
        vnp_ReturnUrl=body.return_url,
        vnp_Locale=body.locale,
        vnp_BankCode=body.bank_code,
        vnp_OrderType=body.order_type,
        vnp_ExpireDate=expire_date,
    )

    logger.info(f"Creating VNPay payment URL for txn_ref={txn_ref}")
    payment_url = vnpay.build_payment_url(payload)

    return {
        "txn_ref": txn_ref,
        "payment_url": payment_url
    }


@router.get("/vnpay/return")
async def vnpay_return_endpoint(
    request: Request,
    vnpay: VNPay = Depends(get_vnpay)
) -> Dict[str, Any]:
    """
    Verify the VNPay return query.

    The status message follows the vnp_Locale the payment was made with.
    A bad checksum still returns 200 with isSuccess=false.
    """
    query = dict(request.query_params)
    result = vnpay.verify_return_url(query, locale=query.get("vnp_Locale"))

    logger.info(
        f"VNPay return for txn_ref={query.get('vnp_TxnRef')}: "
        f"success={result.is_success}"
    )
    return result.to_dict()
