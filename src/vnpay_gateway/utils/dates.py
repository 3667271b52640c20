"""
Timestamp helpers for VNPay date fields.

VNPay expects yyyyMMddHHmmss in Vietnam time (GMT+7). Formatting is a pure
function of the instant, independent of the host timezone.
"""
from datetime import datetime, timezone
from typing import Optional

from ..constants import VNP_DATE_FORMAT, VNP_TIMEZONE


def format_vnp_date(moment: Optional[datetime] = None) -> str:
    """
    Format an instant as a VNPay date string.

    Args:
        moment: Point in time to format. Naive datetimes are taken as UTC.
            Defaults to the current instant.

    Returns:
        14-digit string, e.g. "20240101070000" for 2024-01-01T00:00:00Z
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    return moment.astimezone(VNP_TIMEZONE).strftime(VNP_DATE_FORMAT)


def parse_vnp_date(value: str) -> datetime:
    """Parse a VNPay date string back into an aware datetime (GMT+7)."""
    return datetime.strptime(value, VNP_DATE_FORMAT).replace(tzinfo=VNP_TIMEZONE)
