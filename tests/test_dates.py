import re
from datetime import datetime, timedelta, timezone

from vnpay_gateway.utils.dates import format_vnp_date, parse_vnp_date


def test_formats_in_gmt7():
    moment = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)

    assert format_vnp_date(moment) == "20240101070000"


def test_naive_datetime_is_utc():
    assert format_vnp_date(datetime(2024, 1, 1, 20, 30, 15)) == "20240102033015"


def test_other_offsets_are_converted():
    moment = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=-5)))

    assert format_vnp_date(moment) == "20240102000000"


def test_defaults_to_now():
    assert re.fullmatch(r"\d{14}", format_vnp_date())


def test_parse_returns_same_instant():
    moment = datetime(2024, 6, 30, 23, 59, 59, tzinfo=timezone.utc)

    assert parse_vnp_date(format_vnp_date(moment)) == moment
