from datetime import date

import pytest

from siskamling.common.datetime_utils import day_of_week
from siskamling.common.formatting import format_long_date, format_rupiah
from siskamling.common.validators import parse_prelek_amount
from siskamling.core.enums import AttendanceStatus


@pytest.mark.parametrize(
    "text, expected",
    [
        ("75000", 75000),
        ("  2500 ", 2500),
        ("1500.5", 1500.5),
        ("", 0),
        (None, 0),
        ("lima ribu", 0),
        ("75.000,00", 0),
        ("-2000", 0),
        ("nan", 0),
        ("inf", 0),
    ],
)
def test_parse_prelek_amount(text, expected):
    assert parse_prelek_amount(text) == expected


def test_integral_amount_is_int():
    assert isinstance(parse_prelek_amount("75000.0"), int)


def test_day_of_week_sunday_is_zero():
    assert day_of_week(date(2025, 10, 19)) == 0
    assert day_of_week(date(2025, 10, 25)) == 6


def test_format_rupiah():
    assert format_rupiah(0) == "Rp 0"
    assert format_rupiah(1250000) == "Rp 1.250.000"


def test_format_long_date():
    assert format_long_date(date(2025, 10, 19)) == "Minggu, 19 Oktober 2025"


def test_status_parse_accepts_label_and_name():
    assert AttendanceStatus.parse("Sakit") == AttendanceStatus.SICK
    assert AttendanceStatus.parse("absent") == AttendanceStatus.ABSENT
    with pytest.raises(ValueError):
        AttendanceStatus.parse("Telat")
