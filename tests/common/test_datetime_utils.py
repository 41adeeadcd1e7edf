from datetime import date, time

import pytest

from src.attendance_payroll.attendance_payroll.common.datetime_utils import (
    delay_minutes,
    month_bounds,
    normalize_hhmm,
    parse_hhmm,
    parse_iso_date,
    parse_month,
)
from src.attendance_payroll.attendance_payroll.core.exceptions import InvalidTimeFormat, ValidationError


def test_parse_hhmm_accepts_optional_seconds():
    assert parse_hhmm("9:05") == time(9, 5)
    assert parse_hhmm("09:05:30") == time(9, 5, 30)


@pytest.mark.parametrize("value", ["", "9h05", "24:00", "12:60", "abc", None])
def test_parse_hhmm_rejects_garbage(value):
    with pytest.raises(InvalidTimeFormat):
        parse_hhmm(value)


def test_invalid_time_format_is_a_validation_error():
    assert issubclass(InvalidTimeFormat, ValidationError)


def test_normalize_hhmm_blank_is_none():
    assert normalize_hhmm(None) is None
    assert normalize_hhmm("  ") is None
    assert normalize_hhmm("7:30") == "07:30"


def test_delay_is_floored_and_never_negative():
    assert delay_minutes("09:40", "09:00") == 40
    assert delay_minutes("09:14:59", "09:00") == 14
    assert delay_minutes("08:50", "09:00") == 0
    assert delay_minutes(None, "09:00") == 0


def test_month_bounds_uses_real_last_day():
    assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds("2026-04") == (date(2026, 4, 1), date(2026, 4, 30))


@pytest.mark.parametrize("value", ["2026-13", "2026/03", "26-03", ""])
def test_parse_month_rejects_invalid(value):
    with pytest.raises(ValidationError):
        parse_month(value)


def test_parse_iso_date():
    assert parse_iso_date("2026-03-09") == date(2026, 3, 9)
    with pytest.raises(ValidationError):
        parse_iso_date("09/03/2026")
