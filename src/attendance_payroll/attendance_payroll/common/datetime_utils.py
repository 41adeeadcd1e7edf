from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import InvalidTimeFormat, ValidationError

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")
_MONTH = re.compile(r"^(\d{4})-(\d{2})$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Ngày không hợp lệ (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str) -> time:
    """Parse a wall-clock "HH:MM" (seconds optional) string."""
    m = _HHMM.match((value or "").strip()) if isinstance(value, str) else None
    if not m:
        raise InvalidTimeFormat(f"Giờ không hợp lệ (HH:MM): {value!r}")
    hours, minutes = int(m.group(1)), int(m.group(2))
    seconds = int(m.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise InvalidTimeFormat(f"Giờ không hợp lệ (HH:MM): {value!r}")
    return time(hours, minutes, seconds)


def normalize_hhmm(value: Optional[str]) -> Optional[str]:
    """Validate and return the canonical "HH:MM" form, or None for blank input."""
    if value is None or not str(value).strip():
        return None
    return parse_hhmm(value).strftime("%H:%M")


def _seconds_of_day(t: time) -> int:
    return t.hour * 3600 + t.minute * 60 + t.second


def delay_minutes(actual: Optional[str], scheduled: str) -> int:
    """Whole minutes `actual` is later than `scheduled`; 0 when early or missing."""
    if not actual:
        return 0
    diff = _seconds_of_day(parse_hhmm(actual)) - _seconds_of_day(parse_hhmm(scheduled))
    return diff // 60 if diff > 0 else 0


def overtime_minutes(actual_out: Optional[str], scheduled_out: str) -> int:
    """Minutes worked past the scheduled check-out, floored at 0."""
    return delay_minutes(actual_out, scheduled_out)


def parse_month(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM payroll month into (year, month)."""
    m = _MONTH.match((value or "").strip()) if isinstance(value, str) else None
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise ValidationError(f"Tháng không hợp lệ (YYYY-MM): {value!r}")
    return int(m.group(1)), int(m.group(2))


def month_bounds(value: str) -> tuple[date, date]:
    """First and last calendar day of a YYYY-MM month."""
    year, month = parse_month(value)
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def month_of(day: date) -> str:
    return day.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
