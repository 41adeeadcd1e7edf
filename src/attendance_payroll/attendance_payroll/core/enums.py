from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công của một ngày, lưu trong CSDL."""

    PRESENT = "present"
    ABSENT = "absent"
    ABSENT_EXCUSED = "absent_excused"


class ExcuseStatus(str, Enum):
    """Trạng thái duyệt lý do (đi muộn / vắng mặt)."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @classmethod
    def _missing_(cls, value):
        # Older documents were written with "approved".
        if isinstance(value, str) and value.strip().lower() == "approved":
            return cls.ACCEPTED
        return None


class ExcuseResolution(str, Enum):
    """How an accepted excuse affects pay."""

    NO_DEDUCT = "no_deduct"
    HOURLY = "hourly"


class DeductionType(str, Enum):
    NONE = "none"
    FIXED = "fixed"
    HOURLY = "hourly"
    QUARTER_DAY = "quarter_day"
    HALF_DAY = "half_day"


class ExcusedAbsencePolicy(str, Enum):
    """Company policy for excused absences whose excuse was rejected."""

    DEDUCT = "deduct"
    NO_DEDUCT = "no_deduct"
