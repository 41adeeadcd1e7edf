from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_WORKING_DAYS_PER_MONTH
from ..core.enums import ExcusedAbsencePolicy


@dataclass(frozen=True)
class AttendanceSettings:
    """Process-wide attendance policy, snapshotted onto each record at computation time."""

    excused_absence_policy: ExcusedAbsencePolicy = ExcusedAbsencePolicy.NO_DEDUCT
    working_days_per_month: int = DEFAULT_WORKING_DAYS_PER_MONTH


DEFAULT_ATTENDANCE_SETTINGS = AttendanceSettings()
