from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import (
    AttendanceStatus,
    DeductionType,
    ExcusedAbsencePolicy,
    ExcuseResolution,
    ExcuseStatus,
)


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày.

    Money fields are computed once and stored; ``daily_wage`` and
    ``excused_absence_policy`` are snapshots taken at computation time.
    """

    record_id: str
    employee_id: str
    employee_name: str
    work_date: date
    check_in_time: Optional[str]
    check_out_time: Optional[str]
    status: AttendanceStatus
    delay_minutes: int
    has_excuse: bool
    excuse_text: Optional[str]
    excuse_status: ExcuseStatus
    excuse_resolution: Optional[ExcuseResolution]
    deduction_type: DeductionType
    deduction_amount: float
    overtime_hours: float
    overtime_amount: float
    daily_wage: float
    daily_net: float
    excused_absence_policy: ExcusedAbsencePolicy
    excuse_note: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendanceEntry:
    """Raw inputs for one day, as entered by an administrator."""

    work_date: date
    status: Optional[AttendanceStatus] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    excuse_text: Optional[str] = None
    notes: Optional[str] = None
