"""Pure excuse adjudication.

A decision recomputes the stored money fields from what the record already
holds (delay minutes, wage and policy snapshots, overtime), so deciding days
later gives the same numbers as knowing the decision at record time.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.rules import applies_delay_deduction, daily_net
from ..common.validators import optional_text
from ..core.enums import ExcuseResolution, ExcuseStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..payroll.calculator.base import NO_DEDUCTION, Deduction
from ..payroll.calculator.deduction import compute_deduction


class _Unset:
    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

DECISION_STATUSES = frozenset({ExcuseStatus.ACCEPTED, ExcuseStatus.REJECTED})


def resolve_resolution(
    status: ExcuseStatus,
    requested: Optional[ExcuseResolution],
    current: Optional[ExcuseResolution],
) -> Optional[ExcuseResolution]:
    if status != ExcuseStatus.ACCEPTED:
        return None
    return requested or current or ExcuseResolution.HOURLY


def adjudicate(
    record: AttendanceRecord,
    employee: Employee,
    status: ExcuseStatus,
    *,
    note: Optional[str] | _Unset = UNSET,
    resolution: Optional[ExcuseResolution] = None,
    now: datetime,
) -> AttendanceRecord:
    if status not in DECISION_STATUSES:
        raise ValidationError("Chỉ có thể chấp nhận hoặc từ chối lý do")

    next_resolution = resolve_resolution(status, resolution, record.excuse_resolution)
    wage = record.daily_wage if record.daily_wage > 0 else employee.daily_wage

    deduction: Deduction = NO_DEDUCTION
    if applies_delay_deduction(record.status, status, next_resolution, record.delay_minutes):
        deduction = compute_deduction(
            record.delay_minutes,
            status,
            employee.monthly_salary,
            employee.monthly_working_hours,
            wage,
            next_resolution,
        )

    return replace(
        record,
        excuse_status=status,
        excuse_resolution=next_resolution,
        excuse_note=record.excuse_note if isinstance(note, _Unset) else optional_text(note),
        deduction_type=deduction.type,
        deduction_amount=deduction.amount,
        daily_wage=wage,
        daily_net=daily_net(
            record.status,
            wage,
            record.excused_absence_policy,
            status,
            deduction.amount,
            record.overtime_amount,
        ),
        updated_at=now,
    )
