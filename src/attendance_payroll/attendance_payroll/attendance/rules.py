"""Pure rules for the daily attendance record.

Everything here is free of I/O: the service loads the employee, the previous
record and the settings, then calls :func:`build_record` and stores the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import delay_minutes, normalize_hhmm, parse_hhmm
from ..common.validators import optional_text
from ..core.enums import (
    AttendanceStatus,
    ExcusedAbsencePolicy,
    ExcuseResolution,
    ExcuseStatus,
)
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..payroll.calculator.base import NO_DEDUCTION, Deduction
from ..payroll.calculator.deduction import compute_deduction
from ..payroll.calculator.overtime import NO_OVERTIME, compute_overtime
from ..settings.model import AttendanceSettings
from .model import AttendanceEntry, AttendanceRecord


@dataclass(frozen=True)
class ExcuseState:
    status: ExcuseStatus
    resolution: Optional[ExcuseResolution]
    note: Optional[str]


def base_impact(
    status: AttendanceStatus,
    daily_wage: float,
    policy: ExcusedAbsencePolicy,
    excuse_status: ExcuseStatus,
) -> float:
    """Salary effect of the day before deductions and overtime."""
    if status == AttendanceStatus.PRESENT:
        return daily_wage
    if status == AttendanceStatus.ABSENT:
        return -daily_wage
    # absent_excused: nothing is charged until the excuse is rejected
    if excuse_status == ExcuseStatus.REJECTED and policy == ExcusedAbsencePolicy.DEDUCT:
        return -daily_wage
    return 0.0


def daily_net(
    status: AttendanceStatus,
    daily_wage: float,
    policy: ExcusedAbsencePolicy,
    excuse_status: ExcuseStatus,
    deduction_amount: float,
    overtime_amount: float,
) -> float:
    return base_impact(status, daily_wage, policy, excuse_status) - deduction_amount + overtime_amount


def applies_delay_deduction(
    status: AttendanceStatus,
    excuse_status: ExcuseStatus,
    resolution: Optional[ExcuseResolution],
    delay: int,
) -> bool:
    if status == AttendanceStatus.PRESENT:
        return True
    return (
        status == AttendanceStatus.ABSENT_EXCUSED
        and excuse_status == ExcuseStatus.ACCEPTED
        and resolution == ExcuseResolution.HOURLY
        and delay > 0
    )


def resolve_excuse_state(
    *,
    status: AttendanceStatus,
    has_excuse: bool,
    previous: Optional[AttendanceRecord],
) -> ExcuseState:
    """Excuse status for an upsert.

    A new excuse always starts pending; an unchanged excuse keeps its
    adjudication so re-saving times does not discard a decision.
    """
    if previous is None:
        return ExcuseState(
            status=ExcuseStatus.PENDING if has_excuse else ExcuseStatus.REJECTED,
            resolution=None,
            note=None,
        )

    if not has_excuse:
        return ExcuseState(status=ExcuseStatus.REJECTED, resolution=None, note=previous.excuse_note)

    newly_excused = status == AttendanceStatus.ABSENT_EXCUSED and previous.status != AttendanceStatus.ABSENT_EXCUSED
    if not previous.has_excuse or newly_excused:
        return ExcuseState(status=ExcuseStatus.PENDING, resolution=None, note=previous.excuse_note)

    resolution = previous.excuse_resolution if previous.excuse_status == ExcuseStatus.ACCEPTED else None
    return ExcuseState(status=previous.excuse_status, resolution=resolution, note=previous.excuse_note)


def build_record(
    employee: Employee,
    entry: AttendanceEntry,
    previous: Optional[AttendanceRecord],
    settings: AttendanceSettings,
    *,
    record_id: str,
    now: datetime,
) -> AttendanceRecord:
    """Upsert as a pure function: raw inputs + previous record -> replacement record."""
    check_in = normalize_hhmm(entry.check_in)
    check_out = normalize_hhmm(entry.check_out)

    status = entry.status or (AttendanceStatus.PRESENT if check_in else AttendanceStatus.ABSENT)
    if status != AttendanceStatus.PRESENT:
        check_in = check_out = None

    if check_in and check_out and parse_hhmm(check_out) < parse_hhmm(check_in):
        raise ValidationError("Giờ ra không thể nhỏ hơn giờ vào")

    delay = delay_minutes(check_in, employee.working_hours.check_in) if status == AttendanceStatus.PRESENT else 0

    excuse_text = optional_text(entry.excuse_text)
    has_excuse = status == AttendanceStatus.ABSENT_EXCUSED or bool(excuse_text)
    excuse = resolve_excuse_state(status=status, has_excuse=has_excuse, previous=previous)

    wage = employee.daily_wage
    policy = settings.excused_absence_policy

    deduction: Deduction = NO_DEDUCTION
    if applies_delay_deduction(status, excuse.status, excuse.resolution, delay):
        deduction = compute_deduction(
            delay,
            excuse.status,
            employee.monthly_salary,
            employee.monthly_working_hours,
            wage,
            excuse.resolution,
        )

    overtime = NO_OVERTIME
    if status == AttendanceStatus.PRESENT:
        overtime = compute_overtime(
            check_in,
            check_out,
            employee.working_hours,
            employee.monthly_salary,
            employee.monthly_working_hours,
        )

    return AttendanceRecord(
        record_id=previous.record_id if previous else record_id,
        employee_id=employee.employee_id,
        employee_name=employee.name,
        work_date=entry.work_date,
        check_in_time=check_in,
        check_out_time=check_out,
        status=status,
        delay_minutes=delay,
        has_excuse=has_excuse,
        excuse_text=excuse_text,
        excuse_status=excuse.status,
        excuse_resolution=excuse.resolution,
        excuse_note=excuse.note,
        deduction_type=deduction.type,
        deduction_amount=deduction.amount,
        overtime_hours=overtime.hours,
        overtime_amount=overtime.amount,
        daily_wage=wage,
        daily_net=daily_net(status, wage, policy, excuse.status, deduction.amount, overtime.amount),
        excused_absence_policy=policy,
        notes=optional_text(entry.notes),
        created_at=previous.created_at if previous and previous.created_at else now,
        updated_at=now,
    )
