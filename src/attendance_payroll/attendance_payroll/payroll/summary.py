"""Monthly payroll fold over attendance records and salary advances.

Two accruals exist. Records written before the daily wage was stored carry no
``daily_wage``; a month made only of such records is summarised the legacy way
(monthly salary minus deductions plus overtime). Any month with a stored daily
wage is summarised day by day as the sum of ``daily_net``. The legacy path is a
migration shim and is kept separate on purpose: the two accrue differently.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..advances.model import SalaryAdvance
from ..attendance.model import AttendanceRecord
from ..attendance.rules import base_impact
from ..core.enums import AttendanceStatus, ExcuseStatus
from ..employees.model import Employee
from .model import MonthlySummary


@dataclass
class _Tally:
    total_deductions: float = 0.0
    total_overtime: float = 0.0
    final_salary: float = 0.0
    attendance_days: int = 0
    absent_days: int = 0
    excused_absent_days: int = 0
    total_delay_minutes: int = 0
    pending_excuses: int = 0
    accepted_excuses: int = 0
    rejected_excuses: int = 0

    def count_excuse(self, status: ExcuseStatus) -> None:
        if status == ExcuseStatus.PENDING:
            self.pending_excuses += 1
        elif status == ExcuseStatus.ACCEPTED:
            self.accepted_excuses += 1
        elif status == ExcuseStatus.REJECTED:
            self.rejected_excuses += 1


def uses_legacy_accrual(records: Sequence[AttendanceRecord]) -> bool:
    return not any(r.daily_wage and r.daily_wage > 0 for r in records)


def _legacy_tally(employee: Employee, records: Iterable[AttendanceRecord]) -> _Tally:
    t = _Tally()
    for r in records:
        if r.check_in_time:
            t.attendance_days += 1
            t.total_deductions += r.deduction_amount
            t.total_overtime += r.overtime_amount
            t.total_delay_minutes += r.delay_minutes
            t.count_excuse(r.excuse_status)
        else:
            t.absent_days += 1

    t.final_salary = employee.monthly_salary - t.total_deductions + t.total_overtime
    return t


def _daily_tally(records: Iterable[AttendanceRecord]) -> _Tally:
    t = _Tally()
    for r in records:
        t.final_salary += r.daily_net or 0.0

        impact = base_impact(r.status, r.daily_wage, r.excused_absence_policy, r.excuse_status)
        t.total_deductions += r.deduction_amount + (-impact if impact < 0 else 0.0)
        t.total_overtime += r.overtime_amount
        t.total_delay_minutes += r.delay_minutes

        if r.status == AttendanceStatus.PRESENT:
            t.attendance_days += 1
        elif r.status == AttendanceStatus.ABSENT:
            t.absent_days += 1
        elif r.excuse_status == ExcuseStatus.ACCEPTED:
            t.excused_absent_days += 1
        elif r.excuse_status == ExcuseStatus.REJECTED:
            t.absent_days += 1

        if r.has_excuse:
            t.count_excuse(r.excuse_status)
    return t


def summarize(
    employee: Employee,
    month: str,
    records: Sequence[AttendanceRecord],
    advances: Iterable[SalaryAdvance],
) -> MonthlySummary:
    """Fold one employee's month; `records` must already be limited to that month."""
    own = [r for r in records if r.employee_id == employee.employee_id]
    t = _legacy_tally(employee, own) if uses_legacy_accrual(own) else _daily_tally(own)
    total_advances = sum(a.amount or 0 for a in advances)

    return MonthlySummary(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        month=month,
        base_salary=employee.monthly_salary,
        total_deductions=t.total_deductions,
        total_overtime=t.total_overtime,
        final_salary=t.final_salary,
        total_advances=total_advances,
        net_salary_after_advances=t.final_salary - total_advances,
        attendance_days=t.attendance_days,
        absent_days=t.absent_days,
        excused_absent_days=t.excused_absent_days,
        recorded_days=len(own),
        total_delay_minutes=t.total_delay_minutes,
        pending_excuses=t.pending_excuses,
        accepted_excuses=t.accepted_excuses,
        rejected_excuses=t.rejected_excuses,
    )
