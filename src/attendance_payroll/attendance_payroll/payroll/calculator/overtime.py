from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...common.datetime_utils import overtime_minutes
from ...core.constants import OVERTIME_RATE_MULTIPLIER
from ...employees.model import WorkingHours
from .base import hourly_rate


@dataclass(frozen=True)
class Overtime:
    hours: float
    amount: float


NO_OVERTIME = Overtime(hours=0.0, amount=0.0)


def compute_overtime(
    check_in: Optional[str],
    check_out: Optional[str],
    working_hours: WorkingHours,
    monthly_salary: float,
    monthly_working_hours: float,
) -> Overtime:
    """Time past the scheduled check-out, paid at double the hourly rate."""
    if not check_in or not check_out:
        return NO_OVERTIME

    minutes = overtime_minutes(check_out, working_hours.check_out)
    if minutes <= 0:
        return NO_OVERTIME

    hours = minutes / 60
    return Overtime(
        hours=round(hours, 2),
        amount=round(hours * hourly_rate(monthly_salary, monthly_working_hours) * OVERTIME_RATE_MULTIPLIER, 2),
    )
