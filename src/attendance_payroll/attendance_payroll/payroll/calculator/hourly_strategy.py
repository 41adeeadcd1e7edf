from __future__ import annotations

from typing import Optional

from ...core.enums import DeductionType
from .base import Deduction, DeductionStrategy, hourly_rate


class HourlyDeductionStrategy(DeductionStrategy):
    """Accepted excuse charged for exactly the time lost, at the hourly rate."""

    def deduct(
        self,
        *,
        delay_minutes: int,
        monthly_salary: float,
        monthly_working_hours: float,
        daily_wage: Optional[float],
    ) -> Deduction:
        rate = hourly_rate(monthly_salary, monthly_working_hours)
        return Deduction(type=DeductionType.HOURLY, amount=delay_minutes / 60 * rate)
