from __future__ import annotations

from typing import Optional

from ...core.constants import (
    DAYS_IN_PAY_CYCLE,
    FIXED_DELAY_TIERS,
    HALF_DAY_FROM_MINUTES,
    QUARTER_DAY_FROM_MINUTES,
)
from ...core.enums import DeductionType
from .base import NO_DEDUCTION, Deduction, DeductionStrategy


class TieredDeductionStrategy(DeductionStrategy):
    """Fixed penalty schedule: no excuse, pending or rejected excuse."""

    def deduct(
        self,
        *,
        delay_minutes: int,
        monthly_salary: float,
        monthly_working_hours: float,
        daily_wage: Optional[float],
    ) -> Deduction:
        daily_salary = daily_wage if daily_wage and daily_wage > 0 else monthly_salary / DAYS_IN_PAY_CYCLE

        if delay_minutes >= HALF_DAY_FROM_MINUTES:
            return Deduction(type=DeductionType.HALF_DAY, amount=daily_salary / 2)
        if delay_minutes >= QUARTER_DAY_FROM_MINUTES:
            return Deduction(type=DeductionType.QUARTER_DAY, amount=daily_salary / 4)
        for threshold, amount in FIXED_DELAY_TIERS:
            if delay_minutes >= threshold:
                return Deduction(type=DeductionType.FIXED, amount=float(amount))
        return NO_DEDUCTION
