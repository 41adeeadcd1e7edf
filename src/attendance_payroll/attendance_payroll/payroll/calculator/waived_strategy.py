from __future__ import annotations

from typing import Optional

from .base import NO_DEDUCTION, Deduction, DeductionStrategy


class WaivedDeductionStrategy(DeductionStrategy):
    """Accepted excuse with a no-deduct resolution."""

    def deduct(
        self,
        *,
        delay_minutes: int,
        monthly_salary: float,
        monthly_working_hours: float,
        daily_wage: Optional[float],
    ) -> Deduction:
        return NO_DEDUCTION
