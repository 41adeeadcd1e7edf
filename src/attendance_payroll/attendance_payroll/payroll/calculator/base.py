from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import DeductionType


@dataclass(frozen=True)
class Deduction:
    type: DeductionType
    amount: float


NO_DEDUCTION = Deduction(type=DeductionType.NONE, amount=0.0)


def hourly_rate(monthly_salary: float, monthly_working_hours: float) -> float:
    """Salary per contracted hour; 0 when the roster has no working hours."""
    if not monthly_working_hours or monthly_working_hours <= 0:
        return 0.0
    return monthly_salary / monthly_working_hours


class DeductionStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's delay turns into a deduction."""

    @abstractmethod
    def deduct(
        self,
        *,
        delay_minutes: int,
        monthly_salary: float,
        monthly_working_hours: float,
        daily_wage: Optional[float],
    ) -> Deduction:
        raise NotImplementedError
