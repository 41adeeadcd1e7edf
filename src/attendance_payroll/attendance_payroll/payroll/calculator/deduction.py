from __future__ import annotations

from typing import Optional

from ...core.enums import ExcuseResolution, ExcuseStatus
from .base import Deduction
from .factory import DeductionStrategyFactory

_factory = DeductionStrategyFactory()


def compute_deduction(
    delay_minutes: int,
    excuse_status: ExcuseStatus,
    monthly_salary: float,
    monthly_working_hours: float,
    daily_wage: Optional[float] = None,
    resolution: Optional[ExcuseResolution] = None,
) -> Deduction:
    """Delay deduction for one day.

    Accepted excuses bypass the tier table: ``hourly`` (the default) charges
    ``delay/60 * monthly_salary/monthly_working_hours`` and ``no_deduct``
    charges nothing. Pending and rejected excuses use the tier table, whose
    quarter/half-day rows are based on ``daily_wage`` (``monthly_salary / 30``
    when not given).
    """

    strategy = _factory.for_excuse(excuse_status=excuse_status, resolution=resolution)
    return strategy.deduct(
        delay_minutes=max(int(delay_minutes or 0), 0),
        monthly_salary=float(monthly_salary),
        monthly_working_hours=float(monthly_working_hours or 0),
        daily_wage=daily_wage,
    )
