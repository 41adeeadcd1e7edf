from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DAYS_IN_PAY_CYCLE


@dataclass(frozen=True)
class WorkingHours:
    """Giờ vào/ra theo lịch ("HH:MM", không kèm ngày)."""

    check_in: str
    check_out: str


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): nhân viên trong danh sách nhân sự.

    Lưu ý: Đây là đối tượng dữ liệu thuần, chỉ đọc đối với engine tính lương.
    """

    employee_id: str
    name: str
    monthly_salary: float
    monthly_working_hours: float
    working_hours: WorkingHours
    monthly_working_days: Optional[int] = None

    @property
    def days_in_pay_cycle(self) -> int:
        if self.monthly_working_days and self.monthly_working_days > 0:
            return int(self.monthly_working_days)
        return DAYS_IN_PAY_CYCLE

    @property
    def daily_wage(self) -> float:
        return self.monthly_salary / self.days_in_pay_cycle

