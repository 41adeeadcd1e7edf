from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MonthlySummary:
    """Bảng tổng hợp lương tháng của một nhân viên.

    Derived data: recomputed from records and advances, optionally frozen into
    an archive copy once the month is closed.
    """

    employee_id: str
    employee_name: str
    month: str
    base_salary: float
    total_deductions: float
    total_overtime: float
    final_salary: float
    total_advances: float
    net_salary_after_advances: float
    attendance_days: int
    absent_days: int
    excused_absent_days: int
    recorded_days: int
    total_delay_minutes: int
    pending_excuses: int
    accepted_excuses: int
    rejected_excuses: int
    generated_at: Optional[datetime] = None

    @property
    def archive_id(self) -> str:
        return summary_archive_id(self.employee_id, self.month)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["generated_at"] = self.generated_at.isoformat() if self.generated_at else None
        return data


def summary_archive_id(employee_id: str, month: str) -> str:
    return f"{employee_id}_{month}"
