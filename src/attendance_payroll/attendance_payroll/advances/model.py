from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SalaryAdvance:
    """Khoản tạm ứng lương, trừ vào lương thực nhận của tháng."""

    advance_id: str
    employee_id: str
    employee_name: str
    month: str
    amount: float
    note: Optional[str]
    created_at: datetime


def advance_to_dict(a: SalaryAdvance) -> dict:
    return {
        "advance_id": a.advance_id,
        "employee_id": a.employee_id,
        "employee_name": a.employee_name,
        "month": a.month,
        "amount": a.amount,
        "note": a.note,
        "created_at": a.created_at.isoformat() if a.created_at else None,
    }
