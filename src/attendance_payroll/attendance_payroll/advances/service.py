from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import now_local, parse_month
from ..common.validators import optional_text, require_positive_amount
from ..core.exceptions import AdvanceNotFound
from ..employees.repository import EmployeeRepository
from ..employees.service import require_employee
from .model import SalaryAdvance
from .repository import AdvanceRepository

logger = logging.getLogger(__name__)


def _newest_first(advances) -> list[SalaryAdvance]:
    return sorted(advances, key=lambda a: a.created_at, reverse=True)


class AdvanceService:
    def __init__(
        self,
        advances: AdvanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._advances = advances
        self._employees = employees
        self._clock = clock

    def add_advance(self, employee_id: str, month: str, amount, note: Optional[str] = None) -> SalaryAdvance:
        parse_month(month)
        value = require_positive_amount(amount, "Số tiền tạm ứng")
        employee = require_employee(self._employees, employee_id)

        advance = SalaryAdvance(
            advance_id=uuid.uuid4().hex,
            employee_id=employee.employee_id,
            employee_name=employee.name,
            month=month.strip(),
            amount=value,
            note=optional_text(note),
            created_at=self._clock(),
        )
        self._advances.add(advance)
        logger.info("salary advance added id=%s employee=%s month=%s", advance.advance_id, advance.employee_id, advance.month)
        return advance

    def list_advances(self, employee_id: str, month: str) -> list[SalaryAdvance]:
        parse_month(month)
        return _newest_first(self._advances.list_for_employee_month(employee_id=str(employee_id), month=month.strip()))

    def list_advances_by_month(self, month: str, employee_id: Optional[str] = None) -> list[SalaryAdvance]:
        parse_month(month)
        return _newest_first(
            self._advances.list_for_month(
                month=month.strip(),
                employee_id=str(employee_id) if employee_id else None,
            )
        )

    def delete_advance(self, advance_id: str) -> None:
        if not self._advances.delete(str(advance_id)):
            raise AdvanceNotFound(f"Không tìm thấy khoản tạm ứng: {advance_id}")
        logger.info("salary advance deleted id=%s", advance_id)
