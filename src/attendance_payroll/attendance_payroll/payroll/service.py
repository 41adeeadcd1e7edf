from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional

from ..advances.repository import AdvanceRepository
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_of, now_local
from ..employees.repository import EmployeeRepository
from ..employees.service import require_employee
from .model import MonthlySummary
from .repository import SummaryArchiveRepository
from .summary import summarize

logger = logging.getLogger(__name__)


class PayrollSummaryService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        advances: AdvanceRepository,
        employees: EmployeeRepository,
        archive: SummaryArchiveRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._advances = advances
        self._employees = employees
        self._archive = archive
        self._clock = clock

    def compute_live_summary(self, employee_id: str, month: str) -> MonthlySummary:
        """Recompute the month from committed records and advances (no locking)."""
        start, end = month_bounds(month)
        employee = require_employee(self._employees, employee_id)
        month = month.strip()

        records = self._attendance.list_range(start_date=start, end_date=end, employee_id=employee.employee_id)
        advances = self._advances.list_for_employee_month(employee_id=employee.employee_id, month=month)
        return summarize(employee, month, records, advances)

    def get_archived_summary(self, employee_id: str, month: str) -> Optional[MonthlySummary]:
        month_bounds(month)
        return self._archive.get(employee_id=str(employee_id), month=month.strip())

    def get_monthly_summary(self, employee_id: str, month: str) -> MonthlySummary:
        """Live summary for the current month or any month with records; else the archive."""
        live = self.compute_live_summary(employee_id, month)
        if live.month == month_of(self._clock().date()) or live.recorded_days > 0:
            return live

        archived = self._archive.get(employee_id=live.employee_id, month=live.month)
        return archived or live

    def archive_month(self, employee_id: str, month: str) -> MonthlySummary:
        """Freeze the live computation; repeating it simply rewrites the same snapshot."""
        summary = replace(self.compute_live_summary(employee_id, month), generated_at=self._clock())
        self._archive.put(summary)
        logger.info("monthly summary archived id=%s recorded_days=%s", summary.archive_id, summary.recorded_days)
        return summary
