from __future__ import annotations

import logging
import uuid
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import AttendanceStatus
from ..core.exceptions import RecordNotFound, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.service import require_employee
from ..settings.service import SettingsService
from .model import AttendanceEntry, AttendanceRecord
from .repository import AttendanceRepository
from .rules import build_record

logger = logging.getLogger(__name__)


def _new_record_id() -> str:
    return uuid.uuid4().hex


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        settings: SettingsService,
        *,
        clock: Callable[[], datetime] = now_local,
        id_factory: Callable[[], str] = _new_record_id,
    ):
        self._attendance = attendance
        self._employees = employees
        self._settings = settings
        self._clock = clock
        self._id_factory = id_factory

    @staticmethod
    def _parse_status(value) -> Optional[AttendanceStatus]:
        if value is None or value == "":
            return None
        try:
            return AttendanceStatus(value)
        except ValueError:
            raise ValidationError(f"Trạng thái chấm công không hợp lệ: {value!r}")

    def record_attendance(
        self,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus | str | None = None,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        excuse_text: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or replace the record of `employee_id` for `work_date`."""
        entry = AttendanceEntry(
            work_date=work_date,
            status=self._parse_status(status),
            check_in=check_in,
            check_out=check_out,
            excuse_text=excuse_text,
            notes=notes,
        )
        employee = require_employee(self._employees, employee_id)
        previous = self._attendance.get_for_employee_and_date(employee.employee_id, work_date)
        settings = self._settings.get_settings()

        record = build_record(
            employee,
            entry,
            previous,
            settings,
            record_id=self._id_factory(),
            now=self._clock(),
        )
        self._attendance.upsert(record)

        logger.info(
            "attendance %s employee=%s date=%s status=%s excuse=%s",
            "updated" if previous else "created",
            record.employee_id,
            record.work_date,
            record.status.value,
            record.excuse_status.value,
        )
        logger.debug(
            "attendance %s deduction=%s/%.2f overtime=%.2f net=%.2f",
            record.record_id,
            record.deduction_type.value,
            record.deduction_amount,
            record.overtime_amount,
            record.daily_net,
        )
        return record

    def get_record(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.get_by_id(str(record_id))
        if not record:
            raise RecordNotFound(f"Không tìm thấy bản ghi chấm công: {record_id}")
        return record

    def list_for_employee(self, employee_id: str, *, limit: int = DEFAULT_HISTORY_LIMIT) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(str(employee_id), limit=limit)

    def list_range(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        if end < start:
            raise ValidationError("Ngày kết thúc phải >= ngày bắt đầu")
        return self._attendance.list_range(
            start_date=start,
            end_date=end,
            employee_id=str(employee_id) if employee_id is not None else None,
        )
