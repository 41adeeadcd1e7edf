from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.enums import ExcuseResolution, ExcuseStatus
from ..core.exceptions import RecordNotFound, ValidationError
from ..employees.repository import EmployeeRepository
from ..employees.service import require_employee
from .rules import UNSET, adjudicate

logger = logging.getLogger(__name__)


class ExcuseService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._attendance = attendance
        self._employees = employees
        self._clock = clock

    @staticmethod
    def _parse_decision(status, resolution) -> tuple[ExcuseStatus, Optional[ExcuseResolution]]:
        try:
            decided = ExcuseStatus(status)
        except ValueError:
            raise ValidationError(f"Trạng thái lý do không hợp lệ: {status!r}")
        try:
            chosen = ExcuseResolution(resolution) if resolution else None
        except ValueError:
            raise ValidationError(f"Cách xử lý lý do không hợp lệ: {resolution!r}")
        return decided, chosen

    def adjudicate_excuse(
        self,
        record_id: str,
        status: ExcuseStatus | str,
        note=UNSET,
        resolution: ExcuseResolution | str | None = None,
    ) -> AttendanceRecord:
        """Accept or reject the excuse on a record and recompute its money fields."""
        decided, chosen = self._parse_decision(status, resolution)

        record = self._attendance.get_by_id(str(record_id))
        if not record:
            raise RecordNotFound(f"Không tìm thấy bản ghi chấm công: {record_id}")
        employee = require_employee(self._employees, record.employee_id)

        updated = adjudicate(record, employee, decided, note=note, resolution=chosen, now=self._clock())
        self._attendance.upsert(updated)

        logger.info(
            "excuse %s record=%s employee=%s date=%s resolution=%s",
            updated.excuse_status.value,
            updated.record_id,
            updated.employee_id,
            updated.work_date,
            updated.excuse_resolution.value if updated.excuse_resolution else None,
        )
        return updated

    def list_pending(self, *, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        """Records whose excuse still awaits a decision, oldest day first."""
        return self._attendance.list_pending_excuses(employee_id=str(employee_id) if employee_id is not None else None)
