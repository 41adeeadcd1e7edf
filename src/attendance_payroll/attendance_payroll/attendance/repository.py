from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        """Newest day first."""

        raise NotImplementedError

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_pending_excuses(self, *, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Replace the (employee_id, work_date) record wholesale, or create it.

        Implementations must make this atomic for the key; last write wins.
        """

        raise NotImplementedError
