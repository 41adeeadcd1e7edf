from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import ExcuseStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .row_mapper import record_from_row, record_to_params

_COLUMNS = (
    "record_id",
    "employee_id",
    "employee_name",
    "work_date",
    "check_in_time",
    "check_out_time",
    "status",
    "delay_minutes",
    "has_excuse",
    "excuse_text",
    "excuse_status",
    "excuse_resolution",
    "excuse_note",
    "deduction_type",
    "deduction_amount",
    "overtime_hours",
    "overtime_amount",
    "daily_wage",
    "daily_net",
    "excused_absence_policy",
    "notes",
    "created_at",
    "updated_at",
)
_SELECT = f"SELECT {', '.join(_COLUMNS)} FROM attendance_records"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE record_id=%s", (str(record_id),))
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} WHERE employee_id=%s AND work_date=%s",
                (str(employee_id), work_date),
            )
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def list_for_employee(self, employee_id: str, *, limit: Optional[int] = None) -> Sequence[AttendanceRecord]:
        sql = f"{_SELECT} WHERE employee_id=%s ORDER BY work_date DESC"
        params: list[object] = [str(employee_id)]
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [record_from_row(r) for r in fetchall(cur)]

    def list_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY work_date DESC, employee_id ASC", tuple(params))
            return [record_from_row(r) for r in fetchall(cur)]

    def list_pending_excuses(self, *, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        clauses = ["has_excuse=1", "excuse_status=%s"]
        params: list[object] = [ExcuseStatus.PENDING.value]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE {where} ORDER BY work_date ASC, employee_id ASC", tuple(params))
            return [record_from_row(r) for r in fetchall(cur)]

    def upsert(self, record: AttendanceRecord) -> None:
        params = record_to_params(record)
        placeholders = ", ".join(f"%({c})s" for c in _COLUMNS)
        # The (employee_id, work_date) unique key decides create vs replace.
        updates = ", ".join(f"{c}=VALUES({c})" for c in _COLUMNS if c not in {"record_id", "created_at"})

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_records({', '.join(_COLUMNS)})
                VALUES({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                params,
            )
