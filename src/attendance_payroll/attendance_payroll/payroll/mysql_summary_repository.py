from __future__ import annotations

from dataclasses import asdict, fields
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MonthlySummary, summary_archive_id
from .repository import SummaryArchiveRepository

_FIELDS = tuple(f.name for f in fields(MonthlySummary))
_INT_FIELDS = {
    "attendance_days",
    "absent_days",
    "excused_absent_days",
    "recorded_days",
    "total_delay_minutes",
    "pending_excuses",
    "accepted_excuses",
    "rejected_excuses",
}
_TEXT_FIELDS = {"employee_id", "employee_name", "month", "generated_at"}


def _to_summary(r: dict) -> MonthlySummary:
    values = {}
    for name in _FIELDS:
        v = r.get(name)
        if name in _INT_FIELDS:
            v = int(v or 0)
        elif name not in _TEXT_FIELDS:
            v = float(v or 0)
        values[name] = v
    values["employee_id"] = str(values["employee_id"])
    return MonthlySummary(**values)


class MySQLSummaryArchiveRepository(SummaryArchiveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, *, employee_id: str, month: str) -> Optional[MonthlySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {', '.join(_FIELDS)} FROM attendance_summaries WHERE summary_id=%s",
                (summary_archive_id(employee_id, month),),
            )
            r = fetchone(cur)
            return _to_summary(r) if r else None

    def put(self, summary: MonthlySummary) -> None:
        data = asdict(summary)
        data["summary_id"] = summary.archive_id
        columns = ("summary_id",) + _FIELDS
        updates = ", ".join(f"{c}=VALUES({c})" for c in _FIELDS if c not in {"employee_id", "month"})

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_summaries({', '.join(columns)})
                VALUES({', '.join(f'%({c})s' for c in columns)})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                data,
            )
