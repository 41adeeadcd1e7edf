from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SalaryAdvance
from .repository import AdvanceRepository


def _to_advance(r: dict) -> SalaryAdvance:
    return SalaryAdvance(
        advance_id=str(r["advance_id"]),
        employee_id=str(r["employee_id"]),
        employee_name=r.get("employee_name") or "",
        month=r["month"],
        amount=float(r["amount"] or 0),
        note=r.get("note"),
        created_at=r["created_at"],
    )


class MySQLAdvanceRepository(AdvanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, advance: SalaryAdvance) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_advances(advance_id, employee_id, employee_name, month, amount, note, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    advance.advance_id,
                    advance.employee_id,
                    advance.employee_name,
                    advance.month,
                    advance.amount,
                    advance.note,
                    advance.created_at,
                ),
            )

    def list_for_employee_month(self, *, employee_id: str, month: str) -> Sequence[SalaryAdvance]:
        return self.list_for_month(month=month, employee_id=employee_id)

    def list_for_month(self, *, month: str, employee_id: Optional[str] = None) -> Sequence[SalaryAdvance]:
        clauses = ["month=%s"]
        params: list[object] = [month]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT advance_id, employee_id, employee_name, month, amount, note, created_at
                FROM salary_advances
                WHERE {where}
                ORDER BY created_at DESC
                """,
                tuple(params),
            )
            return [_to_advance(r) for r in fetchall(cur)]

    def delete(self, advance_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_advances WHERE advance_id=%s", (str(advance_id),))
            return cur.rowcount > 0
