from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_time
from .model import Employee, WorkingHours
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, monthly_salary, monthly_working_hours,
                       monthly_working_days, check_in_time, check_out_time
                FROM employees
                WHERE employee_id=%s
                """,
                (str(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Employee(
                employee_id=str(r["employee_id"]),
                name=r["name"],
                monthly_salary=float(r["monthly_salary"]),
                monthly_working_hours=float(r["monthly_working_hours"] or 0),
                working_hours=WorkingHours(
                    check_in=normalize_mysql_time(r["check_in_time"]).strftime("%H:%M"),
                    check_out=normalize_mysql_time(r["check_out_time"]).strftime("%H:%M"),
                ),
                monthly_working_days=int(r["monthly_working_days"]) if r.get("monthly_working_days") else None,
            )
