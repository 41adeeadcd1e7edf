from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceSettings
from .repository import SettingsRepository

GENERAL_KEY = "general"


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT excused_absence_policy, working_days_per_month
                FROM attendance_settings
                WHERE setting_key=%s
                """,
                (GENERAL_KEY,),
            )
            return fetchone(cur)

    def put(self, settings: AttendanceSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_settings(setting_key, excused_absence_policy, working_days_per_month)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    excused_absence_policy=VALUES(excused_absence_policy),
                    working_days_per_month=VALUES(working_days_per_month)
                """,
                (GENERAL_KEY, settings.excused_absence_policy.value, int(settings.working_days_per_month)),
            )
