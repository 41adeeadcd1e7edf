from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..core.enums import ExcusedAbsencePolicy
from ..core.exceptions import ValidationError
from .model import DEFAULT_ATTENDANCE_SETTINGS, AttendanceSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> AttendanceSettings:
        """Stored settings merged over the defaults; writes the defaults on first read."""
        data = self._settings.get()
        if data is None:
            self._settings.put(DEFAULT_ATTENDANCE_SETTINGS)
            return DEFAULT_ATTENDANCE_SETTINGS

        current = DEFAULT_ATTENDANCE_SETTINGS
        if data.get("excused_absence_policy"):
            current = replace(current, excused_absence_policy=ExcusedAbsencePolicy(data["excused_absence_policy"]))
        if data.get("working_days_per_month"):
            current = replace(current, working_days_per_month=int(data["working_days_per_month"]))
        return current

    def update_settings(
        self,
        *,
        excused_absence_policy: ExcusedAbsencePolicy | str | None = None,
        working_days_per_month: Optional[int] = None,
    ) -> AttendanceSettings:
        current = self.get_settings()

        if excused_absence_policy is not None:
            try:
                current = replace(current, excused_absence_policy=ExcusedAbsencePolicy(excused_absence_policy))
            except ValueError:
                raise ValidationError(f"Chính sách vắng có phép không hợp lệ: {excused_absence_policy!r}")

        if working_days_per_month is not None:
            try:
                days = int(working_days_per_month)
            except (TypeError, ValueError):
                raise ValidationError("Số ngày công phải là số nguyên")
            if not 1 <= days <= 31:
                raise ValidationError("Số ngày công phải trong khoảng 1-31")
            current = replace(current, working_days_per_month=days)

        self._settings.put(current)
        logger.info(
            "attendance settings updated policy=%s working_days=%s",
            current.excused_absence_policy.value,
            current.working_days_per_month,
        )
        return current
