from __future__ import annotations

from typing import Optional, Protocol

from .model import AttendanceSettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[dict]:
        """Return the stored settings document, or None when it was never written."""

        raise NotImplementedError

    def put(self, settings: AttendanceSettings) -> None:
        raise NotImplementedError
