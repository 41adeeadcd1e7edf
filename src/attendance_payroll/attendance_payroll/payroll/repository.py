from __future__ import annotations

from typing import Optional, Protocol

from .model import MonthlySummary


class SummaryArchiveRepository(Protocol):
    """Frozen month snapshots keyed by ``employeeId_month``."""

    def get(self, *, employee_id: str, month: str) -> Optional[MonthlySummary]:
        raise NotImplementedError

    def put(self, summary: MonthlySummary) -> None:
        """Create or merge the snapshot; writing the same summary twice is a no-op."""

        raise NotImplementedError
