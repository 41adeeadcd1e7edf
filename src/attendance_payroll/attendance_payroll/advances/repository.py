from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryAdvance


class AdvanceRepository(Protocol):
    """Append-only ledger: no update, corrections are delete + add."""

    def add(self, advance: SalaryAdvance) -> None:
        raise NotImplementedError

    def list_for_employee_month(self, *, employee_id: str, month: str) -> Sequence[SalaryAdvance]:
        raise NotImplementedError

    def list_for_month(self, *, month: str, employee_id: Optional[str] = None) -> Sequence[SalaryAdvance]:
        raise NotImplementedError

    def delete(self, advance_id: str) -> bool:
        raise NotImplementedError
