from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest

from src.attendance_payroll.attendance_payroll.advances.model import SalaryAdvance
from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceRecord
from src.attendance_payroll.attendance_payroll.container import build_services
from src.attendance_payroll.attendance_payroll.core.enums import ExcuseStatus
from src.attendance_payroll.attendance_payroll.employees.model import Employee, WorkingHours
from src.attendance_payroll.attendance_payroll.logging_config import reset_logging
from src.attendance_payroll.attendance_payroll.payroll.model import MonthlySummary
from src.attendance_payroll.attendance_payroll.settings.model import AttendanceSettings


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)


class InMemoryAttendance:
    def __init__(self):
        self._by_key: dict[tuple[str, date], AttendanceRecord] = {}
        self.upserts = 0

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        for r in self._by_key.values():
            if r.record_id == record_id:
                return r
        return None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_key.get((employee_id, work_date))

    def list_for_employee(self, employee_id: str, *, limit=None):
        items = [r for r in self._by_key.values() if r.employee_id == employee_id]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items[:limit] if limit is not None else items

    def list_range(self, *, start_date: date, end_date: date, employee_id=None):
        return [
            r
            for r in self._by_key.values()
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]

    def list_pending_excuses(self, *, employee_id=None):
        items = [
            r
            for r in self._by_key.values()
            if r.has_excuse and r.excuse_status == ExcuseStatus.PENDING and (employee_id is None or r.employee_id == employee_id)
        ]
        return sorted(items, key=lambda r: r.work_date)

    def upsert(self, record: AttendanceRecord) -> None:
        self.upserts += 1
        self._by_key[(record.employee_id, record.work_date)] = record

    def put_raw(self, record: AttendanceRecord) -> None:
        self._by_key[(record.employee_id, record.work_date)] = record


class InMemoryAdvances:
    def __init__(self):
        self._items: dict[str, SalaryAdvance] = {}

    def add(self, advance: SalaryAdvance) -> None:
        self._items[advance.advance_id] = advance

    def list_for_employee_month(self, *, employee_id: str, month: str):
        return [a for a in self._items.values() if a.employee_id == employee_id and a.month == month]

    def list_for_month(self, *, month: str, employee_id=None):
        return [a for a in self._items.values() if a.month == month and (employee_id is None or a.employee_id == employee_id)]

    def delete(self, advance_id: str) -> bool:
        return self._items.pop(advance_id, None) is not None


class InMemorySettings:
    def __init__(self, data: Optional[dict] = None):
        self.data = data
        self.puts = 0

    def get(self) -> Optional[dict]:
        return dict(self.data) if self.data is not None else None

    def put(self, settings: AttendanceSettings) -> None:
        self.puts += 1
        self.data = {
            "excused_absence_policy": settings.excused_absence_policy.value,
            "working_days_per_month": settings.working_days_per_month,
        }


class InMemoryArchive:
    def __init__(self):
        self.items: dict[str, MonthlySummary] = {}

    def get(self, *, employee_id: str, month: str) -> Optional[MonthlySummary]:
        return self.items.get(f"{employee_id}_{month}")

    def put(self, summary: MonthlySummary) -> None:
        existing = self.items.get(summary.archive_id)
        self.items[summary.archive_id] = replace(existing, **summary.__dict__) if existing else summary


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 10, 18, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def employee() -> Employee:
    # hourly rate 6000 / 240 = 25, daily wage 6000 / 30 = 200
    return Employee(
        employee_id="emp-1",
        name="Nguyễn Văn A",
        monthly_salary=6000.0,
        monthly_working_hours=240.0,
        working_hours=WorkingHours(check_in="09:00", check_out="17:00"),
    )


@pytest.fixture
def employees(employee) -> InMemoryEmployees:
    return InMemoryEmployees(employee)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def advances_repo() -> InMemoryAdvances:
    return InMemoryAdvances()


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings()


@pytest.fixture
def archive_repo() -> InMemoryArchive:
    return InMemoryArchive()


@pytest.fixture
def container(employees, attendance_repo, advances_repo, settings_repo, archive_repo):
    return build_services(
        employees_repo=employees,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        settings_repo=settings_repo,
        archive_repo=archive_repo,
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_logging()
