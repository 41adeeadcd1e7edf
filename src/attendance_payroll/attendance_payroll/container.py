from __future__ import annotations

from dataclasses import dataclass

from .advances.mysql_advance_repository import MySQLAdvanceRepository
from .advances.repository import AdvanceRepository
from .advances.service import AdvanceService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .excuses.service import ExcuseService
from .payroll.mysql_summary_repository import MySQLSummaryArchiveRepository
from .payroll.repository import SummaryArchiveRepository
from .payroll.service import PayrollSummaryService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    advances_repo: AdvanceRepository
    settings_repo: SettingsRepository
    archive_repo: SummaryArchiveRepository

    settings_service: SettingsService
    attendance_service: AttendanceService
    excuse_service: ExcuseService
    advance_service: AdvanceService
    payroll_summary_service: PayrollSummaryService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    advances_repo: AdvanceRepository,
    settings_repo: SettingsRepository,
    archive_repo: SummaryArchiveRepository,
) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""
    settings_service = SettingsService(settings_repo)

    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        advances_repo=advances_repo,
        settings_repo=settings_repo,
        archive_repo=archive_repo,
        settings_service=settings_service,
        attendance_service=AttendanceService(attendance_repo, employees_repo, settings_service),
        excuse_service=ExcuseService(attendance_repo, employees_repo),
        advance_service=AdvanceService(advances_repo, employees_repo),
        payroll_summary_service=PayrollSummaryService(attendance_repo, advances_repo, employees_repo, archive_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        advances_repo=MySQLAdvanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        archive_repo=MySQLSummaryArchiveRepository(conn),
    )
