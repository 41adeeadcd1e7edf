from dataclasses import replace
from datetime import date

import pytest

from src.attendance_payroll.attendance_payroll.attendance.service import AttendanceService
from src.attendance_payroll.attendance_payroll.core.enums import DeductionType, ExcuseResolution, ExcuseStatus
from src.attendance_payroll.attendance_payroll.core.exceptions import RecordNotFound, ValidationError
from src.attendance_payroll.attendance_payroll.excuses.service import ExcuseService
from src.attendance_payroll.attendance_payroll.settings.service import SettingsService


@pytest.fixture
def attendance(attendance_repo, employees, settings_repo, clock):
    return AttendanceService(attendance_repo, employees, SettingsService(settings_repo), clock=clock)


@pytest.fixture
def excuses(attendance_repo, employees, clock):
    return ExcuseService(attendance_repo, employees, clock=clock)


@pytest.fixture
def late_record(attendance):
    return attendance.record_attendance("emp-1", date(2026, 3, 9), check_in="09:40", excuse_text="kẹt xe")


def test_accept_switches_to_hourly_deduction(excuses, late_record):
    r = excuses.adjudicate_excuse(late_record.record_id, "accepted")

    assert r.excuse_status == ExcuseStatus.ACCEPTED
    assert r.excuse_resolution == ExcuseResolution.HOURLY
    assert r.deduction_type == DeductionType.HOURLY
    assert r.deduction_amount == pytest.approx(40 / 60 * 25.0)
    assert r.daily_net == pytest.approx(200.0 - 40 / 60 * 25.0)


def test_accept_with_no_deduct(excuses, late_record):
    r = excuses.adjudicate_excuse(late_record.record_id, ExcuseStatus.ACCEPTED, resolution="no_deduct")

    assert r.deduction_type == DeductionType.NONE
    assert r.daily_net == pytest.approx(200.0)


def test_reject_goes_back_to_tiers(excuses, late_record):
    excuses.adjudicate_excuse(late_record.record_id, "accepted")
    r = excuses.adjudicate_excuse(late_record.record_id, "rejected")

    assert r.excuse_status == ExcuseStatus.REJECTED
    assert r.excuse_resolution is None
    assert r.deduction_type == DeductionType.FIXED
    assert r.deduction_amount == 25.0


def test_adjudication_is_idempotent(excuses, late_record, attendance_repo):
    first = excuses.adjudicate_excuse(late_record.record_id, "accepted", note="ok")
    second = excuses.adjudicate_excuse(late_record.record_id, "accepted", note="ok")

    assert first == second
    assert attendance_repo.get_by_id(late_record.record_id) == second


def test_reaccept_keeps_stored_resolution(excuses, late_record):
    excuses.adjudicate_excuse(late_record.record_id, "accepted", resolution="no_deduct")
    r = excuses.adjudicate_excuse(late_record.record_id, "accepted")

    assert r.excuse_resolution == ExcuseResolution.NO_DEDUCT


def test_note_is_kept_unless_given(excuses, late_record):
    excuses.adjudicate_excuse(late_record.record_id, "accepted", note="đã xác minh")

    kept = excuses.adjudicate_excuse(late_record.record_id, "rejected")
    cleared = excuses.adjudicate_excuse(late_record.record_id, "rejected", note=None)

    assert kept.excuse_note == "đã xác minh"
    assert cleared.excuse_note is None


def test_decision_uses_stored_snapshots(excuses, late_record, attendance_repo, employees, employee):
    employees._by_id["emp-1"] = replace(employee, working_hours=replace(employee.working_hours, check_in="10:00"))

    r = excuses.adjudicate_excuse(late_record.record_id, "rejected")

    assert r.delay_minutes == 40
    assert r.deduction_amount == 25.0


def test_pending_is_not_a_decision(excuses, late_record):
    with pytest.raises(ValidationError):
        excuses.adjudicate_excuse(late_record.record_id, "pending")


def test_unknown_status_or_resolution(excuses, late_record):
    with pytest.raises(ValidationError):
        excuses.adjudicate_excuse(late_record.record_id, "maybe")
    with pytest.raises(ValidationError):
        excuses.adjudicate_excuse(late_record.record_id, "accepted", resolution="half")


def test_missing_record(excuses):
    with pytest.raises(RecordNotFound):
        excuses.adjudicate_excuse("missing", "accepted")


def test_accepted_excused_absence_costs_nothing(attendance, excuses):
    rec = attendance.record_attendance("emp-1", date(2026, 3, 10), status="absent_excused", excuse_text="ốm")

    r = excuses.adjudicate_excuse(rec.record_id, "accepted")

    assert r.deduction_amount == 0.0
    assert r.daily_net == 0.0


def test_list_pending(attendance, excuses, late_record):
    attendance.record_attendance("emp-1", date(2026, 3, 2), status="absent_excused")
    attendance.record_attendance("emp-1", date(2026, 3, 3), check_in="09:00")

    pending = excuses.list_pending(employee_id="emp-1")
    assert [r.work_date.day for r in pending] == [2, 9]

    excuses.adjudicate_excuse(late_record.record_id, "accepted")
    assert [r.work_date.day for r in excuses.list_pending()] == [2]
