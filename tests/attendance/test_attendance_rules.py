from datetime import date, datetime

import pytest

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceEntry
from src.attendance_payroll.attendance_payroll.attendance.rules import base_impact, build_record
from src.attendance_payroll.attendance_payroll.core.enums import (
    AttendanceStatus,
    DeductionType,
    ExcusedAbsencePolicy,
    ExcuseResolution,
    ExcuseStatus,
)
from src.attendance_payroll.attendance_payroll.core.exceptions import InvalidTimeFormat, ValidationError
from src.attendance_payroll.attendance_payroll.excuses.rules import adjudicate
from src.attendance_payroll.attendance_payroll.settings.model import AttendanceSettings

DAY = date(2026, 3, 9)
NO_DEDUCT = AttendanceSettings(excused_absence_policy=ExcusedAbsencePolicy.NO_DEDUCT)
DEDUCT = AttendanceSettings(excused_absence_policy=ExcusedAbsencePolicy.DEDUCT)


def _build(employee, entry, previous=None, settings=NO_DEDUCT, now=datetime(2026, 3, 9, 20, 0)):
    return build_record(employee, entry, previous, settings, record_id="rec-new", now=now)


def _assert_net_invariant(r):
    impact = base_impact(r.status, r.daily_wage, r.excused_absence_policy, r.excuse_status)
    assert r.daily_net == pytest.approx(impact - r.deduction_amount + r.overtime_amount)


def test_forty_minutes_late_without_excuse(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40", check_out="17:00"))

    assert r.status == AttendanceStatus.PRESENT
    assert r.delay_minutes == 40
    assert r.has_excuse is False
    assert r.excuse_status == ExcuseStatus.REJECTED
    assert r.deduction_type == DeductionType.FIXED
    assert r.deduction_amount == 25.0
    assert r.daily_wage == 200.0
    assert r.daily_net == pytest.approx(175.0)


def test_overtime_day(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:00", check_out="19:00"))

    assert r.delay_minutes == 0
    assert r.overtime_hours == 2.0
    assert r.overtime_amount == 100.0
    assert r.daily_net == pytest.approx(300.0)


def test_status_inferred_from_missing_check_in(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY))

    assert r.status == AttendanceStatus.ABSENT
    assert r.daily_net == pytest.approx(-200.0)
    assert r.deduction_amount == 0.0


def test_non_present_status_clears_times(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT, check_in="09:30", check_out="19:00"))

    assert r.check_in_time is None
    assert r.check_out_time is None
    assert r.delay_minutes == 0
    assert r.overtime_amount == 0.0


def test_excused_absence_starts_pending_and_costs_nothing(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED, excuse_text="ốm"))

    assert r.has_excuse is True
    assert r.excuse_status == ExcuseStatus.PENDING
    assert r.daily_net == 0.0


def test_excused_absence_pending_costs_nothing_even_under_deduct_policy(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED), settings=DEDUCT)

    assert r.excuse_status == ExcuseStatus.PENDING
    assert r.excused_absence_policy == ExcusedAbsencePolicy.DEDUCT
    assert r.daily_net == 0.0


def test_rejected_excused_absence_follows_policy(employee, fixed_now):
    entry = AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED)

    deduct = adjudicate(_build(employee, entry, settings=DEDUCT), employee, ExcuseStatus.REJECTED, now=fixed_now)
    waived = adjudicate(_build(employee, entry, settings=NO_DEDUCT), employee, ExcuseStatus.REJECTED, now=fixed_now)

    assert deduct.daily_net == pytest.approx(-200.0)
    assert waived.daily_net == 0.0


def test_late_with_pending_excuse_is_charged_provisionally(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40", excuse_text="kẹt xe"))

    assert r.excuse_status == ExcuseStatus.PENDING
    assert r.deduction_type == DeductionType.FIXED
    assert r.deduction_amount == 25.0


def test_blank_excuse_text_is_no_excuse(employee):
    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:20", excuse_text="   "))

    assert r.has_excuse is False
    assert r.excuse_text is None


def test_check_out_before_check_in_is_rejected(employee):
    with pytest.raises(ValidationError):
        _build(employee, AttendanceEntry(work_date=DAY, check_in="10:00", check_out="09:00"))


def test_bad_time_is_rejected(employee):
    with pytest.raises(InvalidTimeFormat):
        _build(employee, AttendanceEntry(work_date=DAY, check_in="9h"))


def test_resave_keeps_adjudicated_excuse(employee, fixed_now):
    entry = AttendanceEntry(work_date=DAY, check_in="09:40", excuse_text="kẹt xe")
    first = _build(employee, entry, now=datetime(2026, 3, 9, 9, 45))
    accepted = adjudicate(first, employee, ExcuseStatus.ACCEPTED, now=fixed_now)

    again = _build(employee, entry, previous=accepted, now=datetime(2026, 3, 11, 8, 0))

    assert again.record_id == first.record_id
    assert again.created_at == first.created_at
    assert again.excuse_status == ExcuseStatus.ACCEPTED
    assert again.excuse_resolution == ExcuseResolution.HOURLY
    assert again.deduction_type == DeductionType.HOURLY
    assert again.deduction_amount == pytest.approx(40 / 60 * 25.0)


def test_resave_keeps_no_deduct_resolution(employee, fixed_now):
    entry = AttendanceEntry(work_date=DAY, check_in="10:00", excuse_text="đi khám")
    accepted = adjudicate(
        _build(employee, entry), employee, ExcuseStatus.ACCEPTED, resolution=ExcuseResolution.NO_DEDUCT, now=fixed_now
    )

    again = _build(employee, entry, previous=accepted)

    assert again.excuse_resolution == ExcuseResolution.NO_DEDUCT
    assert again.deduction_amount == 0.0
    assert again.daily_net == pytest.approx(200.0)


def test_adding_excuse_to_existing_day_makes_it_pending(employee):
    previous = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40"))

    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40", excuse_text="kẹt xe"), previous=previous)

    assert r.excuse_status == ExcuseStatus.PENDING


def test_removing_excuse_resets_to_rejected(employee, fixed_now):
    entry = AttendanceEntry(work_date=DAY, check_in="09:40", excuse_text="kẹt xe")
    accepted = adjudicate(_build(employee, entry), employee, ExcuseStatus.ACCEPTED, now=fixed_now)

    r = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40"), previous=accepted)

    assert r.has_excuse is False
    assert r.excuse_status == ExcuseStatus.REJECTED
    assert r.excuse_resolution is None
    assert r.deduction_amount == 25.0


def test_switching_to_excused_absence_restarts_review(employee, fixed_now):
    late = _build(employee, AttendanceEntry(work_date=DAY, check_in="09:40", excuse_text="kẹt xe"))
    accepted = adjudicate(late, employee, ExcuseStatus.ACCEPTED, now=fixed_now)

    r = _build(
        employee,
        AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED, excuse_text="ốm"),
        previous=accepted,
    )

    assert r.excuse_status == ExcuseStatus.PENDING
    assert r.excuse_resolution is None


@pytest.mark.parametrize(
    "entry",
    [
        AttendanceEntry(work_date=DAY, check_in="09:00", check_out="17:00"),
        AttendanceEntry(work_date=DAY, check_in="10:31", check_out="18:15"),
        AttendanceEntry(work_date=DAY, check_in="09:16", excuse_text="x"),
        AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT),
        AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED),
    ],
)
def test_daily_net_matches_its_parts(employee, entry):
    _assert_net_invariant(_build(employee, entry))
    _assert_net_invariant(_build(employee, entry, settings=DEDUCT))


def test_accepted_excused_absence_stores_same_deduction_when_resaved(employee, fixed_now):
    entry = AttendanceEntry(work_date=DAY, status=AttendanceStatus.ABSENT_EXCUSED, excuse_text="ốm")
    accepted = adjudicate(
        _build(employee, entry), employee, ExcuseStatus.ACCEPTED, resolution=ExcuseResolution.HOURLY, now=fixed_now
    )

    again = _build(employee, entry, previous=accepted)

    assert accepted.deduction_type == DeductionType.NONE
    assert again.excuse_status == ExcuseStatus.ACCEPTED
    assert again.deduction_type == accepted.deduction_type
    assert again.deduction_amount == accepted.deduction_amount == 0.0
