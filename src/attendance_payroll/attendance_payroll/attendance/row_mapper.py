"""Row <-> record mapping at the storage boundary.

Older rows may predate some columns: a missing status is inferred from the
check-in, ``approved`` is read as ``accepted``, a missing daily net falls back
to ``overtime - deduction`` and a missing daily wage reads as 0 (the monthly
summary treats such months with the legacy accrual).
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.enums import (
    AttendanceStatus,
    DeductionType,
    ExcusedAbsencePolicy,
    ExcuseResolution,
    ExcuseStatus,
)
from ..database.mysql_base import normalize_mysql_time
from ..settings.model import DEFAULT_ATTENDANCE_SETTINGS
from .model import AttendanceRecord


def _hhmm(value: Any) -> Optional[str]:
    t = normalize_mysql_time(value)
    return t.strftime("%H:%M") if t else None


def _money(value: Any) -> float:
    return float(value) if value is not None else 0.0


def record_from_row(r: Mapping[str, Any]) -> AttendanceRecord:
    check_in = _hhmm(r.get("check_in_time"))
    status = (
        AttendanceStatus(r["status"])
        if r.get("status")
        else (AttendanceStatus.PRESENT if check_in else AttendanceStatus.ABSENT)
    )
    excuse_status = ExcuseStatus(r.get("excuse_status") or ExcuseStatus.REJECTED.value)
    deduction_amount = _money(r.get("deduction_amount"))
    overtime_amount = _money(r.get("overtime_amount"))
    stored_net = r.get("daily_net")

    resolution = r.get("excuse_resolution")
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        employee_id=str(r["employee_id"]),
        employee_name=r.get("employee_name") or "",
        work_date=r["work_date"],
        check_in_time=check_in,
        check_out_time=_hhmm(r.get("check_out_time")),
        status=status,
        delay_minutes=int(r.get("delay_minutes") or 0),
        has_excuse=bool(r.get("has_excuse")),
        excuse_text=r.get("excuse_text"),
        excuse_status=excuse_status,
        excuse_resolution=ExcuseResolution(resolution) if resolution else None,
        excuse_note=r.get("excuse_note"),
        deduction_type=DeductionType(r.get("deduction_type") or DeductionType.NONE.value),
        deduction_amount=deduction_amount,
        overtime_hours=_money(r.get("overtime_hours")),
        overtime_amount=overtime_amount,
        daily_wage=_money(r.get("daily_wage")),
        daily_net=_money(stored_net) if stored_net is not None else overtime_amount - deduction_amount,
        excused_absence_policy=ExcusedAbsencePolicy(
            r.get("excused_absence_policy") or DEFAULT_ATTENDANCE_SETTINGS.excused_absence_policy.value
        ),
        notes=r.get("notes"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def record_to_params(rec: AttendanceRecord) -> dict[str, Any]:
    return {
        "record_id": rec.record_id,
        "employee_id": rec.employee_id,
        "employee_name": rec.employee_name,
        "work_date": rec.work_date,
        "check_in_time": rec.check_in_time,
        "check_out_time": rec.check_out_time,
        "status": rec.status.value,
        "delay_minutes": rec.delay_minutes,
        "has_excuse": int(rec.has_excuse),
        "excuse_text": rec.excuse_text,
        "excuse_status": rec.excuse_status.value,
        "excuse_resolution": rec.excuse_resolution.value if rec.excuse_resolution else None,
        "excuse_note": rec.excuse_note,
        "deduction_type": rec.deduction_type.value,
        "deduction_amount": rec.deduction_amount,
        "overtime_hours": rec.overtime_hours,
        "overtime_amount": rec.overtime_amount,
        "daily_wage": rec.daily_wage,
        "daily_net": rec.daily_net,
        "excused_absence_policy": rec.excused_absence_policy.value,
        "notes": rec.notes,
        "created_at": rec.created_at,
        "updated_at": rec.updated_at,
    }


def record_to_dict(rec: AttendanceRecord) -> dict[str, Any]:
    """JSON-friendly view used by the controllers."""
    data = record_to_params(rec)
    data["has_excuse"] = rec.has_excuse
    data["work_date"] = rec.work_date.strftime("%Y-%m-%d")
    data["created_at"] = rec.created_at.isoformat() if rec.created_at else None
    data["updated_at"] = rec.updated_at.isoformat() if rec.updated_at else None
    return data
