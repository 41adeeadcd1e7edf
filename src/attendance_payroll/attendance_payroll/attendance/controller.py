from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..container import Container
from .row_mapper import record_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="api_record_attendance")
    def api_record_attendance():
        data = request.get_json(silent=True) or {}
        record = container.attendance_service.record_attendance(
            require_non_empty(data.get("employee_id"), "Mã nhân viên"),
            parse_iso_date(data.get("date")),
            status=data.get("status"),
            check_in=data.get("check_in"),
            check_out=data.get("check_out"),
            excuse_text=data.get("excuse_text"),
            notes=data.get("notes"),
        )
        return jsonify({"success": True, "record": record_to_dict(record)})

    @app.route("/api/attendance", methods=["GET"], endpoint="api_list_attendance")
    def api_list_attendance():
        start = parse_iso_date(request.args.get("start", ""))
        end = parse_iso_date(request.args.get("end", ""))
        records = container.attendance_service.list_range(
            start=start,
            end=end,
            employee_id=request.args.get("employee_id") or None,
        )
        return jsonify({"success": True, "records": [record_to_dict(r) for r in records]})

    @app.route("/api/attendance/<record_id>", methods=["GET"], endpoint="api_get_attendance")
    def api_get_attendance(record_id: str):
        record = container.attendance_service.get_record(record_id)
        return jsonify({"success": True, "record": record_to_dict(record)})
