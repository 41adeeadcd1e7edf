from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .model import AttendanceSettings


def _to_dict(s: AttendanceSettings) -> dict:
    return {
        "excused_absence_policy": s.excused_absence_policy.value,
        "working_days_per_month": s.working_days_per_month,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings/attendance", methods=["GET"], endpoint="api_get_settings")
    def api_get_settings():
        return jsonify({"success": True, "settings": _to_dict(container.settings_service.get_settings())})

    @app.route("/api/settings/attendance", methods=["PUT"], endpoint="api_update_settings")
    def api_update_settings():
        data = request.get_json(silent=True) or {}
        settings = container.settings_service.update_settings(
            excused_absence_policy=data.get("excused_absence_policy"),
            working_days_per_month=data.get("working_days_per_month"),
        )
        return jsonify({"success": True, "settings": _to_dict(settings)})
