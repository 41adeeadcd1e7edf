from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.row_mapper import record_to_dict
from ..container import Container
from .rules import UNSET


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<record_id>/excuse", methods=["POST"], endpoint="api_adjudicate_excuse")
    def api_adjudicate_excuse(record_id: str):
        data = request.get_json(silent=True) or {}
        record = container.excuse_service.adjudicate_excuse(
            record_id,
            data.get("status"),
            note=data["note"] if "note" in data else UNSET,
            resolution=data.get("resolution"),
        )
        return jsonify({"success": True, "record": record_to_dict(record)})

    @app.route("/api/excuses/pending", methods=["GET"], endpoint="api_pending_excuses")
    def api_pending_excuses():
        records = container.excuse_service.list_pending(employee_id=request.args.get("employee_id") or None)
        return jsonify({"success": True, "records": [record_to_dict(r) for r in records]})
