from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_non_empty
from ..container import Container
from .model import advance_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/advances", methods=["GET"], endpoint="api_list_advances")
    def api_list_advances():
        month = require_non_empty(request.args.get("month", ""), "Tháng")
        employee_id = request.args.get("employee_id") or None
        advances = container.advance_service.list_advances_by_month(month, employee_id)
        return jsonify({"success": True, "advances": [advance_to_dict(a) for a in advances]})

    @app.route("/api/advances", methods=["POST"], endpoint="api_add_advance")
    def api_add_advance():
        data = request.get_json(silent=True) or {}
        advance = container.advance_service.add_advance(
            require_non_empty(data.get("employee_id"), "Mã nhân viên"),
            require_non_empty(data.get("month"), "Tháng"),
            data.get("amount"),
            note=data.get("note"),
        )
        return jsonify({"success": True, "advance": advance_to_dict(advance)}), 201

    @app.route("/api/advances/<advance_id>", methods=["DELETE"], endpoint="api_delete_advance")
    def api_delete_advance(advance_id: str):
        container.advance_service.delete_advance(advance_id)
        return jsonify({"success": True})
