from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/<employee_id>/<month>", methods=["GET"], endpoint="api_monthly_summary")
    def api_monthly_summary(employee_id: str, month: str):
        summary = container.payroll_summary_service.get_monthly_summary(employee_id, month)
        return jsonify({"success": True, "summary": summary.to_dict()})

    @app.route("/api/payroll/<employee_id>/<month>/archive", methods=["POST"], endpoint="api_archive_summary")
    def api_archive_summary(employee_id: str, month: str):
        summary = container.payroll_summary_service.archive_month(employee_id, month)
        return jsonify({"success": True, "summary": summary.to_dict()})
