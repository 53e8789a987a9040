from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/status/monthly/<value>", methods=["GET"], endpoint="status_monthly")
    def status_monthly(value: str):
        try:
            records = container.status_service.get_monthly_statuses(value)
            return jsonify([r.to_dict() for r in records])
        except Exception as e:
            return error_response(e)

    @app.route("/api/status/count", methods=["GET"], endpoint="status_count")
    def status_count():
        try:
            return jsonify({"count": container.status_service.count_all()})
        except Exception as e:
            return error_response(e)

    @app.route("/api/status/<email>/<date>", methods=["GET"], endpoint="status_get")
    def status_get(email: str, date: str):
        try:
            record = container.status_service.get_status(email, date)
            return jsonify(record.to_dict() if record else None)
        except Exception as e:
            return error_response(e)

    @app.route("/api/status", methods=["POST"], endpoint="status_set")
    def status_set():
        try:
            data = request.get_json(silent=True) or {}
            container.status_service.set_status(
                email=data.get("email", ""),
                date=data.get("date", ""),
                status=data.get("status", ""),
                comment=data.get("comment"),
            )
            return jsonify({"success": True})
        except Exception as e:
            return error_response(e)

    @app.route("/api/status/<email>/<date>", methods=["DELETE"], endpoint="status_clear")
    def status_clear(email: str, date: str):
        try:
            container.status_service.clear_status(email=email, date=date)
            return jsonify({"success": True})
        except Exception as e:
            return error_response(e)
