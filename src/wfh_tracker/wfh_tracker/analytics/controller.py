from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics/daily/<day>", methods=["GET"], endpoint="analytics_daily")
    def analytics_daily(day: str):
        try:
            return jsonify(container.analytics_service.dashboard_stats(day))
        except Exception as e:
            return error_response(e)

    @app.route("/api/analytics/monthly/<value>", methods=["GET"], endpoint="analytics_monthly")
    def analytics_monthly(value: str):
        try:
            return jsonify(container.analytics_service.monthly_summary(value))
        except Exception as e:
            return error_response(e)

    @app.route("/api/analytics/hierarchy/<day>", methods=["GET"], endpoint="analytics_hierarchy")
    def analytics_hierarchy(day: str):
        try:
            return jsonify(container.analytics_service.hierarchy_day_view(day))
        except Exception as e:
            return error_response(e)
