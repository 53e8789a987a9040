from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/audit-logs", methods=["GET"], endpoint="audit_logs")
    def audit_logs():
        try:
            entries = container.audit_log.recent(request.args.get("limit"))
            return jsonify([e.to_dict() for e in entries])
        except Exception as e:
            return error_response(e)
