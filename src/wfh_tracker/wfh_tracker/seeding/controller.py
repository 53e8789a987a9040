from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response
from ..container import Container
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reset-database", methods=["POST"], endpoint="reset_database")
    def reset_database():
        try:
            if not container.allow_reset:
                raise AuthorizationError("Database reset is disabled in this environment")
            inserted = container.seed_service.reset()
            return jsonify({"message": "Database reset and reseeded successfully", "seeded": inserted})
        except Exception as e:
            return error_response(e)
