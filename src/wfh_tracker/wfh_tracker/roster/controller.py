from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response
from ..container import Container


def tree_to_dict(nodes: list[dict]) -> list[dict]:
    return [{**n["person"].to_dict(), "reports": tree_to_dict(n["reports"])} for n in nodes]


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    def users_list():
        try:
            return jsonify([p.to_dict() for p in container.roster_service.list_people()])
        except Exception as e:
            return error_response(e)

    @app.route("/api/users/hierarchy", methods=["GET"], endpoint="users_hierarchy")
    def users_hierarchy():
        try:
            svc = container.roster_service
            return jsonify({"root": svc.find_root(), "tree": tree_to_dict(svc.build_tree())})
        except Exception as e:
            return error_response(e)

    @app.route("/api/users/<full_name>/reports", methods=["GET"], endpoint="users_reports")
    def users_reports(full_name: str):
        try:
            reports = sorted(container.roster_service.direct_reports(full_name), key=lambda p: p.full_name.casefold())
            return jsonify([p.to_dict() for p in reports])
        except Exception as e:
            return error_response(e)
