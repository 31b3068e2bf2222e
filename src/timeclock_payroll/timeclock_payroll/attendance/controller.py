from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint, make_admin_required
from ..container import Container
from .service import clock_result_to_dict, session_to_dict


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.admin_auth_service)
    svc = container.attendance_service

    @app.route("/api/clock/clock", methods=["POST"], endpoint="clock")
    @json_endpoint
    def clock():
        data = json_body()
        result = svc.record_event(data.get("user_id"), data.get("latitude"), data.get("longitude"))
        return jsonify(clock_result_to_dict(result)), (201 if result.opened else 200)

    @app.route("/api/clock/records", methods=["GET"], endpoint="list_sessions")
    @admin_required
    @json_endpoint
    def list_sessions():
        return jsonify([session_to_dict(s) for s in svc.list_all()])

    @app.route("/api/clock/records/<user_id>", methods=["GET"], endpoint="employee_sessions")
    @json_endpoint
    def employee_sessions(user_id: str):
        return jsonify([session_to_dict(s) for s in svc.history(user_id)])
