from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint, make_admin_required
from ..container import Container
from .service import employee_to_dict


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.admin_auth_service)
    svc = container.employee_service

    @app.route("/api/users/register", methods=["POST"], endpoint="register_employee")
    @json_endpoint
    def register_employee():
        data = json_body()
        svc.register(
            user_id=data.get("userId"),
            full_name=data.get("fullName"),
            phone=data.get("phone"),
            branch=data.get("branch"),
        )
        return jsonify({"message": "Registration successful. Waiting for approval."}), 201

    @app.route("/api/users", methods=["GET"], endpoint="list_employees")
    @admin_required
    @json_endpoint
    def list_employees():
        return jsonify([employee_to_dict(e) for e in svc.list_all()])

    @app.route("/api/users/branches", methods=["GET"], endpoint="list_branches")
    @json_endpoint
    def list_branches():
        return jsonify(list(svc.list_branches()))

    @app.route("/api/users/<user_id>", methods=["GET"], endpoint="get_employee")
    @json_endpoint
    def get_employee(user_id: str):
        return jsonify(employee_to_dict(svc.get_by_user_id(user_id)))

    @app.route("/api/users/<int:employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_required
    @json_endpoint
    def update_employee(employee_id: int):
        svc.update(employee_id, json_body())
        return jsonify({"message": "Employee updated successfully."})

    @app.route("/api/users/<int:employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    @json_endpoint
    def delete_employee(employee_id: int):
        svc.delete(employee_id)
        return jsonify({"message": "Employee deleted successfully."})
