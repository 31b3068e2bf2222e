from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.admin_auth_service

    @app.route("/api/admin/register", methods=["POST"], endpoint="register_admin")
    @json_endpoint
    def register_admin():
        data = json_body()
        svc.register(username=data.get("username"), password=data.get("password"), role=data.get("role"))
        return jsonify({"message": "Admin registered successfully."}), 201

    @app.route("/api/admin/login", methods=["POST"], endpoint="login_admin")
    @json_endpoint
    def login_admin():
        data = json_body()
        token = svc.login(username=data.get("username"), password=data.get("password"))
        return jsonify({"message": "Login successful", "token": token})
