from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, json_endpoint, make_admin_required
from ..container import Container
from .service import store_to_dict


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.admin_auth_service)
    svc = container.store_service

    @app.route("/api/stores", methods=["GET"], endpoint="list_stores")
    @json_endpoint
    def list_stores():
        return jsonify([store_to_dict(s) for s in svc.list_all()])

    @app.route("/api/stores", methods=["POST"], endpoint="create_store")
    @admin_required
    @json_endpoint
    def create_store():
        store_id = svc.create(json_body())
        return jsonify({"message": "Store added successfully.", "id": store_id}), 201

    @app.route("/api/stores/<int:store_id>", methods=["PUT"], endpoint="update_store")
    @admin_required
    @json_endpoint
    def update_store(store_id: int):
        svc.update(store_id, json_body())
        return jsonify({"message": "Store updated successfully."})

    @app.route("/api/stores/<int:store_id>", methods=["DELETE"], endpoint="delete_store")
    @admin_required
    @json_endpoint
    def delete_store(store_id: int):
        svc.delete(store_id)
        return jsonify({"message": "Store deleted successfully."})
