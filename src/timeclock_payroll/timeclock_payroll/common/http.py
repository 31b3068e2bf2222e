from __future__ import annotations

from functools import wraps
from typing import Any

from flask import g, jsonify, request

from ..core.exceptions import DomainError, ValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)


def error_response(exc: DomainError):
    return jsonify({"message": str(exc), "code": exc.code}), exc.status_code


def json_endpoint(view):
    """Map domain errors to JSON bodies; anything else is an internal error."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return jsonify({"message": "Internal server error.", "code": "internal_error"}), 500

    return wrapper


def make_admin_required(auth_service):
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            header = request.headers.get("Authorization", "")
            scheme, _, token = header.partition(" ")
            if scheme.lower() != "bearer":
                token = ""
            try:
                g.admin = auth_service.verify_token(token.strip())
            except DomainError as e:
                return error_response(e)
            return view(*args, **kwargs)

        return wrapper

    return admin_required


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object.")
    return data
