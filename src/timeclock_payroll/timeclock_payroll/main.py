from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .admins.controller import register as register_admins
from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_ADMIN_TOKEN_MAX_AGE, DEFAULT_BONUS_MAX_ABSENCE_DAYS, DEFAULT_GEOFENCE_RADIUS
from .core.logging import configure_logging, get_logger
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_admin, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll
from .stores.controller import register as register_stores

logger = get_logger(__name__)

_DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=_DATABASE_DIR / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=_DATABASE_DIR / "seed.sql")
            ensure_demo_admin(db_config)
            logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            secret_key=app.secret_key,
            geofence_radius=getattr(settings, "GEOFENCE_RADIUS", DEFAULT_GEOFENCE_RADIUS),
            bonus_max_absence_days=getattr(settings, "BONUS_MAX_ABSENCE_DAYS", DEFAULT_BONUS_MAX_ABSENCE_DAYS),
            token_max_age=int(getattr(settings, "ADMIN_TOKEN_MAX_AGE", DEFAULT_ADMIN_TOKEN_MAX_AGE)),
        )

    app.extensions["container"] = container

    register_employees(app, container)
    register_stores(app, container)
    register_attendance(app, container)
    register_payroll(app, container)
    register_admins(app, container)

    @app.errorhandler(404)
    def not_found(_e):
        return jsonify({"message": "Not found.", "code": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_e):
        return jsonify({"message": "Method not allowed.", "code": "method_not_allowed"}), 405

    return app
