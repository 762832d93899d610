from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.logging_utils import configure_logging
from .container import Container, build_container
from .core.exceptions import NotFoundError, ValidationError
from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .students.controller import register as register_students

logger = logging.getLogger(__name__)

_SETTINGS_KEYS = ("DATA_SEED", "DATA_DAYS", "DEFAULT_WINDOW_DAYS")


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        container = build_container(
            settings={key: getattr(settings, key) for key in _SETTINGS_KEYS if hasattr(settings, key)}
        )
    app.extensions["college_attendance"] = container

    logger.info(
        "app ready settings=%s students=%d records=%d",
        settings_module,
        len(container.store.students),
        len(container.store.records),
    )

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"}), 200

    register_students(app, container)
    register_attendance(app, container)
    register_analytics(app, container)

    return app
