from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common.observable import log_changes
from .container import build_container
from .core.exceptions import NotFoundError, ValidationError
from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .dashboard.controller import register as register_dashboard
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s", settings_module)

    container = build_container(load_sample=bool(getattr(settings, "LOAD_SAMPLE_DATA", False)))
    container.manager.subscribe(log_changes)
    app.extensions["classroom_admin"] = container

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    register_dashboard(app, container)
    register_students(app, container)
    register_classes(app, container)
    register_attendance(app, container)

    return app
