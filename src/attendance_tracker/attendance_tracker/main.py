from __future__ import annotations

import importlib
import logging
from typing import Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .core.exceptions import SnapshotError, ValidationError
from .holidays.controller import register as register_holidays
from .interaction.controller import register as register_interaction
from .logging_config import init_logging
from .stats.controller import register as register_stats
from .terms.controller import register as register_terms

logger = logging.getLogger(__name__)

_SETTINGS = ("SECRET_KEY", "SNAPSHOT_PATH", "DEBUG", "TESTING", "LOG_LEVEL", "LOG_FORMAT")


def create_app(overrides: Optional[Mapping] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in _SETTINGS:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config.update(overrides or {})
    app.secret_key = app.config["SECRET_KEY"]

    init_logging(app)
    logger.info("settings=%s snapshot=%s", settings_module, app.config["SNAPSHOT_PATH"])

    container = build_container(snapshot_path=app.config["SNAPSHOT_PATH"])
    app.extensions["attendance_tracker"] = container

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(SnapshotError)
    def _snapshot_error(e: SnapshotError):
        return jsonify({"success": False, "message": str(e)}), 500

    register_terms(app, container)
    register_holidays(app, container)
    register_interaction(app, container)
    register_stats(app, container)

    return app
