from __future__ import annotations

from flask import Flask, jsonify

from ..common.validators import require_date_key
from ..container import Container


def register(app: Flask, container: Container) -> None:
    holidays = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="api_holidays")
    def api_holidays():
        return jsonify({"holidays": holidays.list_holidays()})

    @app.route("/api/holidays/<date_key>/toggle", methods=["POST"], endpoint="api_toggle_holiday")
    def api_toggle_holiday(date_key: str):
        key = require_date_key(date_key)
        return jsonify({"success": True, "date": key, "holiday": holidays.toggle_holiday(key)})
