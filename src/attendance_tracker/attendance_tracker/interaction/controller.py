from __future__ import annotations

from dataclasses import asdict
from datetime import datetime

from flask import Flask, jsonify, request

from ..common.validators import clean_text, require_date_key
from ..container import Container
from ..core.exceptions import ValidationError


def _parse_timestamp(value) -> datetime | None:
    """Client timestamps are epoch milliseconds."""
    if value in (None, ""):
        return None
    try:
        return datetime.fromtimestamp(float(value) / 1000.0)
    except (TypeError, ValueError, OverflowError, OSError):
        raise ValidationError(f"Invalid timestamp '{value}'")


def register(app: Flask, container: Container) -> None:
    policy = container.interaction_policy

    def _cell_args() -> tuple[str, str, dict]:
        data = request.get_json(silent=True) or {}
        subject_id = clean_text(data.get("subject_id"))
        if not subject_id:
            raise ValidationError("subject_id is required")
        return subject_id, require_date_key(data.get("date")), data

    def _cell_state(subject_id: str, date_key: str) -> dict:
        entry = container.term_service.get_attendance(subject_id, date_key)
        return {
            "subject_id": subject_id,
            "date": date_key,
            "holiday": container.holiday_service.is_holiday(date_key),
            "entry": asdict(entry) if entry else None,
        }

    @app.route("/api/cells/click", methods=["POST"], endpoint="api_cell_click")
    def api_cell_click():
        subject_id, date_key, data = _cell_args()
        outcome = policy.click(subject_id, date_key, at=_parse_timestamp(data.get("timestamp")))
        return jsonify({"outcome": outcome.value, "cell": _cell_state(subject_id, date_key)})

    @app.route("/api/cells/monthly-click", methods=["POST"], endpoint="api_cell_monthly_click")
    def api_cell_monthly_click():
        subject_id, date_key, _ = _cell_args()
        outcome = policy.monthly_click(subject_id, date_key)
        return jsonify({"outcome": outcome.value, "cell": _cell_state(subject_id, date_key)})

    @app.route("/api/cells/alternate-click", methods=["POST"], endpoint="api_cell_alternate_click")
    def api_cell_alternate_click():
        subject_id, date_key, data = _cell_args()
        ctx = policy.alternate_click(subject_id, date_key, modifier=bool(data.get("modifier")))
        return jsonify({
            "note_context": asdict(ctx) if ctx else None,
            "cell": _cell_state(subject_id, date_key),
        })

    @app.route("/api/notes/save", methods=["POST"], endpoint="api_note_save")
    def api_note_save():
        data = request.get_json(silent=True) or {}
        ctx = policy.note_context
        saved = policy.save_note(str(data.get("note") or ""))
        body = {"success": saved}
        if ctx is not None:
            body["cell"] = _cell_state(ctx.subject_id, ctx.date_key)
        return jsonify(body)

    @app.route("/api/notes/cancel", methods=["POST"], endpoint="api_note_cancel")
    def api_note_cancel():
        policy.cancel_note()
        return jsonify({"success": True})
