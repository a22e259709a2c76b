from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..container import Container
from .model import Subject


def _subject_json(s: Subject) -> dict:
    return {"id": s.subject_id, "name": s.name, "code": s.code}


def register(app: Flask, container: Container) -> None:
    terms = container.term_service

    @app.route("/api/state", methods=["GET"], endpoint="api_state")
    def api_state():
        return jsonify({
            "term": terms.current_term,
            "terms": terms.known_terms(),
            "subjects": [_subject_json(s) for s in terms.list_subjects()],
            "holidays": container.holiday_service.list_holidays(),
        })

    @app.route("/api/term", methods=["POST"], endpoint="api_change_term")
    def api_change_term():
        data = request.get_json(silent=True) or {}
        term_id = terms.change_term(data.get("term"))
        return jsonify({"success": True, "term": term_id})

    @app.route("/api/subjects", methods=["GET"], endpoint="api_subjects")
    def api_subjects():
        return jsonify({"subjects": [_subject_json(s) for s in terms.list_subjects()]})

    @app.route("/api/subjects", methods=["POST"], endpoint="api_add_subject")
    def api_add_subject():
        data = request.get_json(silent=True) or {}
        subject = terms.add_subject(data.get("name") or "", data.get("code") or "")
        if subject is None:
            return jsonify({"success": False, "subject": None})
        return jsonify({"success": True, "subject": _subject_json(subject)}), 201

    @app.route("/api/subjects/<subject_id>", methods=["DELETE"], endpoint="api_delete_subject")
    def api_delete_subject(subject_id: str):
        confirmed = request.args.get("confirm", "").lower() in {"1", "true", "yes"}
        deleted = terms.delete_subject(subject_id, confirmed=confirmed)
        return jsonify({"success": deleted, "confirmed": confirmed})

    @app.route("/api/subjects/<subject_id>/stats", methods=["GET"], endpoint="api_subject_stats")
    def api_subject_stats(subject_id: str):
        exclude = request.args.get("exclude_holidays", "1").lower() not in {"0", "false", "no"}
        stats = container.stats_service.subject_stats(subject_id, exclude_holidays=exclude)
        return jsonify({**asdict(stats), "status": container.stats_service.status_class(stats.percentage).value})
