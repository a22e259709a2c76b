"""Snapshot codec: AppState <-> plain JSON-compatible dict.

Layout::

    {
        "currentTerm": 1,
        "terms": {"1": {"subjects": [{"id", "name", "code"}],
                        "attendance": {"2026-01-05": {"<id>": {"attended": true, "note": ""}}}}},
        "holidays": {"2026-01-26": true}
    }

Absent keys mean empty collections. Decoding repairs what it can and drops
what it cannot read instead of failing.
"""
from __future__ import annotations

import logging
from typing import Any

from ..common.validators import require_date_key, require_term_id
from ..core.constants import DEFAULT_TERM
from ..core.exceptions import ValidationError
from ..terms.model import AttendanceEntry, Subject, Term
from .model import AppState

logger = logging.getLogger(__name__)


def to_snapshot(state: AppState) -> dict:
    return {
        "currentTerm": state.current_term,
        "terms": {str(term_id): _term_to_dict(term) for term_id, term in sorted(state.terms.items())},
        "holidays": {key: True for key in sorted(state.holidays)},
    }


def _term_to_dict(term: Term) -> dict:
    return {
        "subjects": [{"id": s.subject_id, "name": s.name, "code": s.code} for s in term.subjects],
        "attendance": {
            key: {sid: {"attended": e.attended, "note": e.note} for sid, e in day.items()}
            for key, day in sorted(term.attendance.items())
            if day
        },
    }


def from_snapshot(raw: Any) -> AppState:
    if not isinstance(raw, dict):
        logger.warning("Snapshot root is %s, not an object; starting empty", type(raw).__name__)
        return AppState()

    try:
        current = require_term_id(raw.get("currentTerm", DEFAULT_TERM))
    except ValidationError:
        logger.warning("Snapshot has invalid currentTerm %r; using %s", raw.get("currentTerm"), DEFAULT_TERM)
        current = DEFAULT_TERM

    terms: dict[int, Term] = {}
    for key, value in _as_dict(raw.get("terms"), "terms").items():
        try:
            term_id = require_term_id(key)
        except ValidationError:
            logger.warning("Dropping term with invalid id %r", key)
            continue
        terms[term_id] = _term_from_dict(value, term_id)

    holidays = set()
    for key, flag in _as_dict(raw.get("holidays"), "holidays").items():
        if flag is not True:
            continue
        try:
            holidays.add(require_date_key(key))
        except ValidationError:
            logger.warning("Dropping holiday with invalid date %r", key)

    # AppState creates the current term when the snapshot lacks it.
    return AppState(current_term=current, terms=terms, holidays=holidays)


def _term_from_dict(raw: Any, term_id: int) -> Term:
    raw = _as_dict(raw, f"term {term_id}")
    term = Term()

    seen: set[str] = set()
    for item in raw.get("subjects") or []:
        if not isinstance(item, dict) or not str(item.get("name") or "").strip() or item.get("id") in (None, ""):
            logger.warning("Dropping malformed subject %r in term %s", item, term_id)
            continue
        subject_id = str(item["id"])
        if subject_id in seen:
            logger.warning("Dropping duplicate subject id %s in term %s", subject_id, term_id)
            continue
        seen.add(subject_id)
        term.subjects.append(Subject(subject_id=subject_id, name=str(item["name"]).strip(), code=str(item.get("code") or "")))

    for key, day in _as_dict(raw.get("attendance"), f"term {term_id} attendance").items():
        try:
            day_key = require_date_key(key)
        except ValidationError:
            logger.warning("Dropping attendance for invalid date %r in term %s", key, term_id)
            continue
        for subject_id, entry in _as_dict(day, f"term {term_id} {day_key}").items():
            if not isinstance(entry, dict):
                logger.warning("Dropping malformed entry %s/%s in term %s", day_key, subject_id, term_id)
                continue
            term.put_entry(
                day_key,
                str(subject_id),
                AttendanceEntry(attended=bool(entry.get("attended")), note=str(entry.get("note") or "")),
            )
    return term


def _as_dict(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning("Ignoring %s: expected an object, got %s", what, type(value).__name__)
        return {}
    return value
