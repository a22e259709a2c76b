from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.container import build_container

DEMO_SUBJECTS = [
    ("Mathematics", "MA101"),
    ("Physics", "PH101"),
    ("Physics LAB", "PH101L"),
    ("Programming", "CS101"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(snapshot_path=settings.SNAPSHOT_PATH)
    terms = container.term_service

    existing = {s.name for s in terms.list_subjects()}
    added = [terms.add_subject(name, code) for name, code in DEMO_SUBJECTS if name not in existing]

    print(f"OK: Seeded term {terms.current_term} -> {settings.SNAPSHOT_PATH} (added={len(added)})")


if __name__ == "__main__":
    main()
