"""Backup the attendance snapshot.

Copies the JSON snapshot into backups/ with a timestamp in the file name.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    snapshot = Path(settings.SNAPSHOT_PATH)
    if not snapshot.is_absolute():
        snapshot = REPO_ROOT / snapshot
    if not snapshot.exists():
        raise SystemExit(f"No snapshot found at {snapshot}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{snapshot.stem}_{ts}.json"
    shutil.copy2(snapshot, out_file)
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
