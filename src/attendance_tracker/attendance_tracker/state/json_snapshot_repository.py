from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import SnapshotError
from .model import AppState
from .repository import SnapshotRepository
from .snapshot import from_snapshot, to_snapshot

logger = logging.getLogger(__name__)


class JsonSnapshotRepository(SnapshotRepository):
    """Keeps the whole AppState in one UTF-8 JSON file."""

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[AppState]:
        if not self._path.exists():
            logger.info("No snapshot at %s; starting empty", self._path)
            return None
        try:
            with self._path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError):
            logger.exception("Failed to read snapshot %s; starting empty", self._path)
            return None
        return from_snapshot(raw)

    def save(self, state: AppState) -> None:
        tmp_path: Optional[Path] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # one temp file per save, in the target directory
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=self._path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                json.dump(to_snapshot(state), tmp, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            logger.exception("Failed to save snapshot %s", self._path)
            raise SnapshotError(f"Could not save data: {e}") from e
