from __future__ import annotations

from typing import Optional, Protocol

from .model import AppState


class SnapshotRepository(Protocol):
    def load(self) -> Optional[AppState]:
        """Return the stored state, or None when nothing usable is stored."""

        raise NotImplementedError

    def save(self, state: AppState) -> None:
        raise NotImplementedError
