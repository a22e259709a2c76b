from __future__ import annotations

import logging
import threading

from ..terms.model import Term
from .model import AppState
from .repository import SnapshotRepository

logger = logging.getLogger(__name__)


class TrackerStore:
    """Explicit state context shared by the services.

    Loads once on construction (falling back to an empty state) and saves only
    when a caller commits after a mutation. Callers hold ``lock`` around a
    read-modify-commit sequence; it is re-entrant so a locked caller may call
    services that lock again.
    """

    def __init__(self, repository: SnapshotRepository):
        self._repository = repository
        self.lock = threading.RLock()
        loaded = repository.load()
        self.state = loaded if loaded is not None else AppState()
        # Snapshot decoding already repairs, but a hand-built state may not.
        self.state.ensure_term(self.state.current_term)

    @property
    def term(self) -> Term:
        return self.state.term

    @property
    def holidays(self) -> set[str]:
        return self.state.holidays

    def commit(self) -> None:
        with self.lock:
            self._repository.save(self.state)
        logger.debug("State saved (term=%s)", self.state.current_term)
