from __future__ import annotations

from abc import ABC, abstractmethod

from ...terms.model import Subject


class SubjectWeighting(ABC):
    """Weighting interface (Strategy Pattern for statistics)."""

    @abstractmethod
    def weight(self, subject: Subject | None) -> int:
        raise NotImplementedError
