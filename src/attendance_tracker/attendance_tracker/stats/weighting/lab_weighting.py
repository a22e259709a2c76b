from __future__ import annotations

from ...core.constants import DEFAULT_WEIGHT, LAB_MARKER, LAB_WEIGHT
from ...terms.model import Subject
from .base import SubjectWeighting


class LabNameWeighting(SubjectWeighting):
    """Lab rule: a name containing "lab" (any case) counts double."""

    def weight(self, subject: Subject | None) -> int:
        if subject and LAB_MARKER in subject.name.upper():
            return LAB_WEIGHT
        return DEFAULT_WEIGHT
