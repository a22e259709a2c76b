from __future__ import annotations

from dataclasses import dataclass, field

from ..core.constants import DEFAULT_TERM
from ..terms.model import Term


@dataclass
class AppState:
    """Everything the tracker knows: all terms plus the global holidays."""

    current_term: int = DEFAULT_TERM
    terms: dict[int, Term] = field(default_factory=dict)
    holidays: set[str] = field(default_factory=set)

    def __post_init__(self):
        self.ensure_term(self.current_term)

    def ensure_term(self, term_id: int) -> Term:
        term = self.terms.get(term_id)
        if term is None:
            term = Term()
            self.terms[term_id] = term
        return term

    @property
    def term(self) -> Term:
        return self.ensure_term(self.current_term)
