from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import CLEAR_CLICK_COUNT
from .actions.base import CellAction
from .actions.clear_action import ClearEntryAction, ClearHolidayAction
from .actions.toggle_action import BlockedAction, ToggleAction


@dataclass
class CellActionFactory:
    """Factory Pattern: choose the cell action from click count and holiday flag."""

    clear_count: int = CLEAR_CLICK_COUNT

    def for_click(self, *, count: int, holiday: bool) -> CellAction:
        if count >= self.clear_count:
            return ClearHolidayAction() if holiday else ClearEntryAction()
        if holiday:
            return BlockedAction()
        return ToggleAction()

    def for_single_toggle(self, *, holiday: bool) -> CellAction:
        return BlockedAction() if holiday else ToggleAction()
