from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .holidays.service import HolidayService
from .interaction.factory import CellActionFactory
from .interaction.policy import InteractionPolicy
from .state.json_snapshot_repository import JsonSnapshotRepository
from .state.repository import SnapshotRepository
from .state.store import TrackerStore
from .stats.service import StatisticsService
from .stats.views import CalendarViewService
from .terms.service import TermService


@dataclass(frozen=True)
class Container:
    repository: SnapshotRepository
    store: TrackerStore

    term_service: TermService
    holiday_service: HolidayService
    stats_service: StatisticsService
    view_service: CalendarViewService
    interaction_policy: InteractionPolicy


def build_container(*, snapshot_path: str | Path | None = None, repository: SnapshotRepository | None = None) -> Container:
    if repository is None:
        if snapshot_path is None:
            raise ValueError("snapshot_path or repository is required")
        repository = JsonSnapshotRepository(snapshot_path)

    store = TrackerStore(repository)

    term_service = TermService(store)
    holiday_service = HolidayService(store)
    stats_service = StatisticsService(store)
    view_service = CalendarViewService(store, stats_service)
    interaction_policy = InteractionPolicy(
        term_service, holiday_service, factory=CellActionFactory(), lock=store.lock
    )

    return Container(
        repository=repository,
        store=store,
        term_service=term_service,
        holiday_service=holiday_service,
        stats_service=stats_service,
        view_service=view_service,
        interaction_policy=interaction_policy,
    )
