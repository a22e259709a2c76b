"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_tracker.attendance_tracker.common.datetime_utils import date_key, week_dates, week_start
from src.attendance_tracker.attendance_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(snapshot_path=settings.SNAPSHOT_PATH)

    print(container.stats_service.overall_stats())
    days = week_dates(week_start(date.today()))
    print(date_key(days[0]), container.stats_service.period_stats(days))


if __name__ == "__main__":
    main()
