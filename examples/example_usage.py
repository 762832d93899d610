"""Example: using the service layer directly (no Flask).

Controllers are a thin layer; the figures come from the services.
"""

import importlib

from config import get_settings_module

from src.college_attendance.college_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings={"DATA_SEED": settings.DATA_SEED, "DATA_DAYS": settings.DATA_DAYS})
    print(container.analytics_service.today_stats())
    for row in container.analytics_service.subject_performance(window_days=7):
        print(row)


if __name__ == "__main__":
    main()
