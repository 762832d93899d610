from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.college_attendance.college_attendance.container import build_container


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Export the attendance analytics report")
    parser.add_argument("--window", type=int, default=30, help="look-back in days (7, 30 or 90)")
    parser.add_argument("--department", default="all")
    parser.add_argument("--format", choices=("csv", "xlsx"), default="xlsx")
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args(argv)

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        settings={"DATA_SEED": getattr(settings, "DATA_SEED", None), "DATA_DAYS": getattr(settings, "DATA_DAYS", 30)}
    )

    report = container.analytics_service.analytics_report(window_days=args.window, department=args.department)
    out = args.out or Path(f"attendance_report_{report.window_days}d.{args.format}")
    if args.format == "csv":
        out.write_bytes(container.report_exporter.to_csv(report))
    else:
        out.write_bytes(container.report_exporter.to_excel(report).getvalue())

    print(f"OK: wrote {out} ({len(report.students)} students, {len(report.daily)} days)")


if __name__ == "__main__":
    main()
