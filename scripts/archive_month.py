"""Freeze monthly payroll summaries once a month is closed.

Usage: python scripts/archive_month.py 2026-09 emp-001 emp-002
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container
from src.attendance_payroll.attendance_payroll.logging_config import configure_logging


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Archive monthly payroll summaries")
    parser.add_argument("month", help="YYYY-MM")
    parser.add_argument("employee_ids", nargs="+")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(db_config=dict(settings.DB_CONFIG))

    for employee_id in args.employee_ids:
        summary = container.payroll_summary_service.archive_month(employee_id, args.month)
        print(
            f"OK: {summary.archive_id} final={summary.final_salary:.2f} "
            f"advances={summary.total_advances:.2f} net={summary.net_salary_after_advances:.2f}"
        )


if __name__ == "__main__":
    main()
