"""Run payroll from the command line (service layer, no Flask).

    python scripts/run_payroll.py 2026-01-01 2026-01-31
    python scripts/run_payroll.py 2026-01-01 2026-01-15 --preview
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

from src.timeclock_payroll.timeclock_payroll.common.datetime_utils import parse_iso_date
from src.timeclock_payroll.timeclock_payroll.container import build_container
from src.timeclock_payroll.timeclock_payroll.core.logging import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Compute payroll for an inclusive date range.")
    parser.add_argument("start_date", type=parse_iso_date)
    parser.add_argument("end_date", type=parse_iso_date)
    parser.add_argument("--preview", action="store_true", help="compute only, do not write payroll rows")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(
        db_config=settings.DB_CONFIG,
        secret_key=settings.SECRET_KEY,
        bonus_max_absence_days=getattr(settings, "BONUS_MAX_ABSENCE_DAYS", "2"),
    )

    svc = container.payroll_report_service
    if args.preview:
        lines = svc.compute_period(start=args.start_date, end=args.end_date)
    else:
        lines = svc.run_payroll(start=args.start_date, end=args.end_date).lines

    for line in lines:
        print(
            f"{line.employee_id:>5}  {line.full_name:<30} {line.branch:<15} "
            f"days={line.total_days_worked:<5} absent={line.absence_days:<5} "
            f"salary={line.salary:<10} bonus={line.bonus:<8} comp={line.compensation:<8} total={line.total_pay}"
        )


if __name__ == "__main__":
    main()
