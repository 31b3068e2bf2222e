from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | int = "INFO") -> None:
    """Install a single stream handler on the package logger.

    Safe to call more than once (e.g. one Flask app per test).
    """
    global _configured

    root = logging.getLogger("timeclock_payroll")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _configured = True


def get_logger(name: str) -> logging.Logger:
    # Module names look like "src.timeclock_payroll.timeclock_payroll.x" when
    # imported from the repo root; keep everything under one logger tree.
    short = name.split("timeclock_payroll.")[-1] if "timeclock_payroll." in name else name
    return logging.getLogger(f"timeclock_payroll.{short}")
