from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import ClockAction


@dataclass(frozen=True)
class AttendanceSession:
    """One clock-in/clock-out pair.

    `clock_out is None` means the session is still open. `total_hours` is
    fixed when the session is closed and never recomputed.
    """

    session_id: int
    user_id: str
    clock_in: datetime
    clock_out: Optional[datetime]
    latitude: Decimal
    longitude: Decimal
    total_hours: Optional[Decimal] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None


@dataclass(frozen=True)
class ClockResult:
    action: ClockAction
    session: AttendanceSession

    @property
    def opened(self) -> bool:
        return self.action == ClockAction.OPENED
