from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import ContextManager, Optional, Protocol, Sequence

from .model import AttendanceSession


class SessionUnitOfWork(Protocol):
    """Session operations bound to one per-employee critical section."""

    def find_open(self) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def open_session(self, *, clock_in: datetime, latitude: Decimal, longitude: Decimal) -> AttendanceSession:
        raise NotImplementedError

    def close_session(
        self,
        session: AttendanceSession,
        *,
        clock_out: datetime,
        total_hours: Decimal,
    ) -> AttendanceSession:
        raise NotImplementedError


class SessionRepository(Protocol):
    def locked(self, user_id: str) -> ContextManager[SessionUnitOfWork]:
        """Serialize open/close decisions for one employee.

        Everything done through the yielded unit of work commits together on
        exit; no other caller can observe or change this employee's open
        session in between.
        """

        raise NotImplementedError

    def find_open(self, user_id: str) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_for_user(self, user_id: str) -> Sequence[AttendanceSession]:
        """Sessions of one employee, ascending by clock_in."""

        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceSession]:
        raise NotImplementedError

    def list_hours_in_period(self, user_id: str, *, start_date: date, end_date: date) -> Sequence[Optional[Decimal]]:
        """total_hours of every session whose clock_in date is in [start, end].

        Open sessions are included with `None`.
        """

        raise NotImplementedError
