from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Iterator, Optional, Sequence

from ..common.validators import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, db_transaction, fetchall, fetchone
from .model import AttendanceSession
from .repository import SessionRepository, SessionUnitOfWork

_COLUMNS = "id, user_id, clock_in, clock_out, latitude, longitude, total_hours"


def _to_session(r: dict) -> AttendanceSession:
    total_hours = r.get("total_hours")
    return AttendanceSession(
        session_id=int(r["id"]),
        user_id=str(r["user_id"]),
        clock_in=r["clock_in"],
        clock_out=r.get("clock_out"),
        latitude=to_decimal(r["latitude"]),
        longitude=to_decimal(r["longitude"]),
        total_hours=to_decimal(total_hours) if total_hours is not None else None,
    )


class _MySQLSessionUnitOfWork(SessionUnitOfWork):
    def __init__(self, cur, user_id: str):
        self._cur = cur
        self._user_id = user_id

    def find_open(self) -> Optional[AttendanceSession]:
        self._cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM records
            WHERE user_id=%s AND clock_out IS NULL
            ORDER BY clock_in ASC
            LIMIT 1
            FOR UPDATE
            """,
            (self._user_id,),
        )
        row = fetchone(self._cur)
        return _to_session(row) if row else None

    def open_session(self, *, clock_in: datetime, latitude: Decimal, longitude: Decimal) -> AttendanceSession:
        self._cur.execute(
            "INSERT INTO records(user_id, clock_in, latitude, longitude) VALUES(%s,%s,%s,%s)",
            (self._user_id, clock_in, latitude, longitude),
        )
        return AttendanceSession(
            session_id=int(self._cur.lastrowid),
            user_id=self._user_id,
            clock_in=clock_in,
            clock_out=None,
            latitude=latitude,
            longitude=longitude,
        )

    def close_session(
        self,
        session: AttendanceSession,
        *,
        clock_out: datetime,
        total_hours: Decimal,
    ) -> AttendanceSession:
        self._cur.execute(
            "UPDATE records SET clock_out=%s, total_hours=%s WHERE id=%s AND clock_out IS NULL",
            (clock_out, total_hours, session.session_id),
        )
        return AttendanceSession(
            session_id=session.session_id,
            user_id=session.user_id,
            clock_in=session.clock_in,
            clock_out=clock_out,
            latitude=session.latitude,
            longitude=session.longitude,
            total_hours=total_hours,
        )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def locked(self, user_id: str) -> Iterator[SessionUnitOfWork]:
        with db_transaction(self._conn_factory) as (_, cur):
            # The employee row is the per-employee serialization point; concurrent
            # clock events for the same employee queue here until commit.
            cur.execute("SELECT id FROM registered WHERE userId=%s FOR UPDATE", (user_id,))
            fetchall(cur)
            yield _MySQLSessionUnitOfWork(cur, user_id)

    def find_open(self, user_id: str) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM records WHERE user_id=%s AND clock_out IS NULL ORDER BY clock_in ASC LIMIT 1",
                (user_id,),
            )
            row = fetchone(cur)
            return _to_session(row) if row else None

    def list_for_user(self, user_id: str) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM records WHERE user_id=%s ORDER BY clock_in ASC, id ASC",
                (user_id,),
            )
            return [_to_session(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM records ORDER BY clock_in ASC, id ASC")
            return [_to_session(r) for r in fetchall(cur)]

    def list_hours_in_period(self, user_id: str, *, start_date: date, end_date: date) -> Sequence[Optional[Decimal]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT total_hours
                FROM records
                WHERE user_id=%s AND DATE(clock_in) BETWEEN %s AND %s
                ORDER BY clock_in ASC
                """,
                (user_id, start_date, end_date),
            )
            return [
                to_decimal(r["total_hours"]) if r.get("total_hours") is not None else None
                for r in fetchall(cur)
            ]
