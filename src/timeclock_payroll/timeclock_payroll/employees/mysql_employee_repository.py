from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

_COLUMNS = "id, userId, fullName, phone, branch, status, daily_rate, bonus, compensation, employee_type"


def _status(value) -> EmployeeStatus:
    try:
        return EmployeeStatus(str(value or "").strip().lower())
    except ValueError:
        # Legacy free-text statuses are never "approved".
        return EmployeeStatus.INACTIVE


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["id"]),
        user_id=str(r["userId"]),
        full_name=r["fullName"],
        phone=r.get("phone") or "",
        branch=r.get("branch") or "",
        status=_status(r.get("status")),
        daily_rate=r.get("daily_rate"),
        bonus=r.get("bonus"),
        compensation=r.get("compensation"),
        employee_type=r.get("employee_type"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registered WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registered WHERE userId=%s", (str(user_id),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM registered ORDER BY id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, *, user_id: str, full_name: str, phone: str, branch: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO registered(userId, fullName, phone, branch, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (user_id, full_name, phone, branch, EmployeeStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, changes: EmployeeUpdate) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE registered
                SET fullName=%s, phone=%s, branch=%s, status=%s,
                    daily_rate=%s, bonus=%s, compensation=%s, employee_type=%s
                WHERE id=%s
                """,
                (
                    changes.full_name,
                    changes.phone,
                    changes.branch,
                    changes.status.value,
                    changes.daily_rate,
                    changes.bonus,
                    changes.compensation,
                    changes.employee_type,
                    int(employee_id),
                ),
            )
            # MySQL reports 0 affected rows when nothing changed; recheck existence.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM registered WHERE id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_with_sessions(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM records WHERE user_id = (SELECT userId FROM registered WHERE id=%s)",
                (int(employee_id),),
            )
            cur.execute("DELETE FROM registered WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def list_branches(self) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT DISTINCT branch FROM registered WHERE branch IS NOT NULL AND branch != '' ORDER BY branch"
            )
            return [r["branch"] for r in fetchall(cur)]
