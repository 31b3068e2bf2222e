from __future__ import annotations

from typing import Optional

from ..core.enums import AdminRole
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, username, password, role FROM admins WHERE username=%s", (username,))
            row = fetchone(cur)
            if not row:
                return None
            return Admin(
                admin_id=int(row["id"]),
                username=row["username"],
                password_hash=row["password"],
                role=AdminRole(row["role"]),
            )

    def create(self, *, username: str, password_hash: str, role: AdminRole) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO admins(username, password, role) VALUES(%s,%s,%s)",
                (username, password_hash, role.value),
            )
            return int(cur.lastrowid)
