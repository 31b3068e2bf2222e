from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Store
from .repository import StoreRepository


def _to_store(r: dict) -> Store:
    return Store(
        store_id=int(r["id"]),
        name=r["name"],
        latitude=to_decimal(r["latitude"]),
        longitude=to_decimal(r["longitude"]),
    )


class MySQLStoreRepository(StoreRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Store]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, latitude, longitude FROM stores ORDER BY id ASC")
            return [_to_store(r) for r in fetchall(cur)]

    def get_by_id(self, store_id: int) -> Optional[Store]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, latitude, longitude FROM stores WHERE id=%s", (int(store_id),))
            row = fetchone(cur)
            return _to_store(row) if row else None

    def find_by_name(self, name: str) -> Sequence[Store]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, latitude, longitude FROM stores WHERE name=%s ORDER BY id ASC",
                (name,),
            )
            # The column collation ignores case and trailing spaces; branch names must match exactly.
            return [_to_store(r) for r in fetchall(cur) if r["name"] == name]

    def create(self, *, name: str, latitude: Decimal, longitude: Decimal) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO stores(name, latitude, longitude) VALUES(%s,%s,%s)",
                (name, latitude, longitude),
            )
            return int(cur.lastrowid)

    def update(self, store_id: int, *, name: str, latitude: Decimal, longitude: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE stores SET name=%s, latitude=%s, longitude=%s WHERE id=%s",
                (name, latitude, longitude, int(store_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM stores WHERE id=%s", (int(store_id),))
            return fetchone(cur) is not None

    def delete(self, store_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM stores WHERE id=%s", (int(store_id),))
            return cur.rowcount > 0
