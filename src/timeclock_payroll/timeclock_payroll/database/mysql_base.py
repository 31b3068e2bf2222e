from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def _unit(conn_factory: DatabaseConnection, *, dictionary: bool, explicit: bool):
    conn = conn_factory.connect()
    try:
        if explicit:
            conn.start_transaction()
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection and cursor; commit on success, rollback on error."""
    return _unit(conn_factory, dictionary=dictionary, explicit=False)


def db_transaction(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Like db_cursor, but with an explicit START TRANSACTION.

    Row locks taken with SELECT ... FOR UPDATE inside the block are held until
    the commit (or rollback) on exit.
    """
    return _unit(conn_factory, dictionary=dictionary, explicit=True)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])
