from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, rollback on any error."""
    conn = conn_factory.connect()
    try:
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


@dataclass(frozen=True)
class WriteResult:
    lastrowid: Optional[int]
    rowcount: int


def execute_write(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> WriteResult:
    """Run one INSERT/UPDATE/DELETE in its own transaction."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(sql, tuple(params))
        return WriteResult(lastrowid=cur.lastrowid, rowcount=cur.rowcount)


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return fetchone(cur)


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(sql, tuple(params))
        return fetchall(cur)
