from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.datetime_utils import parse_time_of_day
from ..core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, rollback on failure.

    Driver errors surface as :class:`StoreError` with the original as cause.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.error("Database connection failed: %s", exc)
        raise StoreError(f"Database connection failed: {exc}", cause=exc) from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        conn.rollback()
        logger.error("Database operation failed: %s", exc)
        raise StoreError(f"Database operation failed: {exc}", cause=exc) from exc
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def nested(row: Dict[str, Any], prefix: str) -> Optional[Dict[str, Any]]:
    """Collapse the ``{prefix}_*`` columns of an outer join into one dict.

    Returns ``None`` when every joined column is NULL (no joined row), so
    callers always get a plain dict or ``None``.
    """

    marker = f"{prefix}_"
    out = {k[len(marker):]: v for k, v in row.items() if k.startswith(marker)}
    if not out or all(v is None for v in out.values()):
        return None
    return out


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values across connector implementations.

    mysql-connector can return TIME as:
    - datetime.time
    - datetime.timedelta
    - string (e.g. '08:30:00' or '08:30')
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        hours = total_seconds // 3600
        minutes = (total_seconds % 3600) // 60
        seconds = total_seconds % 60
        return time(hour=hours, minute=minutes, second=seconds)

    if isinstance(value, str):
        return parse_time_of_day(value)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
