# -*- coding: utf-8 -*-
"""Tracking — SQLite state for active sessions and their point logs."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime
from typing import List, Optional

from ..app_db import db_conn
from ..config import settings
from ..routes import LocationSample
from .models import ActiveTracking

logger = logging.getLogger(__name__)


def _row_to_active(row: sqlite3.Row) -> ActiveTracking:
    return ActiveTracking(
        user_id=row["user_id"],
        session_id=row["session_id"],
        started_at=datetime.fromisoformat(row["started_at"]),
    )


def get_active(user_id: str) -> Optional[ActiveTracking]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT user_id, session_id, started_at FROM tracking_sessions WHERE user_id = ?",
            (user_id,),
        ).fetchone()
    return _row_to_active(row) if row else None


def claim_active(user_id: str, session_id: str, started_at: datetime) -> ActiveTracking:
    """
    Insert the active row for `user_id`.

    Returns whatever row holds the slot afterwards: the new one, or the one a concurrent
    (or earlier) start already inserted. Callers compare session ids.
    """
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            "INSERT OR IGNORE INTO tracking_sessions (user_id, session_id, started_at) VALUES (?, ?, ?)",
            (user_id, session_id, started_at.isoformat()),
        )
        row = conn.execute(
            "SELECT user_id, session_id, started_at FROM tracking_sessions WHERE user_id = ?",
            (user_id,),
        ).fetchone()
    return _row_to_active(row)


def release_active(user_id: str, session_id: str) -> Optional[List[LocationSample]]:
    """
    Drop the active row and hand back the session's point log, in append order.

    The log is cleared in the same transaction, so a later tracking run on the same
    session starts from an empty route. None when the session was not active.
    """
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            "DELETE FROM tracking_sessions WHERE user_id = ? AND session_id = ?",
            (user_id, session_id),
        )
        if cur.rowcount == 0:
            return None
        rows = conn.execute(
            "SELECT payload_json FROM tracking_points WHERE session_id = ? ORDER BY seq ASC",
            (session_id,),
        ).fetchall()
        conn.execute("DELETE FROM tracking_points WHERE session_id = ?", (session_id,))
    return _load_points(session_id, rows)


def append_point(user_id: str, session_id: str, sample: LocationSample) -> Optional[bool]:
    """
    Append one sample to the session's point log.

    The insert is conditional on the session being the user's active one, and ignored when
    the same (timestamp, latitude, longitude) was already stored. Returns True when stored,
    False for a duplicate, None when the session is not active.
    """
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute(
            """
            INSERT OR IGNORE INTO tracking_points (session_id, seq, point_key, payload_json)
            SELECT ?, (SELECT COALESCE(MAX(seq), 0) + 1 FROM tracking_points WHERE session_id = ?), ?, ?
            WHERE EXISTS (
                SELECT 1 FROM tracking_sessions WHERE user_id = ? AND session_id = ?
            )
            """,
            (
                session_id,
                session_id,
                sample.dedupe_key(),
                sample.model_dump_json(),
                user_id,
                session_id,
            ),
        )
        if cur.rowcount > 0:
            return True
        active = conn.execute(
            "SELECT 1 FROM tracking_sessions WHERE user_id = ? AND session_id = ?",
            (user_id, session_id),
        ).fetchone()
    return False if active else None


def count_points(session_id: str) -> int:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT COUNT(*) AS n FROM tracking_points WHERE session_id = ?",
            (session_id,),
        ).fetchone()
    return int(row["n"])


def _load_points(session_id: str, rows: List[sqlite3.Row]) -> List[LocationSample]:
    out: List[LocationSample] = []
    for row in rows:
        try:
            out.append(LocationSample.model_validate(json.loads(row["payload_json"])))
        except Exception as exc:
            logger.warning("Skipping unreadable tracking point for %s: %s", session_id, exc)
    return out
