# -*- coding: utf-8 -*-
"""App database — SQLite helpers.

Every stored entity lives in the generic `records` table as a JSON document; live GPS
tracking state and the notification outbox have their own tables.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


def connect(db_path: Path) -> sqlite3.Connection:
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON;")
    return conn


def init_app_db(db_path: Path) -> None:
    conn = connect(db_path)
    try:
        cur = conn.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS records (
                id TEXT PRIMARY KEY,
                kind TEXT NOT NULL,
                owner_id TEXT,
                created_at TEXT NOT NULL,
                updated_at TEXT NOT NULL,
                payload_json TEXT NOT NULL
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_records_kind_owner_created ON records(kind, owner_id, created_at);"
        )
        # One row per user: the primary key is the "single active session" guarantee.
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tracking_sessions (
                user_id TEXT PRIMARY KEY,
                session_id TEXT NOT NULL,
                started_at TEXT NOT NULL
            );
            """
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS tracking_points (
                session_id TEXT NOT NULL,
                seq INTEGER NOT NULL,
                point_key TEXT NOT NULL,
                payload_json TEXT NOT NULL,
                UNIQUE (session_id, point_key)
            );
            """
        )
        cur.execute(
            "CREATE INDEX IF NOT EXISTS idx_tracking_points_session_seq ON tracking_points(session_id, seq);"
        )
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS notifications (
                id TEXT PRIMARY KEY,
                recipient TEXT NOT NULL,
                subject TEXT NOT NULL,
                body TEXT NOT NULL,
                created_at TEXT NOT NULL,
                delivered INTEGER NOT NULL DEFAULT 0
            );
            """
        )
        conn.commit()
    finally:
        conn.close()


@contextmanager
def db_conn(db_path: Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()
