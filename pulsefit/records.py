# -*- coding: utf-8 -*-
"""Generic record store over the `records` table.

Entities are pydantic models that embed a `RecordMeta` under `meta`; the store is
parameterized by the model type, whose `model_validate` is the deserializer.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Generic, List, Optional, Type, TypeVar
from uuid import uuid4

from pydantic import BaseModel, Field

from .app_db import db_conn
from .config import settings
from .errors import NotFoundError

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecordMeta(BaseModel):
    id: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


T = TypeVar("T", bound=BaseModel)


class RecordStore(Generic[T]):
    def __init__(self, kind: str, model: Type[T]) -> None:
        self.kind = kind
        self.model = model

    def _load(self, raw: str) -> Optional[T]:
        try:
            return self.model.model_validate(json.loads(raw))
        except Exception as exc:
            logger.warning("Skipping unreadable %s record: %s", self.kind, exc)
            return None

    def _select(self, sql: str, params: tuple) -> List[T]:
        with db_conn(settings.app_db_path) as conn:
            rows = conn.execute(sql, params).fetchall()
        out: List[T] = []
        for row in rows:
            record = self._load(row["payload_json"])
            if record is not None:
                out.append(record)
        return out

    def fetch_records(self, owner_id: str) -> List[T]:
        """All records of this kind owned by `owner_id`, oldest first."""
        return self._select(
            "SELECT payload_json FROM records WHERE kind = ? AND owner_id = ? ORDER BY created_at ASC",
            (self.kind, owner_id),
        )

    def fetch_all(self) -> List[T]:
        return self._select(
            "SELECT payload_json FROM records WHERE kind = ? ORDER BY created_at ASC",
            (self.kind,),
        )

    def get(self, record_id: str) -> Optional[T]:
        found = self._select(
            "SELECT payload_json FROM records WHERE kind = ? AND id = ?",
            (self.kind, record_id),
        )
        return found[0] if found else None

    def require(self, record_id: str, *, owner_id: Optional[str] = None) -> T:
        record = self.get(record_id)
        if record is None:
            raise NotFoundError(f"{self.kind} {record_id} not found")
        if owner_id is not None and record.meta.owner_id != owner_id:  # type: ignore[attr-defined]
            raise NotFoundError(f"{self.kind} {record_id} not found")
        return record

    def persist(self, record: T) -> T:
        """Upsert; assigns an identifier when the record has none."""
        meta: RecordMeta = record.meta  # type: ignore[attr-defined]
        if not meta.id:
            meta.id = str(uuid4())
        meta.updated_at = utc_now()
        payload = record.model_dump_json()
        with db_conn(settings.app_db_path) as conn:
            conn.execute(
                """
                INSERT INTO records (id, kind, owner_id, created_at, updated_at, payload_json)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    owner_id=excluded.owner_id,
                    updated_at=excluded.updated_at,
                    payload_json=excluded.payload_json
                """,
                (
                    meta.id,
                    self.kind,
                    meta.owner_id,
                    meta.created_at.isoformat(),
                    meta.updated_at.isoformat(),
                    payload,
                ),
            )
        return record

    def delete(self, record_id: str) -> bool:
        with db_conn(settings.app_db_path) as conn:
            cur = conn.execute(
                "DELETE FROM records WHERE kind = ? AND id = ?",
                (self.kind, record_id),
            )
            return cur.rowcount > 0
