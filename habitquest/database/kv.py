"""Durable key-value storage on top of the ``kv_records`` table.

The rest of the app only ever sees three operations: ``get``, ``set``
and ``remove_many``.  Each call runs in its own session, so each is
atomic on its own; there is no transaction spanning several calls.
Database errors propagate as :class:`sqlalchemy.exc.SQLAlchemyError`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .db import get_session
from .models import KeyValueRecord


class KeyValueStore:
    """String-to-string store backed by SQLite."""

    def get(self, key: str) -> str | None:
        with get_session() as db:
            record = db.get(KeyValueRecord, key)
            return record.value if record is not None else None

    def set(self, key: str, value: str) -> None:
        with get_session() as db:
            record = db.get(KeyValueRecord, key)
            if record is None:
                db.add(KeyValueRecord(key=key, value=value))
            else:
                record.value = value

    def remove_many(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            return
        with get_session() as db:
            (
                db.query(KeyValueRecord)
                .filter(KeyValueRecord.key.in_(keys))
                .delete(synchronize_session=False)
            )

    def keys(self) -> list[str]:
        with get_session() as db:
            return [k for (k,) in db.query(KeyValueRecord.key).order_by(KeyValueRecord.key)]
