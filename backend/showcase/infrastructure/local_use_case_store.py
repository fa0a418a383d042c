"""Local Use Case Store — the whole collection as one JSON list under a single key.

Invariants:
    - The key holds a JSON array of row dicts; initialized to "[]" on first use
    - Every operation re-reads the key (no cached copy between calls)
    - Insertion order is preserved; list_rows() does not sort
    - ids are "usecase_<epoch millis>", bumped by one while already taken
    - Missing id on update/delete raises ResourceNotFoundError
    - Unreadable store contents or IO failures raise StorageError

Design Decisions:
    - Read-modify-write without locking: concurrent writers are last-writer-wins
"""

import json
import logging
import time
from datetime import datetime
from typing import Any

from showcase.core.domain_types import LOCAL_ID_PREFIX, StorageBackend
from showcase.core.errors import ResourceNotFoundError, StorageError
from showcase.core.repository_protocols import KeyValueStore

logger = logging.getLogger(__name__)

_BACKEND = StorageBackend.LOCAL.value


def _to_storable(row: dict[str, Any]) -> dict[str, Any]:
    """Copy of row with datetimes rendered as ISO-8601 text."""
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in row.items()
    }


class LocalUseCaseStore:
    """UseCaseStore over a KeyValueStore."""

    backend = StorageBackend.LOCAL

    def __init__(self, kv_store: KeyValueStore, key: str = "usecases"):
        self._kv = kv_store
        self._key = key
        try:
            if self._kv.get_item(self._key) is None:
                self._kv.set_item(self._key, "[]")
        except (OSError, ValueError) as e:
            raise StorageError(str(e), "initialize", _BACKEND) from e

    # ─── serialization ───────────────────────────────────────────

    def _load(self, operation: str) -> list[dict[str, Any]]:
        try:
            raw = self._kv.get_item(self._key)
            records = json.loads(raw) if raw else []
        except (OSError, ValueError) as e:
            raise StorageError(str(e), operation, _BACKEND) from e
        if not isinstance(records, list):
            raise StorageError(
                f"key '{self._key}' does not hold a JSON array", operation, _BACKEND,
            )
        rows = [r for r in records if isinstance(r, dict) and "id" in r]
        if len(rows) != len(records):
            logger.warning(
                f"Skipped {len(records) - len(rows)} malformed local records",
                extra={"backend": _BACKEND, "operation": operation},
            )
        return rows

    def _save(self, rows: list[dict[str, Any]], operation: str) -> None:
        try:
            self._kv.set_item(self._key, json.dumps(rows, ensure_ascii=False))
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(str(e), operation, _BACKEND) from e

    @staticmethod
    def _generate_id(rows: list[dict[str, Any]]) -> str:
        taken = {r.get("id") for r in rows}
        millis = int(time.time() * 1000)
        while f"{LOCAL_ID_PREFIX}{millis}" in taken:
            millis += 1
        return f"{LOCAL_ID_PREFIX}{millis}"

    # ─── UseCaseStore ────────────────────────────────────────────

    async def list_rows(self) -> list[dict[str, Any]]:
        return self._load("list")

    async def get_row(self, use_case_id: str) -> dict[str, Any] | None:
        for row in self._load("get"):
            if row.get("id") == use_case_id:
                return row
        return None

    async def insert_row(self, row: dict[str, Any]) -> dict[str, Any]:
        rows = self._load("insert")
        stored = _to_storable(row)
        if not stored.get("id"):
            stored["id"] = self._generate_id(rows)
        rows.append(stored)
        self._save(rows, "insert")
        logger.info(
            f"Inserted use case {stored['id']} into local store",
            extra={"use_case_id": stored["id"], "backend": _BACKEND},
        )
        return dict(stored)

    async def update_row(
        self, use_case_id: str, changes: dict[str, Any],
    ) -> dict[str, Any]:
        rows = self._load("update")
        for index, row in enumerate(rows):
            if row.get("id") == use_case_id:
                break
        else:
            raise ResourceNotFoundError("Use case", use_case_id)
        updated = {**rows[index], **_to_storable(changes)}
        rows[index] = updated
        self._save(rows, "update")
        return dict(updated)

    async def delete_row(self, use_case_id: str) -> None:
        rows = self._load("delete")
        remaining = [r for r in rows if r.get("id") != use_case_id]
        if len(remaining) == len(rows):
            raise ResourceNotFoundError("Use case", use_case_id)
        self._save(remaining, "delete")

    async def health_check(self) -> bool:
        try:
            self._load("health")
            return True
        except StorageError as e:
            logger.error(f"Local store health check failed: {e}")
            return False
