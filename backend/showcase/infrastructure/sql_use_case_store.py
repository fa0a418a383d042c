"""SQL Use Case Store — the remote relational backend over async SQLAlchemy.

Invariants:
    - One AsyncSession per call, opened from DatabaseSessionManager (auto-rollback)
    - list_rows() orders by created_at descending
    - ids that are not UUIDs never match a row (get → None, update → not found)
    - update of a missing id raises ResourceNotFoundError; delete of a missing id is a no-op
    - id, created_at defaults come from the ORM model when the row omits them
    - Timestamps are returned timezone-aware (UTC), whatever the dialect
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import delete, select

from showcase.core.domain_types import StorageBackend
from showcase.core.errors import ResourceNotFoundError
from showcase.infrastructure.database import DatabaseSessionManager
from showcase.models.use_case import UseCaseRecord

logger = logging.getLogger(__name__)

_TIMESTAMP_COLUMNS = ("created_at", "updated_at")
_COLUMNS = (
    "title", "description", "content", "industry", "category",
    "industries", "categories", "image_url", "status",
    "created_at", "updated_at",
)


def _parse_id(use_case_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(use_case_id))
    except ValueError:
        return None


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops the offset of timezone-aware columns
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_row(record: UseCaseRecord) -> dict[str, Any]:
    row = {column: getattr(record, column) for column in _COLUMNS}
    for column in _TIMESTAMP_COLUMNS:
        row[column] = _as_utc(row[column])
    row["id"] = str(record.id)
    return row


class SqlUseCaseStore:
    """UseCaseStore over the `usecases` table."""

    backend = StorageBackend.REMOTE

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_rows(self) -> list[dict[str, Any]]:
        async with self._db.session() as db:
            result = await db.execute(
                select(UseCaseRecord).order_by(UseCaseRecord.created_at.desc()),
            )
            return [_to_row(record) for record in result.scalars().all()]

    async def get_row(self, use_case_id: str) -> dict[str, Any] | None:
        key = _parse_id(use_case_id)
        if key is None:
            return None
        async with self._db.session() as db:
            record = await db.get(UseCaseRecord, key)
            return _to_row(record) if record else None

    async def insert_row(self, row: dict[str, Any]) -> dict[str, Any]:
        record = UseCaseRecord(
            **{column: row[column] for column in _COLUMNS if column in row},
        )
        async with self._db.session() as db:
            db.add(record)
            await db.commit()
            await db.refresh(record)
            logger.info(
                f"Inserted use case {record.id} into remote store",
                extra={"use_case_id": str(record.id), "backend": self.backend.value},
            )
            return _to_row(record)

    async def update_row(
        self, use_case_id: str, changes: dict[str, Any],
    ) -> dict[str, Any]:
        key = _parse_id(use_case_id)
        if key is None:
            raise ResourceNotFoundError("Use case", use_case_id)
        async with self._db.session() as db:
            record = await db.get(UseCaseRecord, key)
            if record is None:
                raise ResourceNotFoundError("Use case", use_case_id)
            for column, value in changes.items():
                if column in _COLUMNS:
                    setattr(record, column, value)
            await db.commit()
            await db.refresh(record)
            return _to_row(record)

    async def delete_row(self, use_case_id: str) -> None:
        key = _parse_id(use_case_id)
        if key is None:
            return
        async with self._db.session() as db:
            result = await db.execute(
                delete(UseCaseRecord).where(UseCaseRecord.id == key),
            )
            await db.commit()
            if not result.rowcount:
                logger.info(
                    f"Delete matched no remote row for {use_case_id}",
                    extra={"use_case_id": use_case_id, "backend": self.backend.value},
                )

    async def health_check(self) -> bool:
        return await self._db.health_check()
