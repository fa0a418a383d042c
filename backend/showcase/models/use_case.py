"""UseCase ORM — the `usecases` table of the remote store.

Invariants:
    - id is a UUID primary key generated on insert
    - industries/categories are JSON lists (JSONB on PostgreSQL); legacy rows may
      still hold JSON-encoded text or bare strings there, so readers normalize
    - industry/category scalar columns are kept for consumers of the old schema
      and always written as the first list element
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import JSONB, UUID

from showcase.db.base import Base

TagListType = JSON().with_variant(JSONB(), "postgresql")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UseCaseRecord(Base):
    """Persisted use case row."""
    __tablename__ = "usecases"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    industry: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str | None] = mapped_column(Text, nullable=True)
    industries: Mapped[Any] = mapped_column(TagListType, nullable=True)
    categories: Mapped[Any] = mapped_column(TagListType, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
