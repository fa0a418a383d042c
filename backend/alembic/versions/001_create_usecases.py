"""Create usecases table with JSON list columns.

Revision ID: 001_create_usecases
Revises: None
Create Date: 2026-10-18

industries/categories are JSONB on PostgreSQL (JSON elsewhere). The scalar
industry/category columns stay for readers of the old schema.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, UUID

revision: str = "001_create_usecases"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_TAG_LIST = sa.JSON().with_variant(JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "usecases",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("content", sa.Text, nullable=True),
        sa.Column("industry", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=True),
        sa.Column("industries", _TAG_LIST, nullable=True),
        sa.Column("categories", _TAG_LIST, nullable=True),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_usecases_created_at", "usecases", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_usecases_created_at", table_name="usecases")
    op.drop_table("usecases")
