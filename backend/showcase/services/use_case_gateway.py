"""Use Case Gateway — CRUD over the remote store or the local fallback store.

Invariants:
    - The active store is chosen per call from the flag given at construction
      (true → local fallback, false → remote)
    - Validation runs before any store access; no partial mutation on invalid input
    - Every row read or written goes through core/use_case_view.py (normalized lists,
      derived primary fields)
    - Store failures are re-raised as UseCaseBackendError scoped to the operation;
      ResourceNotFoundError and UseCaseValidationError propagate unchanged
    - No retries, no caching between calls, at most one store call per mutation
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from pydantic import ValidationError

from showcase.config import Settings
from showcase.core.domain_types import (
    DEFAULT_IMAGE_URL, GatewayOperation, UseCaseStatus,
)
from showcase.core.errors import StorageError, UseCaseBackendError
from showcase.core.repository_protocols import UseCaseStore
from showcase.core.use_case_view import (
    build_new_row, build_update_changes, row_to_use_case,
)
from showcase.infrastructure.database import init_db
from showcase.infrastructure.key_value_store import (
    InMemoryKeyValueStore, JsonFileKeyValueStore,
)
from showcase.infrastructure.local_use_case_store import LocalUseCaseStore
from showcase.infrastructure.sql_use_case_store import SqlUseCaseStore
from showcase.schemas.use_case import UseCase, UseCaseCreate, UseCaseUpdate

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UseCaseGateway:
    """Persistence gateway for use cases."""

    def __init__(
        self,
        remote_store: UseCaseStore | None,
        local_store: UseCaseStore,
        use_local_fallback: bool,
        default_image_url: str = DEFAULT_IMAGE_URL,
    ):
        if remote_store is None and not use_local_fallback:
            raise ValueError("A remote store is required when local fallback is off")
        self._remote = remote_store
        self._local = local_store
        self._use_local_fallback = use_local_fallback
        self._default_image_url = default_image_url

    def select_store(self) -> UseCaseStore:
        """Store used for the current call."""
        return self._local if self._use_local_fallback else self._remote

    @contextmanager
    def _backend_errors(
        self,
        operation: GatewayOperation,
        message: str,
        use_case_id: str | None = None,
    ) -> Iterator[None]:
        try:
            yield
        except (StorageError, ValidationError) as e:
            logger.error(
                f"{message}: {e}",
                extra={
                    "operation": operation.value,
                    "use_case_id": use_case_id,
                    "backend": self.select_store().backend.value,
                },
            )
            raise UseCaseBackendError(message, operation.value, use_case_id) from e

    async def list_all(self) -> list[UseCase]:
        """All use cases (remote: newest first; local: insertion order)."""
        store = self.select_store()
        with self._backend_errors(GatewayOperation.LIST, "Failed to fetch use cases"):
            rows = await store.list_rows()
            return [
                row_to_use_case(row, f"{store.backend.value}_list") for row in rows
            ]

    async def list_published(self) -> list[UseCase]:
        """Use cases visible on the public site."""
        return [
            u for u in await self.list_all() if u.status == UseCaseStatus.PUBLISHED
        ]

    async def get_by_id(self, use_case_id: str) -> UseCase | None:
        """One use case, or None when no record matches."""
        store = self.select_store()
        with self._backend_errors(
            GatewayOperation.GET,
            f"Failed to fetch use case with ID {use_case_id}",
            use_case_id,
        ):
            row = await store.get_row(use_case_id)
            if row is None:
                return None
            return row_to_use_case(row, f"{store.backend.value}_get")

    async def create(self, form: UseCaseCreate) -> UseCase:
        """Validate, stamp and persist a new use case; returns the stored entity."""
        row = build_new_row(form, _utcnow(), self._default_image_url)
        store = self.select_store()
        with self._backend_errors(
            GatewayOperation.CREATE, "Failed to create use case",
        ):
            stored = await store.insert_row(row)
            use_case = row_to_use_case(stored, f"{store.backend.value}_created")
        logger.info(
            f"Created use case {use_case.id}",
            extra={"use_case_id": use_case.id, "operation": "create"},
        )
        return use_case

    async def update(self, use_case_id: str, form: UseCaseUpdate) -> UseCase:
        """Apply supplied fields only; updated_at is always refreshed."""
        changes = build_update_changes(form, _utcnow())
        store = self.select_store()
        with self._backend_errors(
            GatewayOperation.UPDATE,
            f"Failed to update use case with ID {use_case_id}",
            use_case_id,
        ):
            stored = await store.update_row(use_case_id, changes)
            use_case = row_to_use_case(stored, f"{store.backend.value}_updated")
        logger.info(
            f"Updated use case {use_case_id} ({', '.join(sorted(changes))})",
            extra={"use_case_id": use_case_id, "operation": "update"},
        )
        return use_case

    async def delete(self, use_case_id: str) -> None:
        """Hard delete."""
        store = self.select_store()
        with self._backend_errors(
            GatewayOperation.DELETE,
            f"Failed to delete use case with ID {use_case_id}",
            use_case_id,
        ):
            await store.delete_row(use_case_id)
        logger.info(
            f"Deleted use case {use_case_id}",
            extra={"use_case_id": use_case_id, "operation": "delete"},
        )

    async def health_check(self) -> bool:
        return await self.select_store().health_check()


# ─── Wiring ─────────────────────────────────────────────────────

def build_use_case_gateway(settings: Settings) -> UseCaseGateway:
    """Build the gateway and its stores from settings."""
    if settings.local_storage_path:
        kv_store = JsonFileKeyValueStore(settings.local_storage_path)
    else:
        kv_store = InMemoryKeyValueStore()
    local_store = LocalUseCaseStore(kv_store, settings.local_storage_key)

    remote_store = None
    if settings.database_url:
        remote_store = SqlUseCaseStore(init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        ))

    return UseCaseGateway(
        remote_store,
        local_store,
        use_local_fallback=settings.local_fallback_enabled,
        default_image_url=settings.default_image_url,
    )


# Singleton (initialized on startup)
use_case_gateway: UseCaseGateway | None = None


def init_gateway(settings: Settings) -> UseCaseGateway:
    global use_case_gateway
    use_case_gateway = build_use_case_gateway(settings)
    return use_case_gateway


def get_use_case_gateway() -> UseCaseGateway:
    """FastAPI dependency for the gateway."""
    if use_case_gateway is None:
        raise RuntimeError("Use case gateway not initialized")
    return use_case_gateway
