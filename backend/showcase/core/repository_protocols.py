"""Boundary Protocols — contracts between the gateway and the storage adapters.

Invariants:
    - Core NEVER imports from infrastructure — dependency arrows point inward only
    - Rows are dicts keyed by remote column names (id, title, ..., image_url, created_at)
    - Adapters raise StorageError for backend failures and ResourceNotFoundError
      where their backend treats a missing id as an error

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - KeyValueStore is synchronous, like the browser storage it stands in for;
      UseCaseStore is async because its remote implementation does network IO
"""

from typing import Any, Protocol

from showcase.core.domain_types import StorageBackend


class UseCaseStore(Protocol):
    """Contract for use case persistence — implemented by infrastructure."""
    backend: StorageBackend

    async def list_rows(self) -> list[dict[str, Any]]: ...
    async def get_row(self, use_case_id: str) -> dict[str, Any] | None: ...
    async def insert_row(self, row: dict[str, Any]) -> dict[str, Any]: ...
    async def update_row(
        self, use_case_id: str, changes: dict[str, Any],
    ) -> dict[str, Any]: ...
    async def delete_row(self, use_case_id: str) -> None: ...
    async def health_check(self) -> bool: ...


class KeyValueStore(Protocol):
    """Contract for a string key-value store (browser localStorage semantics)."""
    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
