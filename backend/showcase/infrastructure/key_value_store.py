"""Key-Value Stores — string key/value backends for the local fallback store.

Invariants:
    - Values are opaque strings; callers own serialization
    - get_item() returns None for a missing key, never raises for absence
    - JsonFileKeyValueStore persists every set_item() immediately (whole file rewrite)
    - IO and decode failures propagate as OSError / ValueError

Design Decisions:
    - Synchronous file IO, run on the event loop by LocalUseCaseStore; meant for
      the single-user demo fallback only
    - Writes go to a sibling .tmp file that then replaces the target
"""

import json
from pathlib import Path


class InMemoryKeyValueStore:
    """Process-local store; contents are lost on restart."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileKeyValueStore:
    """Store backed by one JSON object file mapping keys to string values."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8",
        )
        tmp_path.replace(self.path)
