"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UseCaseId is an opaque string (timestamp-derived locally, UUID text remotely)
    - All valid states encoded as Enums — no raw string matching
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UseCaseId = NewType("UseCaseId", str)


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_IMAGE_URL = (
    "https://images.unsplash.com/photo-1579546929518-9e396f3cc809?w=800&q=80"
)
LOCAL_ID_PREFIX = "usecase_"


# ─── Enums ───────────────────────────────────────────────────────

class UseCaseStatus(str, Enum):
    """Publication state — maps to the `status` column."""
    DRAFT = "draft"
    PUBLISHED = "published"


class StorageBackend(str, Enum):
    """The two interchangeable stores behind the gateway."""
    REMOTE = "remote"
    LOCAL = "local"


class ListValueShape(str, Enum):
    """Decoded shape of a persisted list-typed field."""
    EMPTY = "empty"
    SEQUENCE = "sequence"
    JSON_TEXT = "json_text"
    SCALAR_TEXT = "scalar_text"
    OBJECT = "object"
    OTHER_SCALAR = "other_scalar"


class GatewayOperation(str, Enum):
    """Gateway operations — used for error scoping and log context."""
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class TagKind(str, Enum):
    """Which tag list a catalogue lookup reads."""
    INDUSTRY = "industry"
    CATEGORY = "category"
