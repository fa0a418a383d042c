"""Use Case View — pure mapping between raw store rows and the UseCase entity.

Invariants:
    - Every row read or written passes industries/categories through ensure_string_list()
    - Empty normalized lists fall back to the legacy scalar column ([industry] / [category])
    - The scalar industry/category columns written to a store always equal
      the first element of the corresponding list ("" when empty)
    - Validation raises before any row is built (no partial mutation)

Design Decisions:
    - Rows are plain dicts keyed by remote column names; both store adapters
      speak this shape, so the gateway never branches on the backend
"""

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from showcase.core.domain_types import UseCaseStatus
from showcase.core.errors import UseCaseValidationError
from showcase.core.normalize_list import ensure_string_list, primary_value
from showcase.schemas.use_case import UseCase, UseCaseCreate, UseCaseUpdate

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = ("title", "description", "content")
_LIST_FIELDS = (
    # (list field, scalar field, noun used in messages)
    ("industries", "industry", "industry"),
    ("categories", "category", "category"),
)


def resolve_tag_list(raw: object, legacy: object, label: str) -> list[str]:
    """Normalize a stored list, falling back to the legacy scalar when empty."""
    values = ensure_string_list(raw, label)
    if values:
        return values
    return [str(legacy)] if legacy else []


def _coerce_status(raw: object, use_case_id: object) -> UseCaseStatus:
    if not raw:
        return UseCaseStatus.DRAFT
    try:
        return UseCaseStatus(raw)
    except ValueError:
        logger.warning(
            f"Unknown status {raw!r} on use case {use_case_id}, reading as draft",
            extra={"use_case_id": str(use_case_id)},
        )
        return UseCaseStatus.DRAFT


def row_to_use_case(row: Mapping[str, Any], label: str) -> UseCase:
    """Build the typed entity from a raw row of either store."""
    now = datetime.now(timezone.utc)
    return UseCase(
        id=str(row["id"]),
        title=row.get("title") or "",
        description=row.get("description") or "",
        content=row.get("content") or "",
        industries=resolve_tag_list(
            row.get("industries"), row.get("industry"), f"{label}_industries",
        ),
        categories=resolve_tag_list(
            row.get("categories"), row.get("category"), f"{label}_categories",
        ),
        image_url=row.get("image_url") or "",
        status=_coerce_status(row.get("status"), row["id"]),
        created_at=row.get("created_at") or now,
        updated_at=row.get("updated_at") or now,
    )


# ─── Write-side validation and row building ─────────────────────

def _require_text(field: str, value: str | None) -> None:
    if value is None or not value.strip():
        raise UseCaseValidationError(f"{field.capitalize()} is required", field)


def _require_tags(field: str, noun: str, raw: object, label: str) -> list[str]:
    values = [v for v in ensure_string_list(raw, label) if v.strip()]
    if not values:
        raise UseCaseValidationError(
            f"At least one {noun} is required", field,
        )
    return values


def build_new_row(
    form: UseCaseCreate, now: datetime, default_image_url: str,
) -> dict[str, Any]:
    """Validate creation form data and build the row to insert (without id)."""
    for field in _REQUIRED_TEXT_FIELDS:
        _require_text(field, getattr(form, field))
    row: dict[str, Any] = {
        "title": form.title,
        "description": form.description,
        "content": form.content,
        "image_url": form.image_url or default_image_url,
        "status": form.status.value,
        "created_at": now,
        "updated_at": now,
    }
    for list_field, scalar_field, noun in _LIST_FIELDS:
        values = _require_tags(
            list_field, noun, getattr(form, list_field), f"create_{list_field}",
        )
        row[list_field] = values
        row[scalar_field] = primary_value(values)
    return row


def build_update_changes(form: UseCaseUpdate, now: datetime) -> dict[str, Any]:
    """Validate supplied fields and build the column changes for an update.

    Omitted fields are left out of the result. Supplied lists replace the
    stored ones and carry their re-derived scalar column; updated_at is
    always included.
    """
    supplied = form.model_fields_set
    changes: dict[str, Any] = {"updated_at": now}
    for field in _REQUIRED_TEXT_FIELDS:
        if field in supplied:
            value = getattr(form, field)
            _require_text(field, value)
            changes[field] = value
    for list_field, scalar_field, noun in _LIST_FIELDS:
        if list_field in supplied:
            values = _require_tags(
                list_field, noun, getattr(form, list_field), f"update_{list_field}",
            )
            changes[list_field] = values
            changes[scalar_field] = primary_value(values)
    if "image_url" in supplied:
        changes["image_url"] = form.image_url or ""
    if "status" in supplied:
        if form.status is None:
            raise UseCaseValidationError("Status is required", "status")
        changes["status"] = form.status.value
    return changes
