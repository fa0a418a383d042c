"""List Normalization — coerce loosely-typed persisted list fields into list[str].

Invariants:
    - ensure_string_list() is total: any input yields a list of strings, never raises
    - Order preserved, no deduplication, no trimming of elements
    - Bracket-looking text that fails to parse is kept verbatim as a single element
      (NaN and Infinity are not JSON and count as a parse failure)
    - Internal failures degrade to [] (logged at ERROR, never propagated)

Design Decisions:
    - Two steps: classify_list_value() tags the input with a ListValueShape,
      then one decoder per shape produces the list
    - Stringification mirrors the JSON rendering the stored data came from:
      true/false/null, integral floats without ".0", containers as compact JSON
"""

import json
import logging
from collections.abc import Callable, Mapping
from decimal import Decimal

from showcase.core.domain_types import ListValueShape

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (int, float, complex, Decimal, bytes, bytearray)


def classify_list_value(value: object) -> ListValueShape:
    """Tag a raw field value with the shape it was persisted in."""
    if value is None:
        return ListValueShape.EMPTY
    if isinstance(value, (list, tuple)):
        return ListValueShape.SEQUENCE
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("[") and stripped.endswith("]"):
            return ListValueShape.JSON_TEXT
        return ListValueShape.SCALAR_TEXT
    if isinstance(value, _SCALAR_TYPES):
        return ListValueShape.OTHER_SCALAR
    return ListValueShape.OBJECT


def stringify_item(item: object) -> str:
    """String form of one list element."""
    if isinstance(item, str):
        return item
    if item is None:
        return "null"
    if isinstance(item, bool):
        return "true" if item else "false"
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    if isinstance(item, (bytes, bytearray)):
        return bytes(item).decode("utf-8", errors="replace")
    if isinstance(item, (Mapping, list, tuple)):
        try:
            return json.dumps(
                item, ensure_ascii=False, separators=(",", ":"), default=str,
            )
        except (TypeError, ValueError):
            return str(item)
    return str(item)


# ─── Decoders (one per shape) ────────────────────────────────────

def _decode_empty(value: object, label: str) -> list[str]:
    logger.debug(
        f"{label}: null or missing, returning empty list",
        extra={"label": label, "shape": ListValueShape.EMPTY.value},
    )
    return []


def _decode_sequence(value: object, label: str) -> list[str]:
    result = [stringify_item(item) for item in value]
    logger.debug(
        f"{label}: already a sequence with {len(result)} items",
        extra={"label": label, "shape": ListValueShape.SEQUENCE.value},
    )
    return result


def _reject_constant(token: str) -> object:
    raise ValueError(f"{token} is not valid JSON")


def _decode_json_text(value: object, label: str) -> list[str]:
    extra = {"label": label, "shape": ListValueShape.JSON_TEXT.value}
    try:
        parsed = json.loads(value, parse_constant=_reject_constant)
    except ValueError:
        logger.debug(
            f"{label}: bracketed text is not valid JSON, keeping it as one value",
            extra=extra,
        )
        return [value]
    if isinstance(parsed, list):
        result = [stringify_item(item) for item in parsed]
        logger.debug(
            f"{label}: parsed JSON array with {len(result)} items", extra=extra,
        )
        return result
    logger.debug(
        f"{label}: JSON value is not an array, wrapping original text",
        extra=extra,
    )
    return [value]


def _decode_scalar_text(value: object, label: str) -> list[str]:
    logger.debug(
        f"{label}: plain string, wrapping as single item",
        extra={"label": label, "shape": ListValueShape.SCALAR_TEXT.value},
    )
    return [value]


def _decode_object(value: object, label: str) -> list[str]:
    logger.debug(
        f"{label}: {type(value).__name__} object, wrapping its string form",
        extra={"label": label, "shape": ListValueShape.OBJECT.value},
    )
    return [stringify_item(value)]


def _decode_other_scalar(value: object, label: str) -> list[str]:
    logger.debug(
        f"{label}: {type(value).__name__} value, wrapping its string form",
        extra={"label": label, "shape": ListValueShape.OTHER_SCALAR.value},
    )
    return [stringify_item(value)]


_DECODERS: dict[ListValueShape, Callable[[object, str], list[str]]] = {
    ListValueShape.EMPTY: _decode_empty,
    ListValueShape.SEQUENCE: _decode_sequence,
    ListValueShape.JSON_TEXT: _decode_json_text,
    ListValueShape.SCALAR_TEXT: _decode_scalar_text,
    ListValueShape.OBJECT: _decode_object,
    ListValueShape.OTHER_SCALAR: _decode_other_scalar,
}


def ensure_string_list(value: object, label: str = "unknown") -> list[str]:
    """Coerce any persisted list-ish value into an ordered list of strings."""
    try:
        return _DECODERS[classify_list_value(value)](value, label)
    except Exception:
        logger.error(
            f"{label}: normalization failed, returning empty list",
            exc_info=True,
            extra={"label": label},
        )
        return []


def primary_value(values: list[str]) -> str:
    """First element of a normalized list, or "" when empty."""
    return values[0] if values else ""
