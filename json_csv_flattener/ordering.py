from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Tuple


class JsonKind(Enum):
    NULL = 'null'
    PRIMITIVE = 'primitive'
    OBJECT = 'object'
    ARRAY = 'array'


def kind_of(value: Any) -> JsonKind:
    """Classify a decoded JSON value."""
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    return JsonKind.PRIMITIVE


def normalize_scalar(value: Any) -> Any:
    """Render integral floats as ints so 2.0 is written as 2."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def order_fields(obj: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Return the object's fields as primitives/nulls, then objects, then arrays.

    Relative document order is preserved inside each group, so flat columns
    are filled before any nested array fans the row out.
    """
    flat: List[Tuple[str, Any]] = []
    objects: List[Tuple[str, Any]] = []
    arrays: List[Tuple[str, Any]] = []

    for key, value in obj.items():
        kind = kind_of(value)
        if kind is JsonKind.OBJECT:
            objects.append((key, value))
        elif kind is JsonKind.ARRAY:
            arrays.append((key, value))
        else:
            flat.append((key, normalize_scalar(value)))

    return flat + objects + arrays
