from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from .ordering import JsonKind, kind_of, order_fields
from .paths import Field, Index, Path, canonical_header

logger = logging.getLogger(__name__)


def extract_headers(data: Any) -> List[str]:
    """Collect the canonical header of every primitive or null leaf.

    Traversal is depth-first pre-order with sibling ordering applied at every
    object, so the result depends only on first appearance, never on names.
    Empty objects and arrays contribute nothing.
    """
    headers: Dict[str, None] = {}

    def walk(value: Any, path: Path) -> None:
        kind = kind_of(value)
        if kind is JsonKind.OBJECT:
            for key, inner in order_fields(value):
                walk(inner, path + (Field(key),))
        elif kind is JsonKind.ARRAY:
            for position, inner in enumerate(value):
                walk(inner, path + (Index(position),))
        else:
            header = canonical_header(path)
            if header not in headers:
                headers[header] = None

    walk(data, ())
    logger.debug("Discovered %d headers", len(headers))
    return list(headers)


def build_header_records(data: Any) -> Tuple[List[str], List[List[Any]]]:
    """Discover headers and seed a record set whose first row is the header row."""
    headers = extract_headers(data)
    records: List[List[Any]] = [list(headers)]
    return headers, records


def header_index(headers: List[str]) -> Dict[str, int]:
    return {header: position for position, header in enumerate(headers)}
