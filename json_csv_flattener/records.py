from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .ordering import JsonKind, kind_of, normalize_scalar, order_fields
from .paths import Field, Index, Path, canonical_header
from .schema_utils import header_index

logger = logging.getLogger(__name__)

Row = List[Any]


def has_nested_fan_out(value: Any) -> bool:
    """True when an array holding at least one object sits anywhere below `value`."""
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        return any(has_nested_fan_out(inner) for inner in value.values())
    if kind is JsonKind.ARRAY:
        return any(kind_of(item) is JsonKind.OBJECT or has_nested_fan_out(item) for item in value)
    return False


def _same_value(left: Any, right: Any) -> bool:
    # True == 1 in Python; a boolean cell never matches a numeric one.
    return left == right and isinstance(left, bool) == isinstance(right, bool)


def prune_last_row(records: List[Row]) -> bool:
    """Drop the last row when it is empty or adds nothing to the row before it.

    Only the immediately preceding data row is compared, never the header
    row and never anything further back. Returns True when a row was removed.
    """
    data_rows = len(records) - 1
    if data_rows < 1:
        return False

    last = records[-1]
    if all(cell is None for cell in last):
        records.pop()
        logger.debug("Pruned empty row %d", data_rows)
        return True

    if data_rows < 2:
        return False

    previous = records[-2]
    if all(cell is None or _same_value(cell, prev) for cell, prev in zip(last, previous)):
        records.pop()
        logger.debug("Pruned row %d duplicating row %d", data_rows, data_rows - 1)
        return True
    return False


def _write_leaf(row: Row, value: Any, path: Path, index: Dict[str, int]) -> None:
    if value is None:
        return
    position = index.get(canonical_header(path))
    if position is not None:
        row[position] = normalize_scalar(value)


def _fan_out(row: Row, element: Dict[str, Any], path: Path, index: Dict[str, int], records: List[Row]) -> None:
    superseded = has_nested_fan_out(element)
    if len(records) > 2:
        prune_last_row(records)

    records.append(build_rows(list(row), element, path, index, records))
    if superseded:
        # Rows emitted inside the element already carry everything this one has.
        records.pop()


def build_rows(row: Row, value: Any, path: Path, index: Dict[str, int], records: List[Row]) -> Row:
    """Fill `row` from `value`, appending fanned-out rows to `records`.

    Returns the row to keep accumulating into; sibling fields of one object
    share it. Every object found inside an array is built on a copy of the
    current row and appended as a row of its own.
    """
    kind = kind_of(value)
    if kind is JsonKind.OBJECT:
        for key, inner in order_fields(value):
            row = build_rows(row, inner, path + (Field(key),), index, records)
    elif kind is JsonKind.ARRAY:
        for position, inner in enumerate(value):
            inner_path = path + (Index(position),)
            if kind_of(inner) is JsonKind.OBJECT:
                _fan_out(row, inner, inner_path, index, records)
            else:
                row = build_rows(row, inner, inner_path, index, records)
    else:
        _write_leaf(row, value, path, index)
    return row


def build_records(data: Any, headers: List[str], records: Optional[List[Row]] = None) -> List[Row]:
    """Build the full record set for `data` against a fixed header sequence."""
    if records is None:
        records = [list(headers)]

    index = header_index(headers)
    records.append(build_rows([None] * len(headers), data, (), index, records))
    prune_last_row(records)

    logger.info("Built %d data rows over %d columns", len(records) - 1, len(headers))
    return records
