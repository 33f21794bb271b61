from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .config import DEFAULT_SEPARATOR, FlattenConfig
from .io_utils import render_cell
from .paths import HEADER_DELIMITER, display_header
from .records import Row, build_records
from .schema_utils import build_header_records, extract_headers

logger = logging.getLogger(__name__)

_NO_SCHEMA = object()


def apply_header_separator(records: List[Row], separator: str = DEFAULT_SEPARATOR) -> List[Row]:
    """Rewrite the header row in place, replacing '/' with `separator`.

    Escaped characters inside field names are restored; data rows are
    never touched.
    """
    if not records:
        return records

    header_row = records[0]
    for position, header in enumerate(header_row):
        text = str(header)
        if text.startswith(HEADER_DELIMITER):
            text = text[len(HEADER_DELIMITER):]
        header_row[position] = display_header(text, separator).strip()
    return records


def flatten_document(
    data: Any,
    schema: Any = _NO_SCHEMA,
    config: Optional[FlattenConfig] = None,
) -> List[Row]:
    """Flatten a parsed JSON document into a record set.

    When `schema` is given, its leaves define the columns and values of
    `data` outside them are ignored.
    """
    config = config or FlattenConfig()

    headers = extract_headers(data if schema is _NO_SCHEMA else schema)
    logger.info("Flattening document into %d columns", len(headers))

    records = build_records(data, headers)
    return apply_header_separator(records, config.separator)


def flatten_headers(schema: Any, config: Optional[FlattenConfig] = None) -> List[Row]:
    """Header-only record set: the schema's header row and no data rows."""
    config = config or FlattenConfig()
    _, records = build_header_records(schema)
    logger.info("Extracted %d headers from schema", len(records[0]))
    return apply_header_separator(records, config.separator)


def flatten_data_for_preview(records: List[Row], limit: int = 3, null_value: str = '') -> List[Dict[str, str]]:
    """First `limit` data rows as header -> cell text mappings."""
    if not records:
        return []

    header_row = [str(h) for h in records[0]]
    rows: List[Dict[str, str]] = []
    for record in records[1:max(1, int(limit)) + 1]:
        rows.append({header: render_cell(cell, null_value) for header, cell in zip(header_row, record)})
    return rows
