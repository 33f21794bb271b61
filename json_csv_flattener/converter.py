"""Public entry points: JSON text in, CSV records or text out.

Every function validates its inputs, parses the JSON, runs the flattening
pipeline and hands the record set to the CSV writer. A `schema_text`
document, when given, defines the columns instead of the data itself.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from .config import FlattenConfig
from .flattening import flatten_document, flatten_headers
from .io_utils import (
    parse_json_text,
    reject_blank,
    write_records,
    write_records_to_file,
    write_records_to_string,
)
from .records import Row

logger = logging.getLogger(__name__)


def json_to_records(
    json_text: str,
    schema_text: Optional[str] = None,
    config: Optional[FlattenConfig] = None,
) -> List[Row]:
    """Parse `json_text` and return its record set, header row first."""
    config = config or FlattenConfig()
    data = parse_json_text(json_text, 'json')
    if schema_text is None:
        return flatten_document(data, config=config)

    schema = parse_json_text(schema_text, 'schema')
    return flatten_document(data, schema, config=config)


def json_to_csv(
    json_text: str,
    schema_text: Optional[str] = None,
    config: Optional[FlattenConfig] = None,
) -> str:
    config = config or FlattenConfig()
    records = json_to_records(json_text, schema_text, config)
    return write_records_to_string(records, config.delimiter, config.null_value)


def json_to_csv_file(
    json_text: str,
    destination: Union[str, Path],
    schema_text: Optional[str] = None,
    config: Optional[FlattenConfig] = None,
) -> Path:
    config = config or FlattenConfig()
    reject_blank(json_text, 'json')
    reject_blank(destination, 'csv file path')
    records = json_to_records(json_text, schema_text, config)
    return write_records_to_file(records, destination, config.delimiter, config.null_value, config.encoding)


def json_to_csv_stream(
    json_text: str,
    stream: TextIO,
    schema_text: Optional[str] = None,
    config: Optional[FlattenConfig] = None,
) -> None:
    config = config or FlattenConfig()
    reject_blank(json_text, 'json')
    reject_blank(stream, 'writer')
    records = json_to_records(json_text, schema_text, config)
    write_records(records, stream, config.delimiter, config.null_value)


def schema_to_records(schema_text: str, config: Optional[FlattenConfig] = None) -> List[Row]:
    """Header row only, discovered from `schema_text`."""
    config = config or FlattenConfig()
    schema = parse_json_text(schema_text, 'schema')
    return flatten_headers(schema, config)


def schema_to_csv(schema_text: str, config: Optional[FlattenConfig] = None) -> str:
    config = config or FlattenConfig()
    records = schema_to_records(schema_text, config)
    return write_records_to_string(records, config.delimiter, config.null_value)
