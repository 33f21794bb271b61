from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Optional

from .config import FlattenConfig, parse_delimiter
from .errors import ConversionError
from .flattening import flatten_data_for_preview, flatten_document, flatten_headers
from .io_utils import read_json_content, write_records_to_file
from .schema_utils import extract_headers

logger = logging.getLogger(__name__)


def build_config(separator: Optional[str], delimiter: Optional[str], null_value: Optional[str] = None) -> FlattenConfig:
    return FlattenConfig.create(
        separator=separator,
        delimiter=parse_delimiter(delimiter),
        null_value=null_value,
    )


def _output_path(file_name: Optional[str], default: str) -> str:
    if not file_name or not file_name.strip():
        file_name = default
    if not file_name.lower().endswith('.csv'):
        file_name += '.csv'
    return os.path.join(tempfile.gettempdir(), os.path.basename(file_name))


def _records_for(data: Any, schema: Any, config: FlattenConfig):
    if schema is None:
        return flatten_document(data, config=config)
    return flatten_document(data, schema, config=config)


def load_dataset(file_obj):
    """Parse an uploaded JSON file; returns (data, status, cleared preview)."""
    if file_obj is None:
        return None, "No file uploaded.", None

    try:
        data = read_json_content(file_obj)
    except (ConversionError, OSError, UnicodeDecodeError) as e:
        return None, f"Error parsing JSON: {e}", None

    headers = extract_headers(data)
    return data, f"Successfully loaded. Found {len(headers)} columns.", None


def load_schema(file_obj):
    """Parse an uploaded schema file; returns (schema, status, header list)."""
    if file_obj is None:
        return None, "No schema uploaded; columns come from the data.", []

    try:
        schema = read_json_content(file_obj, 'schema')
    except (ConversionError, OSError, UnicodeDecodeError) as e:
        return None, f"Error parsing schema: {e}", []

    headers = extract_headers(schema)
    return schema, f"Schema loaded. Found {len(headers)} columns.", [[h] for h in headers]


def preview_handler(data, schema, separator, delimiter, null_value=None, limit: int = 3):
    if data is None:
        return None

    try:
        config = build_config(separator, delimiter, null_value)
    except ConversionError:
        return None

    records = _records_for(data, schema, config)
    preview_rows = flatten_data_for_preview(records, limit=limit, null_value=config.null_value)
    return preview_rows if preview_rows else None


def export_csv_handler(data, schema, separator, delimiter, null_value, file_name):
    if data is None:
        return None, "No data loaded."

    try:
        config = build_config(separator, delimiter, null_value)
        records = _records_for(data, schema, config)
        path = write_records_to_file(
            records, _output_path(file_name, 'output'), config.delimiter, config.null_value, config.encoding
        )
    except ConversionError as e:
        return None, f"Error during export: {e}"

    return str(path), f"Export successful! {len(records) - 1} rows saved to {path}"


def export_headers_handler(schema, separator, delimiter, file_name):
    if schema is None:
        return None, "No schema loaded."

    try:
        config = build_config(separator, delimiter)
        records = flatten_headers(schema, config)
        path = write_records_to_file(
            records, _output_path(file_name, 'headers'), config.delimiter, config.null_value, config.encoding
        )
    except ConversionError as e:
        return None, f"Error during export: {e}"

    return str(path), f"Export successful! {len(records[0])} columns saved to {path}"
