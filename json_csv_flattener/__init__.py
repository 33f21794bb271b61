"""Core logic for the JSON to CSV flattener.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- canonicalize JSON paths into column names
- discover the columns of a document (or of a separate schema document)
- build rows, fanning out on arrays of objects and pruning redundant rows
- write the resulting record set as CSV
"""
from __future__ import annotations

from .config import FlattenConfig
from .converter import (
    json_to_csv,
    json_to_csv_file,
    json_to_csv_stream,
    json_to_records,
    schema_to_csv,
    schema_to_records,
)
from .errors import (
    ConversionError,
    InvalidInputError,
    MalformedJsonError,
    OutputWriteError,
    UnsupportedEncodingError,
)

__all__ = [
    "FlattenConfig",
    "json_to_csv",
    "json_to_csv_file",
    "json_to_csv_stream",
    "json_to_records",
    "schema_to_csv",
    "schema_to_records",
    "ConversionError",
    "InvalidInputError",
    "MalformedJsonError",
    "OutputWriteError",
    "UnsupportedEncodingError",
]
