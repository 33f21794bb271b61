from __future__ import annotations

import codecs
import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Sequence, TextIO, Union

from .errors import InvalidInputError, MalformedJsonError, OutputWriteError, UnsupportedEncodingError

logger = logging.getLogger(__name__)

LINE_TERMINATOR = '\n'


def reject_blank(value: Any, field_name: str) -> None:
    """Raise InvalidInputError when `value` is None or a whitespace-only string."""
    if value is None or (isinstance(value, str) and not value.strip()):
        message = f"{field_name} cannot be null or empty."
        logger.error(message)
        raise InvalidInputError(message)


def _reject_constant(token: str):
    raise ValueError(f"Unsupported JSON constant: {token}")


def _decode(content: bytes, field_name: str) -> str:
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError as e:
        message = f"Error parsing {field_name}: input is not valid UTF-8 ({e})"
        logger.error(message)
        raise MalformedJsonError(message) from e


def parse_json_text(text: str, field_name: str = 'json') -> Any:
    if isinstance(text, bytes):
        text = _decode(text, field_name)
    reject_blank(text, field_name)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        message = f"Error parsing {field_name}: {e}"
        logger.error(message)
        raise MalformedJsonError(message) from e


def read_json_text(file_obj, field_name: str = 'json') -> str:
    """Read raw text from an uploaded file object or a file path.

    Content must be UTF-8; anything else raises MalformedJsonError.
    """
    if file_obj is None:
        raise InvalidInputError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seekable') and file_obj.seekable():
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = _decode(content, field_name)
        return content

    if isinstance(file_obj, (str, Path)):
        path = file_obj
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'rb') as f:
        return _decode(f.read(), field_name)


def read_json_content(file_obj, field_name: str = 'json'):
    """Read and parse JSON content from an uploaded file or file path."""
    return parse_json_text(read_json_text(file_obj, field_name), field_name)


def render_cell(value: Any, null_value: str = '') -> str:
    if value is None:
        return null_value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def ensure_encoding(encoding: str) -> str:
    try:
        return codecs.lookup(encoding).name
    except LookupError as e:
        message = f"Unsupported encoding: {encoding}"
        logger.error(message)
        raise UnsupportedEncodingError(message) from e


def write_records(
    records: Iterable[Sequence[Any]],
    stream: TextIO,
    delimiter: str = ',',
    null_value: str = '',
) -> None:
    """Write every row of `records` to `stream`, one line per row.

    Single character delimiters go through the csv module so cells holding
    the delimiter get quoted; longer delimiters join the cells verbatim.
    """
    reject_blank(stream, 'writer')
    if not delimiter:
        raise InvalidInputError("delimiter cannot be null or empty.")

    logger.info('Writing records as csv with delimiter "%s"', delimiter)
    try:
        if len(delimiter) == 1:
            writer = csv.writer(stream, delimiter=delimiter, lineterminator=LINE_TERMINATOR)
            for row in records:
                cells = [render_cell(cell, null_value) for cell in row]
                if cells == ['']:
                    # csv would write a lone empty field as '""'
                    stream.write(LINE_TERMINATOR)
                else:
                    writer.writerow(cells)
        else:
            for row in records:
                stream.write(delimiter.join(render_cell(cell, null_value) for cell in row))
                stream.write(LINE_TERMINATOR)
    except UnicodeError as e:
        message = f"Unable to encode csv records: {e}"
        logger.error(message)
        raise UnsupportedEncodingError(message) from e
    except (OSError, ValueError, csv.Error) as e:
        message = f"Error writing csv records: {e}"
        logger.error(message)
        raise OutputWriteError(message) from e


def write_records_to_string(records: Iterable[Sequence[Any]], delimiter: str = ',', null_value: str = '') -> str:
    buf = io.StringIO(newline='')
    write_records(records, buf, delimiter, null_value)
    return buf.getvalue()


def write_records_to_file(
    records: List[Sequence[Any]],
    destination: Union[str, Path],
    delimiter: str = ',',
    null_value: str = '',
    encoding: str = 'utf-8',
) -> Path:
    """Write records to a CSV file at `destination` and return its path."""
    reject_blank(destination, 'csv file path')
    encoding = ensure_encoding(encoding)
    path = Path(destination)

    logger.info('Writing csv records to file: %s, with delimiter "%s"', path, delimiter)
    try:
        handle = path.open('w', newline='', encoding=encoding)
    except OSError as e:
        message = f"Unable to open csv file for writing: {path}"
        logger.error(message)
        raise OutputWriteError(message) from e

    with handle:
        write_records(records, handle, delimiter, null_value)
    logger.info("The csv records were written to %s", path)
    return path
