from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = '_'
DEFAULT_DELIMITER = ','
DEFAULT_NULL_VALUE = ''
DEFAULT_ENCODING = 'utf-8'


def parse_delimiter(value: Optional[str]) -> Optional[str]:
    """Accept '\\t' or 'tab' for a tab delimiter; blank means default."""
    if value is None or value == '':
        return None
    if value in ('\\t', 'tab'):
        return '\t'
    return value


@dataclass(frozen=True)
class FlattenConfig:
    """Options for one conversion.

    - separator: replaces '/' between path segments in header names.
    - delimiter: text placed between cells of a CSV line.
    - null_value: text written for unset cells.
    - encoding: text encoding of CSV files written to a path.

    Instances are immutable and built per call; nothing here is process-wide.
    """

    separator: str = DEFAULT_SEPARATOR
    delimiter: str = DEFAULT_DELIMITER
    null_value: str = DEFAULT_NULL_VALUE
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self):
        if not self.delimiter:
            message = "delimiter cannot be null or empty."
            logger.error(message)
            raise InvalidInputError(message)

    @classmethod
    def create(
        cls,
        separator: Optional[str] = None,
        delimiter: Optional[str] = None,
        null_value: Optional[str] = None,
        encoding: Optional[str] = None,
    ) -> 'FlattenConfig':
        """Build a config, falling back to the defaults for None arguments."""
        return cls(
            separator=DEFAULT_SEPARATOR if separator is None else separator,
            delimiter=DEFAULT_DELIMITER if delimiter is None else delimiter,
            null_value=DEFAULT_NULL_VALUE if null_value is None else null_value,
            encoding=encoding or DEFAULT_ENCODING,
        )
