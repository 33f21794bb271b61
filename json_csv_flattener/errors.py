from __future__ import annotations


class ConversionError(Exception):
    """Base class for every failure raised while converting JSON to CSV."""


class InvalidInputError(ConversionError, ValueError):
    """A required document, schema or destination is missing or blank."""


class MalformedJsonError(ConversionError, ValueError):
    """The input text is not valid JSON."""


class OutputWriteError(ConversionError, OSError):
    """The CSV destination could not be opened or written."""


class UnsupportedEncodingError(ConversionError, LookupError):
    """The requested output text encoding is unknown."""
