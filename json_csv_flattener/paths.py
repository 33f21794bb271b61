from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

HEADER_DELIMITER = '/'
ESCAPE = '\\'

# Characters with a meaning in header strings; escaped inside field names.
_RESERVED = (ESCAPE, HEADER_DELIMITER, '[', ']')

_SEGMENT_RE = re.compile(r'^(?P<name>(?:\\.|\\$|[^\\])*?)(?P<indices>(?:\[\d+\])*)$', re.DOTALL)
_INDEX_RE = re.compile(r'\[(\d+)\]')


@dataclass(frozen=True)
class Field:
    name: str


@dataclass(frozen=True)
class Index:
    position: int


PathStep = Union[Field, Index]
Path = Tuple[PathStep, ...]


def escape_path_segment(segment: str) -> str:
    """Escape a field name for header representation.

    '/', '[', ']' and backslashes are prefixed with a backslash so keys like
    'a/b' or 'x[1]' stay one field when the header is parsed again.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return ''.join(ESCAPE + ch if ch in _RESERVED else ch for ch in segment)


def unescape_path_segment(segment: str) -> str:
    if segment is None:
        return ''
    out: List[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == ESCAPE and i + 1 < len(segment):
            out.append(segment[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return ''.join(out)


def split_header(header: str) -> List[str]:
    """Split a header on unescaped '/'; escapes are kept in each segment."""
    parts: List[str] = []
    buf: List[str] = []
    escaping = False

    for ch in header:
        if escaping:
            buf.append(ch)
            escaping = False
            continue
        if ch == ESCAPE:
            buf.append(ch)
            escaping = True
            continue
        if ch == HEADER_DELIMITER:
            parts.append(''.join(buf))
            buf = []
            continue
        buf.append(ch)

    parts.append(''.join(buf))
    return parts


def canonical_header(path: Sequence[PathStep]) -> str:
    """Build the column name for a leaf reached through `path`.

    Only the final step may keep its array index: a primitive sitting
    directly inside an array gets one column per position ('tags[0]').
    Every other index is dropped, so arrays of objects share columns and
    fan out into rows instead.
    """
    if not path:
        return ''

    header = HEADER_DELIMITER.join(
        escape_path_segment(step.name) for step in path if isinstance(step, Field)
    )
    last = path[-1]
    if isinstance(last, Index):
        header = f"{header}[{last.position}]"
    return header.lstrip(HEADER_DELIMITER)


def parse_header(header: str) -> Path:
    """Parse a header string such as 'a/b[0]/c[1]' back into path steps."""
    if header is None:
        return ()
    if not isinstance(header, str):
        header = str(header)
    if header == '':
        return ()

    steps: List[PathStep] = []
    for position, segment in enumerate(split_header(header)):
        match = _SEGMENT_RE.match(segment)
        name, indices = match.group('name'), match.group('indices')
        # A bare '[0]' only stands alone at the root.
        if name or not indices or position > 0:
            steps.append(Field(unescape_path_segment(name)))
        for index in _INDEX_RE.findall(indices):
            steps.append(Index(int(index)))
    return tuple(steps)


def canonicalize(header: str) -> str:
    """Re-canonicalize a header string; a no-op on canonical headers."""
    return canonical_header(parse_header(header))


def display_header(header: str, separator: str) -> str:
    """Join a canonical header's segments with `separator`, unescaping field names."""
    return separator.join(unescape_path_segment(segment) for segment in split_header(header))
