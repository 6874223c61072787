"""Typed column parsing: raw CSV cells -> (points, threshold) pairs."""

import re
from typing import Callable, Sequence

from acft.errors import TableSizeError, ValueConversionError
from acft.scoring.recorded_time import RecordedTime

COLUMN_LENGTH = 101
MAX_POINTS = 100

_INT_RE = re.compile(r"[+-]?\d+")
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)")


def parse_int(text: str) -> int | None:
    """Base-10 integer, e.g. pounds or repetitions."""
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def parse_distance(text: str) -> float | None:
    """Plain decimal number (meters). No exponents, nan or inf."""
    text = text.strip()
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return float(text)


# One parse rule per threshold type
VALUE_PARSERS: dict[type, Callable[[str], object]] = {
    int: parse_int,
    float: parse_distance,
    RecordedTime: RecordedTime.parse,
}


def parse_value(text: str, value_type: type):
    """Convert a cell with the registered rule for value_type. Returns None on failure."""
    try:
        parser = VALUE_PARSERS[value_type]
    except KeyError:
        raise TypeError(f"No parser registered for {value_type.__name__}") from None
    return parser(text)


def build_points_mapping(
    column_name: str, cells: Sequence[str], value_type: type
) -> list[tuple[int, object]]:
    """
    Map a 101-cell column (index 0 = 100 points ... index 100 = 0 points)
    to (points, value) pairs. Blank cells are dropped; the rest keep source order.
    Raises TableSizeError on a wrong-length or all-blank column and
    ValueConversionError on the first cell that does not parse.
    """
    if len(cells) != COLUMN_LENGTH:
        raise TableSizeError(column_name, len(cells))

    mapping = []
    for index, raw in enumerate(cells):
        if not raw or not raw.strip():
            continue
        value = parse_value(raw, value_type)
        if value is None:
            raise ValueConversionError(column_name, index, raw, value_type)
        mapping.append((MAX_POINTS - index, value))

    if not mapping:
        raise TableSizeError(column_name, len(cells), populated_count=0)
    return mapping
