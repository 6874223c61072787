"""Errors raised while loading scoring standards and building the engine."""

from pathlib import Path


class ScoringStandardsError(ValueError):
    """Base class: the scoring standards could not be turned into an engine."""


class SourceUnavailableError(FileNotFoundError, ScoringStandardsError):
    """Raised when the scoring standards file cannot be located or read."""

    def __init__(self, path: str | Path, reason: str | None = None):
        self.path = Path(path)
        self.reason = reason
        msg = f"Scoring standards not found or unreadable: {self.path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class TableSizeError(ScoringStandardsError):
    """Raised when a column does not hold exactly 101 cells, or holds no values at all."""

    def __init__(self, column_name: str, cell_count: int, populated_count: int | None = None):
        self.column_name = column_name
        self.cell_count = cell_count
        self.populated_count = populated_count
        if populated_count == 0:
            msg = f"Column {column_name!r} has no populated cells; at least one threshold is required"
        else:
            msg = f"Column {column_name!r} has {cell_count} cells; expected 101 (100 points down to 0)"
        super().__init__(msg)


class ValueConversionError(ScoringStandardsError):
    """Raised when a non-blank cell cannot be parsed into the column's value type."""

    def __init__(self, column_name: str, cell_index: int, raw_text: str, target_type: type):
        self.column_name = column_name
        self.cell_index = cell_index
        self.raw_text = raw_text
        self.target_type = target_type
        super().__init__(
            f"Column {column_name!r}, cell {cell_index} ({100 - cell_index} points): "
            f"cannot convert {raw_text!r} to {target_type.__name__}"
        )


class ColumnIndexOutOfBoundsError(ScoringStandardsError):
    """Raised when a source row has fewer cells than the requested column index."""

    def __init__(self, index: int, row_number: int | None = None):
        self.index = index
        self.row_number = row_number
        msg = f"Column index {index} out of bounds"
        if row_number is not None:
            msg += f" in row {row_number}"
        super().__init__(msg)
