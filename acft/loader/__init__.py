"""Loading the scoring standards table from delimited text."""

from acft.loader.csv_reader import CSVReader
from acft.loader.standards import (
    DEFAULT_STANDARDS_PATH,
    EVENT_COLUMNS,
    StandardsColumn,
    load_engine,
    read_standards_columns,
    resolve_standards_path,
    scoring_standards_reader,
)

__all__ = [
    "CSVReader",
    "DEFAULT_STANDARDS_PATH",
    "EVENT_COLUMNS",
    "StandardsColumn",
    "load_engine",
    "read_standards_columns",
    "resolve_standards_path",
    "scoring_standards_reader",
]
