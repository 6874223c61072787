"""ACFT Calculator - raw event readings to 0-100 points from the published scoring standards."""

from acft.errors import (
    ColumnIndexOutOfBoundsError,
    ScoringStandardsError,
    SourceUnavailableError,
    TableSizeError,
    ValueConversionError,
)
from acft.loader import load_engine
from acft.scoring import Event, RecordedTime, ScoreEvent, ScoringEngine, construct_engine

__all__ = [
    "ColumnIndexOutOfBoundsError",
    "Event",
    "RecordedTime",
    "ScoreEvent",
    "ScoringEngine",
    "ScoringStandardsError",
    "SourceUnavailableError",
    "TableSizeError",
    "ValueConversionError",
    "construct_engine",
    "load_engine",
]
