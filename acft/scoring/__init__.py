"""Deterministic ACFT scoring engine."""

from acft.scoring.engine import (
    EVENT_SPECS,
    Event,
    ScoreEvent,
    ScoringEngine,
    construct_engine,
)
from acft.scoring.recorded_time import RecordedTime
from acft.scoring.tables import Direction, ScoringTable, TableEntry

__all__ = [
    "EVENT_SPECS",
    "Direction",
    "Event",
    "RecordedTime",
    "ScoreEvent",
    "ScoringEngine",
    "ScoringTable",
    "TableEntry",
    "construct_engine",
]
