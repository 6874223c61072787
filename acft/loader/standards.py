"""ACFT scoring standards: column layout, file resolution, engine loading."""

import logging
import os
from enum import IntEnum
from pathlib import Path

from acft.loader.csv_reader import CSVReader
from acft.scoring.engine import Event, ScoringEngine, construct_engine

logger = logging.getLogger(__name__)

DEFAULT_STANDARDS_PATH = Path(__file__).resolve().parent.parent / "data" / "ACFTScoringStandards.csv"
STANDARDS_ENV_VAR = "ACFT_SCORING_STANDARDS"


class StandardsColumn(IntEnum):
    """Column positions in ACFTScoringStandards.csv."""

    POINTS = 0
    DEADLIFT = 1
    STANDING_POWER_THROW = 2
    PUSH_UP = 3
    SPRINT_DRAG_CARRY = 4
    LEG_TUCK = 5
    PLANK = 6
    TWO_MILE_RUN = 7


EVENT_COLUMNS: dict[Event, StandardsColumn] = {
    Event.DEADLIFT: StandardsColumn.DEADLIFT,
    Event.STANDING_POWER_THROW: StandardsColumn.STANDING_POWER_THROW,
    Event.PUSH_UP: StandardsColumn.PUSH_UP,
    Event.SPRINT_DRAG_CARRY: StandardsColumn.SPRINT_DRAG_CARRY,
    Event.LEG_TUCK: StandardsColumn.LEG_TUCK,
    Event.PLANK: StandardsColumn.PLANK,
    Event.TWO_MILE_RUN: StandardsColumn.TWO_MILE_RUN,
}


def resolve_standards_path(path: str | Path | None = None) -> Path:
    """Explicit path, else $ACFT_SCORING_STANDARDS, else the bundled CSV."""
    if path:
        return Path(path)
    env_path = os.environ.get(STANDARDS_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_STANDARDS_PATH


def scoring_standards_reader(path: str | Path | None = None) -> CSVReader:
    """CSVReader over the scoring standards. Raises SourceUnavailableError if missing."""
    resolved = resolve_standards_path(path)
    logger.info("Loading scoring standards from %s", resolved)
    return CSVReader.from_path(resolved)


def read_standards_columns(reader: CSVReader) -> dict[Event, list[str]]:
    """Raw text of the seven event columns (header row dropped)."""
    return {event: reader.read_column(column) for event, column in EVENT_COLUMNS.items()}


def load_engine(path: str | Path | None = None) -> ScoringEngine:
    """
    Read the scoring standards and build an engine.
    Every loader or table error propagates; nothing is retried.
    """
    reader = scoring_standards_reader(path)
    return construct_engine(read_standards_columns(reader))
