"""Deterministic ACFT scoring engine. Pure lookups over immutable tables."""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Sequence

from acft.errors import TableSizeError
from acft.scoring.recorded_time import RecordedTime
from acft.scoring.tables import Direction, ScoringTable

logger = logging.getLogger(__name__)


class Event(str, Enum):
    DEADLIFT = "deadlift"
    STANDING_POWER_THROW = "standing_power_throw"
    PUSH_UP = "push_up"
    SPRINT_DRAG_CARRY = "sprint_drag_carry"
    LEG_TUCK = "leg_tuck"
    PLANK = "plank"
    TWO_MILE_RUN = "two_mile_run"


class EventSpec(NamedTuple):
    value_type: type
    direction: Direction
    unit: str


EVENT_SPECS: dict[Event, EventSpec] = {
    Event.DEADLIFT: EventSpec(int, Direction.DESCENDING, "pounds"),
    Event.STANDING_POWER_THROW: EventSpec(float, Direction.DESCENDING, "meters"),
    Event.PUSH_UP: EventSpec(int, Direction.DESCENDING, "repetitions"),
    Event.SPRINT_DRAG_CARRY: EventSpec(RecordedTime, Direction.ASCENDING, "time"),
    Event.LEG_TUCK: EventSpec(int, Direction.DESCENDING, "repetitions"),
    Event.PLANK: EventSpec(RecordedTime, Direction.DESCENDING, "time"),
    Event.TWO_MILE_RUN: EventSpec(RecordedTime, Direction.ASCENDING, "time"),
}


@dataclass(frozen=True)
class ScoreEvent:
    """An event tag plus the test-taker's raw reading, type-checked against the event."""

    event: Event
    value: object

    def __post_init__(self) -> None:
        event = Event(self.event)
        object.__setattr__(self, "event", event)
        expected = EVENT_SPECS[event].value_type
        value = self.value
        if isinstance(value, bool):
            ok = False
        elif expected is float:
            ok = isinstance(value, (int, float))
        else:
            ok = isinstance(value, expected)
        if not ok:
            raise TypeError(
                f"{event.value} expects {expected.__name__}, got {type(value).__name__}: {value!r}"
            )

    @classmethod
    def deadlift(cls, pounds: int) -> "ScoreEvent":
        return cls(Event.DEADLIFT, pounds)

    @classmethod
    def standing_power_throw(cls, meters: float) -> "ScoreEvent":
        return cls(Event.STANDING_POWER_THROW, meters)

    @classmethod
    def push_up(cls, repetitions: int) -> "ScoreEvent":
        return cls(Event.PUSH_UP, repetitions)

    @classmethod
    def sprint_drag_carry(cls, time: RecordedTime) -> "ScoreEvent":
        return cls(Event.SPRINT_DRAG_CARRY, time)

    @classmethod
    def leg_tuck(cls, repetitions: int) -> "ScoreEvent":
        return cls(Event.LEG_TUCK, repetitions)

    @classmethod
    def plank(cls, time: RecordedTime) -> "ScoreEvent":
        return cls(Event.PLANK, time)

    @classmethod
    def two_mile_run(cls, time: RecordedTime) -> "ScoreEvent":
        return cls(Event.TWO_MILE_RUN, time)


class ScoringEngine:
    """
    Owns one ScoringTable per event and answers point lookups.
    Never mutated after construction; safe to share across threads.
    """

    def __init__(self, tables: Mapping[Event, ScoringTable]):
        missing = [e.value for e in Event if e not in tables]
        if missing:
            raise ValueError(f"Missing scoring tables for: {', '.join(missing)}")
        self._tables = MappingProxyType({e: tables[e] for e in Event})

    @classmethod
    def from_columns(cls, columns: Mapping[Event | str, Sequence[str]]) -> "ScoringEngine":
        """
        Build every event table from raw column text. The first failing column
        aborts construction (TableSizeError / ValueConversionError propagate).
        """
        by_event = {Event(k): v for k, v in columns.items()}
        tables = {}
        for event, spec in EVENT_SPECS.items():
            cells = by_event.get(event)
            if cells is None:
                raise TableSizeError(event.value, 0)
            table = ScoringTable.from_column(event.value, cells, spec.value_type, spec.direction)
            if not table.is_monotonic():
                logger.warning("Table %s thresholds are not monotonic (%s)", event.value, spec.direction.value)
            logger.debug(
                "Built %s table: %d entries, best %s=%s, worst %s=%s",
                event.value, len(table), table.best.points, table.best.threshold,
                table.worst.points, table.worst.threshold,
            )
            tables[event] = table
        return cls(tables)

    def score(self, event: ScoreEvent) -> int:
        """Points (0-100) earned for one event reading."""
        return self._tables[event.event].lookup(event.value)

    def score_all(self, events: Iterable[ScoreEvent]) -> dict[Event, int]:
        """Per-event points for a batch of readings. A later reading of the same event wins."""
        return {e.event: self.score(e) for e in events}

    def thresholds(self, event: Event | str) -> tuple[tuple[int, object], ...]:
        """Listed (points, threshold) pairs for an event, best first."""
        return tuple((p, t) for p, t in self._tables[Event(event)].entries)

    def direction(self, event: Event | str) -> Direction:
        return self._tables[Event(event)].direction


def construct_engine(columns: Mapping[Event | str, Sequence[str]]) -> ScoringEngine:
    """Build an engine from the seven raw event columns."""
    return ScoringEngine.from_columns(columns)
