"""Scoring tables: ordered (points, threshold) entries plus a comparison direction."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence

from acft.scoring.columns import build_points_mapping


class Direction(str, Enum):
    # lower raw value scores higher (timed runs)
    ASCENDING = "ascending"
    # higher raw value scores higher (weight, reps, distance, plank hold)
    DESCENDING = "descending"


class TableEntry(NamedTuple):
    points: int
    threshold: object


@dataclass(frozen=True)
class ScoringTable:
    """One event's points mapping, best points first. Immutable once built."""

    name: str
    value_type: type
    direction: Direction
    entries: tuple[TableEntry, ...]

    @classmethod
    def from_column(
        cls, name: str, cells: Sequence[str], value_type: type, direction: Direction
    ) -> "ScoringTable":
        mapping = build_points_mapping(name, cells, value_type)
        return cls(
            name=name,
            value_type=value_type,
            direction=direction,
            entries=tuple(TableEntry(p, v) for p, v in mapping),
        )

    def lookup(self, raw_value) -> int:
        """
        Points for raw_value: first entry (100 -> 0) the value meets or beats.
        Beyond the best threshold -> best listed points; worse than the worst -> 0.
        """
        for points, threshold in self.entries:
            if self.direction is Direction.DESCENDING:
                if raw_value >= threshold:
                    return points
            elif raw_value <= threshold:
                return points
        return 0

    def is_monotonic(self) -> bool:
        """True if thresholds get strictly worse as points decrease."""
        thresholds = [e.threshold for e in self.entries]
        pairs = zip(thresholds, thresholds[1:])
        if self.direction is Direction.DESCENDING:
            return all(a > b for a, b in pairs)
        return all(a < b for a, b in pairs)

    @property
    def best(self) -> TableEntry:
        return self.entries[0]

    @property
    def worst(self) -> TableEntry:
        return self.entries[-1]

    def __len__(self) -> int:
        return len(self.entries)
