"""Recorded times for timed events (sprint-drag-carry, plank, two-mile run)."""

import re
from dataclasses import dataclass

_TIME_RE = re.compile(r"(\d+):(\d+)")


@dataclass(frozen=True, order=True)
class RecordedTime:
    """
    A minutes+seconds duration. Ordered by minutes, then seconds.
    Seconds outside 0-59 are rejected, never rolled into minutes.
    """

    minutes: int
    seconds: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            raise ValueError(f"minutes must be non-negative, got {self.minutes}")
        if not 0 <= self.seconds <= 59:
            raise ValueError(f"seconds must be in 0-59, got {self.seconds}")

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> "RecordedTime":
        """125 -> 2:05."""
        if total_seconds < 0:
            raise ValueError(f"total_seconds must be non-negative, got {total_seconds}")
        return cls(total_seconds // 60, total_seconds % 60)

    @classmethod
    def parse(cls, text: str) -> "RecordedTime | None":
        """
        Parse "MM:SS" text. Returns None if the text is not exactly two
        non-negative integers separated by ":" or the seconds are out of range.
        """
        if not isinstance(text, str):
            return None
        m = _TIME_RE.fullmatch(text.strip())
        if not m:
            return None
        try:
            return cls(int(m.group(1)), int(m.group(2)))
        except ValueError:
            return None

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def __str__(self) -> str:
        return f"{self.minutes}:{self.seconds:02d}"
