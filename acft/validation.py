"""Schema validation for event readings documents."""

import json
from pathlib import Path

import jsonschema

from acft.scoring import EVENT_SPECS, Event, RecordedTime, ScoreEvent

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"


def _load_schema(name: str) -> dict:
    path = SCHEMAS_DIR / f"{name}.schema.json"
    return json.loads(path.read_text(encoding="utf-8"))


def validate_readings(data: dict) -> None:
    """Validate a readings document against schema. Raises jsonschema.ValidationError if invalid."""
    schema = _load_schema("event_readings")
    jsonschema.validate(data, schema)


def readings_to_events(data: dict) -> list[ScoreEvent]:
    """
    Validate, then convert {"deadlift": 140, "two_mile_run": "21:00", ...}
    into typed ScoreEvents, in event order.
    """
    validate_readings(data)
    events = []
    for event in Event:
        if event.value not in data:
            continue
        raw = data[event.value]
        value_type = EVENT_SPECS[event].value_type
        if value_type is RecordedTime:
            value = RecordedTime.parse(raw)
            if value is None:
                raise ValueError(f"{event.value}: invalid time {raw!r}, expected M:SS")
        else:
            value = value_type(raw)
        events.append(ScoreEvent(event, value))
    return events
