#!/usr/bin/env python3
"""CLI for scoring ACFT event readings against the scoring standards."""

import argparse
import json
import sys
from pathlib import Path

import jsonschema
from dotenv import load_dotenv

from acft.app_logging import setup_app_logging
from acft.errors import ScoringStandardsError
from acft.loader import load_engine
from acft.scoring import EVENT_SPECS, Event, RecordedTime, ScoreEvent, ScoringEngine
from acft.validation import readings_to_events


def _time_arg(text: str) -> RecordedTime:
    value = RecordedTime.parse(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid time {text!r}, expected M:SS")
    return value


_ARG_TYPES = {int: int, float: float, RecordedTime: _time_arg}


def _load_engine_or_exit(standards: Path | None) -> ScoringEngine:
    try:
        return load_engine(standards)
    except ScoringStandardsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _events_from_args(args: argparse.Namespace) -> list[ScoreEvent]:
    events = []
    if args.readings:
        path = Path(args.readings)
        if not path.exists():
            print(f"Error: Readings file not found: {path}", file=sys.stderr)
            sys.exit(1)
        try:
            events = readings_to_events(json.loads(path.read_text(encoding="utf-8")))
        except json.JSONDecodeError as e:
            print(f"Error: Readings file is not valid JSON: {e}", file=sys.stderr)
            sys.exit(1)
        except jsonschema.ValidationError as e:
            print(f"Error: Invalid readings: {e.message}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    # Flags override readings from the file
    by_event = {e.event: e for e in events}
    for event in Event:
        value = getattr(args, event.value)
        if value is not None:
            by_event[event] = ScoreEvent(event, value)
    return [by_event[e] for e in Event if e in by_event]


def cmd_score(args: argparse.Namespace) -> None:
    """Score each supplied event reading."""
    events = _events_from_args(args)
    if not events:
        print("Error: Provide at least one event reading (flags or --readings)", file=sys.stderr)
        sys.exit(1)

    engine = _load_engine_or_exit(args.standards)
    scores = engine.score_all(events)

    if args.json:
        print(json.dumps({
            e.event.value: {"raw": str(e.value), "points": scores[e.event]} for e in events
        }, indent=2))
        return

    for e in events:
        unit = EVENT_SPECS[e.event].unit
        print(f"{e.event.value:<22} {str(e.value):>8} {unit:<12} {scores[e.event]:>3} points")


def cmd_table(args: argparse.Namespace) -> None:
    """Print the listed thresholds of one event."""
    engine = _load_engine_or_exit(args.standards)
    event = Event(args.event)
    rows = engine.thresholds(event)
    if args.json:
        print(json.dumps([{"points": p, "threshold": str(t)} for p, t in rows], indent=2))
        return
    print(f"{event.value} ({engine.direction(event).value}, {EVENT_SPECS[event].unit})")
    for points, threshold in rows:
        print(f"  {points:>3}  {threshold}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    setup_app_logging()

    parser = argparse.ArgumentParser(description="Score ACFT event readings (0-100 points per event)")
    parser.add_argument(
        "--standards",
        type=Path,
        default=None,
        help="Scoring standards CSV (or ACFT_SCORING_STANDARDS env; default: bundled table)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # score
    p_score = sub.add_parser("score", help="Score event readings")
    for event, spec in EVENT_SPECS.items():
        p_score.add_argument(
            f"--{event.value.replace('_', '-')}",
            dest=event.value,
            type=_ARG_TYPES[spec.value_type],
            default=None,
            metavar="M:SS" if spec.value_type is RecordedTime else spec.unit.upper(),
            help=f"{event.value.replace('_', ' ')} reading ({spec.unit})",
        )
    p_score.add_argument("--readings", type=Path, help="JSON file of readings keyed by event")
    p_score.add_argument("--json", action="store_true", help="Output JSON")
    p_score.set_defaults(func=cmd_score)

    # table
    p_table = sub.add_parser("table", help="Show the listed thresholds for one event")
    p_table.add_argument("event", choices=[e.value for e in Event], help="Event name")
    p_table.add_argument("--json", action="store_true", help="Output JSON")
    p_table.set_defaults(func=cmd_table)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
