"""Typed column parsing: size checks, blank trimming, per-type conversion errors."""

import pytest

from acft.errors import TableSizeError, ValueConversionError
from acft.scoring import Direction, RecordedTime, ScoringTable
from acft.scoring.columns import build_points_mapping, parse_distance, parse_int, parse_value


def _column(values: dict[int, str]) -> list[str]:
    """101-cell column with values placed at the given points levels."""
    return [values.get(100 - i, "") for i in range(101)]


def test_points_come_from_cell_index():
    cells = _column({100: "340", 60: "140", 50: "130", 0: "80"})
    mapping = build_points_mapping("deadlift", cells, int)
    assert mapping == [(100, 340), (60, 140), (50, 130), (0, 80)]


def test_blank_cells_are_dropped_not_zero_filled():
    cells = _column({90: "300", 10: "90"})
    cells[50] = "   "
    mapping = build_points_mapping("deadlift", cells, int)
    assert [p for p, _ in mapping] == [90, 10]


def test_full_column_keeps_all_101_entries():
    cells = [str(200 - i) for i in range(101)]
    mapping = build_points_mapping("deadlift", cells, int)
    assert len(mapping) == 101
    assert mapping[0] == (100, 200)
    assert mapping[-1] == (0, 100)


@pytest.mark.parametrize("count", [0, 100, 102])
def test_wrong_length_raises_table_size_error(count):
    with pytest.raises(TableSizeError) as exc_info:
        build_points_mapping("push_up", ["1"] * count, int)
    assert exc_info.value.column_name == "push_up"
    assert exc_info.value.cell_count == count
    assert "push_up" in str(exc_info.value)
    assert "101" in str(exc_info.value)


def test_all_blank_column_raises_table_size_error():
    with pytest.raises(TableSizeError) as exc_info:
        build_points_mapping("leg_tuck", [""] * 101, int)
    assert exc_info.value.populated_count == 0
    assert "no populated cells" in str(exc_info.value)


def test_conversion_error_identifies_cell():
    cells = _column({100: "20", 60: "one"})
    with pytest.raises(ValueConversionError) as exc_info:
        build_points_mapping("leg_tuck", cells, int)
    err = exc_info.value
    assert err.column_name == "leg_tuck"
    assert err.cell_index == 40
    assert err.raw_text == "one"
    assert err.target_type is int
    assert "60 points" in str(err)
    assert "'one'" in str(err)


def test_time_column_conversion():
    cells = _column({100: "1:33", 60: "3:00", 0: "3:35"})
    mapping = build_points_mapping("sprint_drag_carry", cells, RecordedTime)
    assert mapping == [(100, RecordedTime(1, 33)), (60, RecordedTime(3, 0)), (0, RecordedTime(3, 35))]


def test_time_column_rejects_bad_time():
    cells = _column({100: "1:33", 60: "3:75"})
    with pytest.raises(ValueConversionError) as exc_info:
        build_points_mapping("sprint_drag_carry", cells, RecordedTime)
    assert exc_info.value.target_type is RecordedTime


def test_distance_column_conversion():
    cells = _column({100: "12.5", 60: "4.5", 0: "3.3"})
    mapping = build_points_mapping("standing_power_throw", cells, float)
    assert mapping == [(100, 12.5), (60, 4.5), (0, 3.3)]


def test_int_and_distance_parse_rules():
    assert parse_int("140") == 140
    assert parse_int(" 7 ") == 7
    assert parse_int("-1") == -1
    assert parse_int("4.5") is None
    assert parse_int("1_000") is None
    assert parse_distance("4.5") == 4.5
    assert parse_distance("12") == 12.0
    assert parse_distance(".5") == 0.5
    assert parse_distance("nan") is None
    assert parse_distance("inf") is None
    assert parse_distance("1e3") is None


def test_parse_value_unknown_type():
    with pytest.raises(TypeError):
        parse_value("1", str)


def test_scoring_table_from_column():
    cells = _column({100: "13:30", 60: "21:00", 0: "22:48"})
    table = ScoringTable.from_column("two_mile_run", cells, RecordedTime, Direction.ASCENDING)
    assert len(table) == 3
    assert table.best.points == 100
    assert table.worst.threshold == RecordedTime(22, 48)
    assert table.is_monotonic()


def test_is_monotonic_detects_disorder():
    cells = _column({100: "100", 60: "140", 0: "80"})
    table = ScoringTable.from_column("deadlift", cells, int, Direction.DESCENDING)
    assert not table.is_monotonic()
