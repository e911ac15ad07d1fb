from pathlib import Path

import pytest

from qperf.exceptions import MalformedRecordException
from qperf.models.accumulator import Accumulator
from qperf.models.event import EventCode, EventRecord
from qperf.readers.quiz_data import load_records, normalize_rows

DATA_DIR = Path(__file__).parent / "data"


def _row(code, name="Ann", tournament="Spring", room="1", round_id="1", question="1",
         team="0", seat="0"):
    return [
        "1",
        f"'{tournament}'",
        "'2025-04-05'",
        f"'{room}'",
        f"'{round_id}'",
        f"'{question}'",
        "'0'",
        f"'{name}'",
        f"'{team}'",
        f"'{seat}'",
        f"'{code}'",
    ]


def test_record_from_columns_strips_quotes():
    record = EventRecord.from_columns(_row("TC", question="16", team="2", seat="3"))

    assert record.tournament == "Spring"
    assert record.room == "1"
    assert record.round_id == "1"
    assert record.question_number == 16
    assert record.question_index == 15
    assert record.name == "Ann"
    assert record.team_number == 2
    assert record.seat_number == 3
    assert record.code is EventCode.CORRECT_ANSWER
    assert record.code.is_scoring


def test_non_numeric_fields_parse_as_zero():
    record = EventRecord.from_columns(_row("QN", question="", team="x", seat="?"))

    assert record.question_number == 0
    assert record.team_number == 0
    assert record.seat_number == 0
    assert not record.code.is_scoring


def test_short_row_is_malformed():
    with pytest.raises(MalformedRecordException):
        EventRecord.from_columns(["1", "'Spring'", "'x'"])


def test_normalizer_keeps_whitelisted_codes_only():
    rows = [
        ("log.csv", 1, _row("TN", name="Eagles")),
        ("log.csv", 2, _row("XX")),
        ("log.csv", 3, _row("RM")),
        ("log.csv", 4, _row("BE")),
    ]
    records = normalize_rows(rows, Accumulator())

    assert [r.code for r in records] == [
        EventCode.TEAM_NAME,
        EventCode.ROOM_MARKER,
        EventCode.BONUS_INCORRECT,
    ]


def test_normalizer_tournament_filter():
    rows = [
        ("log.csv", 1, _row("TC", tournament="Spring")),
        ("log.csv", 2, _row("TC", tournament="Fall")),
    ]
    records = normalize_rows(rows, Accumulator(), tournament="Fall")

    assert [r.tournament for r in records] == ["Fall"]


def test_nothing_left_after_filter_warns():
    accumulator = Accumulator()
    records = normalize_rows(
        [("log.csv", 1, _row("TC", tournament="Spring"))], accumulator, "Winter"
    )

    assert records == []
    assert accumulator.warnings == ["Warning: No records found for tournament Winter"]


def test_empty_input_does_not_warn():
    accumulator = Accumulator()
    assert normalize_rows([], accumulator) == []
    assert accumulator.warnings == []


def test_malformed_row_is_skipped_with_warning():
    accumulator = Accumulator()
    rows = [
        ("log.csv", 1, ["1", "'Spring'", "'TC'"]),
        ("log.csv", 2, _row("TC")),
    ]
    records = normalize_rows(rows, accumulator)

    assert len(records) == 1
    assert len(accumulator.warnings) == 1
    assert "row 1 in log.csv" in accumulator.warnings[0]


def test_load_sample_log():
    accumulator = Accumulator()
    records = load_records([DATA_DIR / "quiz_log.csv"], accumulator, "Spring")

    # 28 rows, one from another tournament, one with an unknown code
    assert len(records) == 26
    assert records[0].name == "Practice Team"
    assert all(r.tournament == "Spring" for r in records)
    assert accumulator.warnings == []
