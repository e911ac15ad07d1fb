from pathlib import Path

import pytest

from qperf.constants import MEMORY_INDEX, QUESTION_TYPE_INDICES, RANKING_EXPLANATION
from qperf.exceptions import (
    InvalidConfigurationException,
    InvalidDelimiterException,
    InvalidInputPathException,
    InvalidQuestionTypeException,
)
from qperf.models.config import AnalysisConfig
from qperf.models.event import EventCode, EventRecord
from qperf.reporting import build_report, build_round_results, build_standings
from qperf.tournament.pipeline import analyze, analyze_records

DATA_DIR = Path(__file__).parent / "data"
SETS = DATA_DIR / "sets.rtf"
QUIZ_LOG = DATA_DIR / "quiz_log.csv"

EXPECTED_INDIVIDUAL = (
    "Quizzer,Team,"
    "A Attempted,A Correct,A Bonuses Attempted,A Bonuses Correct,"
    "G Attempted,G Correct,G Bonuses Attempted,G Bonuses Correct,"
    "M Attempted,M Correct,M Bonuses Attempted,M Bonuses Correct,\n"
    "Ann,Eagles,0,0,0,0,2,1,0,0,0,0,0,0,\n"
    "Ben,Eagles,1,0,0,0,1,1,0,0,0,0,0,0,\n"
    "Cal,Eagles,0,0,0,0,0,0,0,0,0,0,0,0,\n"
    "Dee,Hawks,0,0,0,0,3,3,0,0,2,2,0,0,\n"
    "Eve,Hawks,0,0,1,1,0,0,0,0,0,0,0,0,\n"
    "Fay,Owls,1,1,0,0,0,0,0,0,0,0,0,0,\n"
    "Gus,Foxes,0,0,0,0,0,0,0,0,0,0,0,0,\n"
)

EXPECTED_STANDINGS = (
    "Team Results\n\n"
    f"{RANKING_EXPLANATION}\n\n"
    "Name,Placement,Wins,Losses,Total Score\n"
    "Owls,1,1,0,20\n"
    "Hawks,2,1,1,120\n"
    "Eagles,3,1,1,30\n"
    "Foxes,4,0,1,0\n"
)


@pytest.fixture
def spring_result():
    return analyze(str(SETS), str(QUIZ_LOG), AnalysisConfig(tournament="Spring"))


def test_rounds_are_reconstructed_and_scored(spring_result):
    rounds = spring_result.rounds

    assert [r.key for r in rounds] == ["Room1Round1", "Room1Round2", "Room2Round3"]
    assert [[(t.team_name, t.score) for t in r.results] for r in rounds] == [
        [("Eagles", 40), ("Hawks", 30)],
        [("Hawks", 90), ("Eagles", -10)],
        [("Owls", 20), ("Foxes", 0)],
    ]
    assert spring_result.confirmed_teams == ["Eagles", "Hawks", "Owls", "Foxes"]


def test_quizzer_stats(spring_result):
    stats = spring_result.stats
    g = QUESTION_TYPE_INDICES["G"]

    assert [s.name for s in stats] == ["Ann", "Ben", "Cal", "Dee", "Eve", "Fay", "Gus"]
    assert stats["Dee"].row(QUESTION_TYPE_INDICES["Q"]) == [1, 1, 0, 0]
    assert stats["Dee"].row(QUESTION_TYPE_INDICES["R"]) == [1, 1, 0, 0]
    assert stats["Dee"].row(g) == [3, 3, 0, 0]
    assert stats["Dee"].row(MEMORY_INDEX) == [2, 2, 0, 0]
    assert stats["Ann"].row(g) == [2, 1, 0, 0]
    assert stats["Eve"].row(0) == [0, 0, 1, 1]
    assert "Zed" not in stats
    assert "Stranger" not in stats


def test_standings(spring_result):
    assert [
        (s.name, s.placement, s.wins, s.losses, s.total_score)
        for s in spring_result.standings
    ] == [
        ("Owls", 1, 1, 0, 20),
        ("Hawks", 2, 1, 1, 120),
        ("Eagles", 3, 1, 1, 30),
        ("Foxes", 4, 0, 1, 0),
    ]


def test_missing_question_set_warnings(spring_result):
    assert spring_result.warnings == [
        "Warning: Some rounds are missing question sets! "
        "Their questions are counted under question type A!",
        "Skipped Rounds: ['3']",
        "Round names must match between the quiz data and the question set files!",
    ]


def test_report(spring_result):
    spring_result.config.question_types = ["M", "A", "G"]

    assert build_report(spring_result) == f"{EXPECTED_INDIVIDUAL}\n{EXPECTED_STANDINGS}"
    assert build_standings(spring_result.standings) == EXPECTED_STANDINGS


def test_round_results_block(spring_result):
    text = build_round_results(spring_result.rounds, "\t")

    assert text.startswith("Individual Round Results\n\nRoom: 1\t Round: 1\nEagles\t 40\n")
    assert "Room: 2\t Round: 3\nOwls\t 20\nFoxes\t 0\n\n" in text


def test_display_rounds_adds_round_block():
    config = AnalysisConfig(tournament="Spring", display_rounds=True)
    report = build_report(analyze(SETS, QUIZ_LOG, config))

    assert "Individual Round Results" in report
    assert report.index("Individual Round Results") < report.index("Team Results")


def test_without_tournament_filter_everything_is_read():
    result = analyze([SETS], [QUIZ_LOG])

    assert "Room9Round9" in [r.key for r in result.rounds]
    assert any(
        "Team number 0 added mid-round in room 9 round 9" in w for w in result.warnings
    )
    assert "Skipped Rounds: ['9', '3']" in result.warnings


def test_unknown_tournament_gives_empty_result():
    result = analyze(SETS, QUIZ_LOG, AnalysisConfig(tournament="Winter"))

    assert result.rounds == []
    assert result.standings == []
    assert result.warnings == ["Warning: No records found for tournament Winter"]


def test_parallel_scoring_matches_sequential():
    sequential = analyze(SETS, QUIZ_LOG, AnalysisConfig(tournament="Spring"))
    parallel = analyze(SETS, QUIZ_LOG, AnalysisConfig(tournament="Spring", workers=2))

    assert build_report(parallel) == build_report(sequential)
    assert parallel.warnings == sequential.warnings


def test_paths_can_be_comma_separated():
    result = analyze(f"'{SETS},{SETS}'", str(QUIZ_LOG), AnalysisConfig(tournament="Spring"))

    assert result.warnings[0] == "Warning: Duplicate question set number: 1, using only the first."


def test_missing_path_is_fatal(tmp_path):
    with pytest.raises(InvalidInputPathException, match="does not exist"):
        analyze(tmp_path / "missing.rtf", QUIZ_LOG)


def test_wrong_extension_is_fatal():
    with pytest.raises(InvalidInputPathException, match="not a RTF file"):
        analyze(QUIZ_LOG, QUIZ_LOG)


@pytest.mark.parametrize(
    "config, exception",
    [
        (AnalysisConfig(question_types=["Z"]), InvalidQuestionTypeException),
        (AnalysisConfig(delimiter=""), InvalidDelimiterException),
        (AnalysisConfig(workers=0), InvalidConfigurationException),
    ],
)
def test_invalid_configuration_is_fatal(config, exception):
    with pytest.raises(exception):
        analyze(SETS, QUIZ_LOG, config)


def _event(code, name, team, question=0):
    return EventRecord(
        tournament="Spring",
        room="4",
        round_id="1",
        question_number=question,
        name=name,
        team_number=team,
        seat_number=0,
        code=EventCode(code),
    )


def test_slot_added_mid_round_is_not_ranked():
    # Slot 0 is never named, so the pruned roster is Hawks, Owls and the
    # quizzer on slot 2 points past it.
    records = [
        _event("TN", "Hawks", 1),
        _event("TN", "Owls", 2),
        _event("TC", "Hana", 1, question=1),
        _event("TC", "Olly", 2, question=2),
        _event("TC", "Olly", 2, question=3),
        _event("TC", "Olly", 2, question=4),
    ]

    result = analyze_records(records, {"1": ["G", "G", "G", "G", "G"]})

    assert [(r.team_name, r.score) for r in result.rounds[0].results] == [
        ("Hawks", 0),
        ("Owls", 20),
    ]
    assert [
        (s.name, s.placement, s.wins, s.losses, s.total_score)
        for s in result.standings
    ] == [("Owls", 1, 1, 0, 20), ("Hawks", 2, 0, 1, 0)]
    assert len(result.warnings) == 1
    assert "Team number 2 added mid-round in room 4 round 1" in result.warnings[0]
