import json
from pathlib import Path

import pytest

from qperf import APP_VERSION
from qperf.cli import create_parser, main, parse_question_types

DATA_DIR = Path(__file__).parent / "data"
SETS = str(DATA_DIR / "sets.rtf")
QUIZ_LOG = str(DATA_DIR / "quiz_log.csv")


def test_report_goes_to_stdout(capsys):
    assert main([SETS, QUIZ_LOG, "--tournament", "Spring", "-t", "ag"]) == 0

    captured = capsys.readouterr()
    assert captured.out.startswith("Quizzer,Team,A Attempted,")
    assert "G Bonuses Correct," in captured.out
    assert "M Attempted" not in captured.out
    assert "Owls,1,1,0,20\n" in captured.out
    assert "Skipped Rounds: ['3']" in captured.err


def test_report_to_file_with_tab_delimiter(tmp_path, capsys):
    output = tmp_path / "results.csv"

    exit_code = main(
        [SETS, QUIZ_LOG, "--tournament", "Spring", "-d", "\\t", "-r", "-o", str(output)]
    )

    assert exit_code == 0
    assert capsys.readouterr().out == ""
    report = output.read_text(encoding="utf-8")
    assert "Hawks\t2\t1\t1\t120\n" in report
    assert "Room: 1\t Round: 2\nHawks\t 90\nEagles\t -10\n" in report


def test_config_file_is_overridden_by_options(tmp_path, capsys):
    config_file = tmp_path / "qperf.json"
    config_file.write_text(
        json.dumps({"tournament": "Spring", "delimiter": ";", "question_types": ["A"]})
    )

    assert main([SETS, QUIZ_LOG, "--config", str(config_file), "-d", "|"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Quizzer|Team|A Attempted|")
    assert "G Attempted" not in out


def test_invalid_config_value_exits_with_error(tmp_path, capsys):
    config_file = tmp_path / "qperf.json"
    config_file.write_text(json.dumps({"question_types": ["Z"]}))

    assert main([SETS, QUIZ_LOG, "--config", str(config_file)]) == 1
    assert "Error: Invalid question type 'Z'." in capsys.readouterr().err


def test_missing_input_exits_with_error(capsys):
    assert main(["missing.rtf", QUIZ_LOG]) == 1
    assert "does not exist" in capsys.readouterr().err


def test_unknown_type_letter_is_rejected_by_parser():
    with pytest.raises(SystemExit) as excinfo:
        create_parser().parse_args([SETS, QUIZ_LOG, "--types", "AZ"])
    assert excinfo.value.code == 2


def test_parse_question_types():
    assert parse_question_types("q, r,v,q") == ["Q", "R", "V"]


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert APP_VERSION in capsys.readouterr().out


@pytest.mark.parametrize(
    "content, message",
    [
        (None, "Configuration file not found"),
        ("{not json", "Failed to load configuration"),
        ("[1, 2]", "Configuration file must hold a JSON object"),
    ],
)
def test_unusable_config_file_exits_with_error(tmp_path, capsys, content, message):
    config_file = tmp_path / "qperf.json"
    if content is not None:
        config_file.write_text(content)

    assert main([SETS, QUIZ_LOG, "--config", str(config_file)]) == 1
    err = capsys.readouterr().err
    assert f"Error: {message}" in err
