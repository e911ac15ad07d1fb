import pytest

from qperf.exceptions import InvalidQuestionTypeException, QPerfException
from qperf.models.config import AnalysisConfig
from qperf.models.stats import category_index
from qperf.utils.validation import (
    split_path_list,
    validate_delimiter,
    validate_paths,
    validate_question_types,
    validate_question_types_strict,
)


def test_question_types_are_normalized():
    result = validate_question_types("a g,Q q")
    assert result
    assert result.sanitized_value == ["A", "G", "Q"]
    assert validate_question_types(["x", "M"]).sanitized_value == ["X", "M"]


def test_invalid_question_type():
    result = validate_question_types("AB")
    assert not result
    assert result.error_message == "Invalid question type 'B'."
    with pytest.raises(InvalidQuestionTypeException):
        validate_question_types_strict("AB")


def test_exceptions_share_a_base():
    with pytest.raises(QPerfException):
        validate_question_types_strict("?")


def test_delimiter():
    assert validate_delimiter("\\t").sanitized_value == "\t"
    assert validate_delimiter(";").sanitized_value == ";"
    assert not validate_delimiter("")
    assert not validate_delimiter(None)


def test_split_path_list():
    assert split_path_list("'a.csv, b.csv'") == ["a.csv", "b.csv"]
    assert split_path_list(["a.rtf", '"b.rtf"', ""]) == ["a.rtf", "b.rtf"]


def test_validate_paths(tmp_path):
    log = tmp_path / "log.CSV"
    log.write_text("")

    assert validate_paths(str(log), ".csv", "quiz data").sanitized_value == [log]
    assert not validate_paths("", ".csv", "quiz data")
    result = validate_paths(str(tmp_path / "nope.csv"), ".csv", "quiz data")
    assert result.error_message.startswith("The path to the quiz data does not exist")


def test_category_index():
    assert category_index("A") == 0
    assert category_index("V") == 7
    assert category_index("M") == 0
    assert category_index("/") == 0
    assert category_index("Z") == 0


def test_config_round_trip():
    config = AnalysisConfig(question_types=["A"], delimiter=";", workers=3)
    assert AnalysisConfig.from_dict(config.to_dict()) == config
    assert AnalysisConfig.from_dict({}) == AnalysisConfig()
