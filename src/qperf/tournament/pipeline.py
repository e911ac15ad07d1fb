"""End-to-end analysis of a tournament.

Question sets and quiz logs go in; quizzer statistics, scored rounds and
team standings come out, together with every warning raised on the way.
"""

# QPerf
# Copyright (C) 2025  QPerf developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from qperf.constants import QUESTION_SET_EXTENSION, QUIZ_DATA_EXTENSION
from qperf.exceptions import InvalidConfigurationException
from qperf.models.accumulator import Accumulator
from qperf.models.config import AnalysisConfig
from qperf.models.event import EventRecord
from qperf.models.round import ConfirmedRound
from qperf.models.standing import TournamentStanding
from qperf.models.stats import QuizzerStatTable
from qperf.readers.question_sets import build_question_type_map
from qperf.readers.quiz_data import load_records
from qperf.tournament.question_types import QuestionTypeResolver
from qperf.tournament.ranking import RankingEngine
from qperf.tournament.round_builder import RoundReconstructor
from qperf.tournament.scoring import score_rounds, warn_missing_question_sets
from qperf.type_hints import QuestionTypeMap
from qperf.utils import set_verbose, setup_logger
from qperf.utils.validation import (
    validate_delimiter_strict,
    validate_paths_strict,
    validate_question_types_strict,
)

logger = setup_logger(__name__)

PathArgument = Union[str, Path, Sequence[Union[str, Path]]]


@dataclass
class AnalysisResult:
    """Everything one analysis run produced.

    Attributes
    ----------
    config : AnalysisConfig
        The validated configuration used for the run.
    stats : QuizzerStatTable
        Per-quizzer counters.
    rounds : list of ConfirmedRound
        Scored rounds in confirmation order.
    standings : list of TournamentStanding
        Teams in placement order.
    warnings : list of str
        Soft problems found during the run, in order.
    confirmed_teams : list of str
        Every team seen in a confirmed round.
    """

    config: AnalysisConfig
    stats: QuizzerStatTable
    rounds: List[ConfirmedRound] = field(default_factory=list)
    standings: List[TournamentStanding] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    confirmed_teams: List[str] = field(default_factory=list)


def validate_config(config: AnalysisConfig) -> AnalysisConfig:
    """Return a cleaned copy of ``config``.

    Raises:
        InvalidQuestionTypeException: On an unknown question type letter
        InvalidDelimiterException: On an empty delimiter
        InvalidConfigurationException: On a worker count below 1
    """
    if config.workers < 1:
        raise InvalidConfigurationException(
            f"Worker count must be at least 1, got {config.workers}"
        )
    return AnalysisConfig(
        question_types=validate_question_types_strict(config.question_types),
        delimiter=validate_delimiter_strict(config.delimiter),
        tournament=config.tournament,
        display_rounds=config.display_rounds,
        verbose=config.verbose,
        workers=config.workers,
    )


def analyze_records(
    records: Iterable[EventRecord],
    question_types: QuestionTypeMap,
    config: Optional[AnalysisConfig] = None,
    accumulator: Optional[Accumulator] = None,
) -> AnalysisResult:
    """Run reconstruction, scoring and ranking on records already in memory.

    Args:
        records: Normalized event records in log order
        question_types: Set id -> category letters
        config: Run settings, defaults if omitted
        accumulator: Accumulator to continue from (e.g. holding reader warnings)

    Returns:
        The analysis result
    """
    config = validate_config(config or AnalysisConfig())
    accumulator = accumulator if accumulator is not None else Accumulator()
    resolver = QuestionTypeResolver(question_types)

    rounds = RoundReconstructor(accumulator).reconstruct(records)
    accumulator.seed_stats()

    logger.info(f"Scoring {len(rounds)} confirmed rounds")
    scored = score_rounds(rounds.values(), resolver, accumulator, config.workers)
    warn_missing_question_sets(accumulator, resolver)

    standings = RankingEngine().rank(scored)

    return AnalysisResult(
        config=config,
        stats=accumulator.stats,
        rounds=scored,
        standings=standings,
        warnings=accumulator.warnings,
        confirmed_teams=accumulator.confirmed_teams,
    )


def analyze(
    question_set_paths: PathArgument,
    quiz_data_paths: PathArgument,
    config: Optional[AnalysisConfig] = None,
) -> AnalysisResult:
    """Analyze a tournament from its question set and quiz log files.

    Args:
        question_set_paths: One or more ``.rtf`` question set documents
        quiz_data_paths: One or more ``.csv`` quiz logs
        config: Run settings, defaults if omitted

    Returns:
        The analysis result

    Raises:
        QPerfException: On invalid configuration or unusable paths
    """
    config = validate_config(config or AnalysisConfig())
    set_verbose(config.verbose)

    set_paths = validate_paths_strict(
        question_set_paths, QUESTION_SET_EXTENSION, "question sets"
    )
    data_paths = validate_paths_strict(quiz_data_paths, QUIZ_DATA_EXTENSION, "quiz data")
    logger.debug(f"Question set paths: {set_paths}")
    logger.debug(f"Quiz data paths: {data_paths}")
    logger.debug(f"Requested question types: {config.question_types}")

    accumulator = Accumulator()
    question_types = build_question_type_map(set_paths, accumulator)
    records = load_records(data_paths, accumulator, config.tournament)

    return analyze_records(records, question_types, config, accumulator)
