"""Delimited text reports for quizzer statistics and team standings."""

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

from typing import Iterable, List

from qperf.constants import (
    DEFAULT_DELIMITER,
    QUESTION_TYPE_INDICES,
    QUESTION_TYPES,
    RANKING_EXPLANATION,
)
from qperf.models.round import ConfirmedRound
from qperf.models.standing import TournamentStanding
from qperf.models.stats import QuizzerStatTable

COUNTER_LABELS = ("Attempted", "Correct", "Bonuses Attempted", "Bonuses Correct")


def build_individual_results(
    stats: QuizzerStatTable,
    question_types: Iterable[str] = QUESTION_TYPES,
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Quizzer table: name, team, then four counters per selected type.

    Types are listed alphabetically. Every cell, including the last one of
    a row, is followed by the delimiter.
    """
    selected = sorted(set(question_types))
    lines = []

    header = ["Quizzer", "Team"]
    for letter in selected:
        header.extend(f"{letter} {label}" for label in COUNTER_LABELS)
    lines.append("".join(f"{cell}{delimiter}" for cell in header))

    for quizzer in stats:
        cells: List[object] = [quizzer.name, quizzer.team]
        for letter in selected:
            cells.extend(quizzer.row(QUESTION_TYPE_INDICES[letter]))
        lines.append("".join(f"{cell}{delimiter}" for cell in cells))

    return "\n".join(lines) + "\n"


def build_round_results(
    rounds: Iterable[ConfirmedRound], delimiter: str = DEFAULT_DELIMITER
) -> str:
    """Per-round breakdown of team scores."""
    text = "Individual Round Results\n\n"
    for confirmed_round in rounds:
        text += (
            f"Room: {confirmed_round.room}{delimiter} "
            f"Round: {confirmed_round.round_id}\n"
        )
        for result in confirmed_round.results:
            text += f"{result.team_name}{delimiter} {result.score}\n"
        text += "\n"
    return text + "\n"


def build_standings(
    standings: Iterable[TournamentStanding], delimiter: str = DEFAULT_DELIMITER
) -> str:
    """Team standings table with a short explanation of the ranking."""
    text = "Team Results\n\n"
    text += f"{RANKING_EXPLANATION}\n\n"
    text += delimiter.join(["Name", "Placement", "Wins", "Losses", "Total Score"])
    text += "\n"
    for standing in standings:
        text += delimiter.join(
            str(value)
            for value in (
                standing.name,
                standing.placement,
                standing.wins,
                standing.losses,
                standing.total_score,
            )
        )
        text += "\n"
    return text


def build_report(result) -> str:
    """Full text report for an ``AnalysisResult``."""
    config = result.config
    report = build_individual_results(
        result.stats, config.question_types, config.delimiter
    )
    team_block = ""
    if config.display_rounds:
        team_block += build_round_results(result.rounds, config.delimiter)
    team_block += build_standings(result.standings, config.delimiter)
    return f"{report}\n{team_block}"
