"""Run-wide accumulator passed through the analysis stages."""

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
from typing import List

from qperf.models.round import TeamSlot
from qperf.models.stats import QuizzerStatTable
from qperf.type_hints import QuizzerTeam
from qperf.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Accumulator:
    """Mutable state shared by the stages of one run.

    Each stage receives the accumulator explicitly and mutates it. Scoring
    workers get a fresh ``partial()`` and the caller merges it back.

    Attributes
    ----------
    warnings : list of str
        Soft problems, in the order they were found.
    stats : QuizzerStatTable
        Per-quizzer counters.
    missing_question_sets : list of str
        Round ids that were scored without a question set, each listed once.
    confirmed_teams : list of str
        Every team name seen in a confirmed round (diagnostic only).
    confirmed_quizzers : list of (str, str)
        (quizzer, team) for the first team each quizzer was confirmed on.
    """

    warnings: List[str] = field(default_factory=list)
    stats: QuizzerStatTable = field(default_factory=QuizzerStatTable)
    missing_question_sets: List[str] = field(default_factory=list)
    confirmed_teams: List[str] = field(default_factory=list)
    confirmed_quizzers: List[QuizzerTeam] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def note_missing_question_set(self, round_id: str) -> None:
        if round_id not in self.missing_question_sets:
            self.missing_question_sets.append(round_id)

    def register_teams(self, teams: List[TeamSlot]) -> None:
        """Record the teams and quizzers of a confirmed round."""
        known_quizzers = {quizzer for quizzer, _ in self.confirmed_quizzers}
        for team in teams:
            if team.name not in self.confirmed_teams:
                self.confirmed_teams.append(team.name)
            for quizzer in team.quizzers:
                if quizzer and quizzer not in known_quizzers:
                    self.confirmed_quizzers.append((quizzer, team.name))
                    known_quizzers.add(quizzer)

    def seed_stats(self) -> None:
        """Give every confirmed quizzer a stat row, in confirmation order."""
        for quizzer, team in self.confirmed_quizzers:
            self.stats.get_or_create(quizzer, team)

    def partial(self) -> "Accumulator":
        """Empty accumulator for work that is merged back later."""
        return Accumulator()

    def merge(self, other: "Accumulator") -> None:
        """Fold a partial accumulator into this one.

        Warnings are appended as-is; they were already logged when raised.
        """
        self.warnings.extend(other.warnings)
        self.stats.merge(other.stats)
        for round_id in other.missing_question_sets:
            self.note_missing_question_set(round_id)
