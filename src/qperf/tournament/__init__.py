"""Round reconstruction, scoring and ranking for QPerf.

This package turns normalized quiz log events into confirmed rounds,
scores them, and ranks the teams.
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

from qperf.tournament.question_types import QuestionTypeResolver
from qperf.tournament.ranking import HeadToHeadLedger, RankingEngine, rank_teams
from qperf.tournament.round_builder import RoundReconstructor, reconstruct_rounds
from qperf.tournament.scoring import ScoringEngine, score_rounds

__all__ = [
    "HeadToHeadLedger",
    "QuestionTypeResolver",
    "RankingEngine",
    "RoundReconstructor",
    "ScoringEngine",
    "rank_teams",
    "reconstruct_rounds",
    "score_rounds",
]
