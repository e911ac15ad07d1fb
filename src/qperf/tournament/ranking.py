"""Team standings for a tournament.

Teams are ranked by fewest losses, then most wins, then by their combined
score in rounds played directly against the team they are tied with.
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

from functools import cmp_to_key
from itertools import combinations
from typing import Dict, Iterable, List, Tuple

from qperf.models.round import ConfirmedRound
from qperf.models.standing import TournamentStanding
from qperf.type_hints import MatchupKey
from qperf.utils import setup_logger

logger = setup_logger(__name__)


def matchup_key(team_a: str, team_b: str) -> MatchupKey:
    """Key for an unordered pair of teams: the two names in sorted order."""
    return (team_a, team_b) if team_a <= team_b else (team_b, team_a)


class HeadToHeadLedger:
    """Accumulated scores of every pair of teams that have met.

    Each entry stores two running totals. The first always belongs to the
    team whose name sorts first, so repeated meetings add up in the right
    slot whichever team won each time.
    """

    def __init__(self) -> None:
        self._totals: Dict[MatchupKey, List[int]] = {}

    def __len__(self) -> int:
        return len(self._totals)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        return matchup_key(*pair) in self._totals

    def record(self, team_a: str, team_b: str, score_a: int, score_b: int) -> None:
        """Add one meeting of two teams."""
        key = matchup_key(team_a, team_b)
        totals = self._totals.setdefault(key, [0, 0])
        if key[0] == team_a:
            totals[0] += score_a
            totals[1] += score_b
        else:
            totals[0] += score_b
            totals[1] += score_a

    def scores(self, team_a: str, team_b: str) -> Tuple[int, int]:
        """Head-to-head totals as (team_a's total, team_b's total)."""
        key = matchup_key(team_a, team_b)
        first, second = self._totals.get(key, (0, 0))
        if key[0] == team_a:
            return first, second
        return second, first


class RankingEngine:
    """Computes win/loss records and the final placement of every team.

    This class is responsible for:
    - Summing each team's score over all rounds
    - Counting wins and losses against every other team in each round
    - Keeping the head-to-head ledger
    - Sorting teams and assigning placements
    """

    def __init__(self) -> None:
        self.standings: Dict[str, TournamentStanding] = {}
        self.head_to_head = HeadToHeadLedger()

    def rank(self, rounds: Iterable[ConfirmedRound]) -> List[TournamentStanding]:
        """Rank every team that played in a scored round.

        Args:
            rounds: Scored rounds

        Returns:
            Standings sorted by placement. Teams still tied after the
            head-to-head comparison keep the order in which they first
            appeared.
        """
        rounds = list(rounds)
        logger.debug(f"Beginning to process {len(rounds)} rounds for team standing")
        self.standings = {}
        self.head_to_head = HeadToHeadLedger()

        for confirmed_round in rounds:
            for result in confirmed_round.scored_teams():
                standing = self.standings.setdefault(
                    result.team_name, TournamentStanding(name=result.team_name)
                )
                standing.total_score += result.score

        for confirmed_round in rounds:
            self._record_round(confirmed_round)

        ranking = sorted(self.standings.values(), key=cmp_to_key(self._compare))
        for placement, standing in enumerate(ranking, start=1):
            standing.placement = placement
        return ranking

    def _record_round(self, confirmed_round: ConfirmedRound) -> None:
        scored = [(r.team_name, r.score) for r in confirmed_round.scored_teams()]
        if len(scored) < 2:
            return

        for team, score in scored:
            standing = self.standings[team]
            for _other, other_score in scored:
                if score > other_score:
                    standing.wins += 1
                elif score < other_score:
                    standing.losses += 1

        # A three-team round is three separate meetings.
        for (team_a, score_a), (team_b, score_b) in combinations(scored, 2):
            self.head_to_head.record(team_a, team_b, score_a, score_b)

    def _compare(self, a: TournamentStanding, b: TournamentStanding) -> int:
        if a.losses != b.losses:
            return a.losses - b.losses
        if a.wins != b.wins:
            return b.wins - a.wins
        h2h_a, h2h_b = self.head_to_head.scores(a.name, b.name)
        return h2h_b - h2h_a


def rank_teams(rounds: Iterable[ConfirmedRound]) -> List[TournamentStanding]:
    """Rank teams over all rounds (see ``RankingEngine``)."""
    return RankingEngine().rank(rounds)
