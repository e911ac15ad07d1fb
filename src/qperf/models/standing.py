"""Tournament standing for a single team."""

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

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TournamentStanding:
    """Win/loss record and placement for one team.

    Attributes
    ----------
    name : str
        Team name.
    placement : int
        1-based final position, 0 until the teams have been sorted.
    wins : int
        Teams outscored, summed over every round played.
    losses : int
        Teams that outscored this one, summed over every round played.
    total_score : int
        Sum of the team's round scores.
    """

    name: str
    placement: int = 0
    wins: int = 0
    losses: int = 0
    total_score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "placement": self.placement,
            "wins": self.wins,
            "losses": self.losses,
            "total_score": self.total_score,
        }
