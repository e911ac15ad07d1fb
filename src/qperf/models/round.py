"""Data models for quiz rounds and their rosters."""

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
from typing import Any, Dict, List

from qperf.models.event import EventRecord


def round_key(room: str, round_id: str) -> str:
    """Composite registry key for a round, e.g. ``Room3Round12``."""
    return f"Room{room}Round{round_id}"


@dataclass
class TeamSlot:
    """One team position in a round roster.

    Attributes
    ----------
    name : str
        Team name, empty until a team name event fills the slot.
    quizzers : list of str
        Quizzer names indexed by seat number; empty strings are unfilled seats.
    """

    name: str = ""
    quizzers: List[str] = field(default_factory=list)

    def seat(self, seat_number: int, quizzer: str) -> None:
        """Place a quizzer in a seat, growing the seat list as needed."""
        while len(self.quizzers) <= seat_number:
            self.quizzers.append("")
        self.quizzers[seat_number] = quizzer

    def pruned(self) -> "TeamSlot":
        """Copy of this slot without unfilled seats."""
        return TeamSlot(name=self.name, quizzers=[q for q in self.quizzers if q])


@dataclass
class Roster:
    """Growable list of team slots for the round being read."""

    slots: List[TeamSlot] = field(default_factory=list)

    def grow_to(self, team_number: int) -> TeamSlot:
        """Ensure a slot exists at ``team_number`` and return it."""
        while len(self.slots) <= team_number:
            self.slots.append(TeamSlot())
        return self.slots[team_number]

    def declare_team(self, team_number: int, name: str) -> None:
        """Name a slot, replacing whatever the slot held before."""
        self.grow_to(team_number)
        self.slots[team_number] = TeamSlot(name=name)

    def declare_quizzer(self, team_number: int, seat_number: int, name: str) -> None:
        self.grow_to(team_number).seat(seat_number, name)

    def pruned(self) -> List[TeamSlot]:
        """Slots with a team name, each without unfilled seats."""
        return [slot.pruned() for slot in self.slots if slot.name]

    def clear(self) -> None:
        self.slots.clear()


@dataclass(frozen=True)
class TeamRoundResult:
    """Final score of one team in one round."""

    round_key: str
    team_name: str
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "round_key": self.round_key,
            "team_name": self.team_name,
            "score": self.score,
        }


@dataclass
class ConfirmedRound:
    """A round that saw at least one scored question.

    Attributes
    ----------
    room : str
        Room identifier.
    round_id : str
        Round identifier (question set id).
    teams : list of TeamSlot
        Named team slots with their seated quizzers, in slot order.
    events : list of EventRecord
        Scoring events of the round, in log order.
    results : list of TeamRoundResult
        Final team scores. Empty until the round has been scored.
    """

    room: str
    round_id: str
    teams: List[TeamSlot] = field(default_factory=list)
    events: List[EventRecord] = field(default_factory=list)
    results: List[TeamRoundResult] = field(default_factory=list)

    @property
    def key(self) -> str:
        return round_key(self.room, self.round_id)

    @property
    def team_names(self) -> List[str]:
        return [team.name for team in self.teams]

    @property
    def is_scored(self) -> bool:
        return bool(self.results)

    def scored_teams(self) -> List[TeamRoundResult]:
        """Results for teams with a non-empty name."""
        return [result for result in self.results if result.team_name]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the round summary (events are not included)."""
        return {
            "room": self.room,
            "round_id": self.round_id,
            "teams": [
                {"name": team.name, "quizzers": list(team.quizzers)}
                for team in self.teams
            ],
            "results": [r.to_dict() for r in self.results],
        }
