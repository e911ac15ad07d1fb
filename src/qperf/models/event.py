"""Quiz log event record."""

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
from enum import Enum
from typing import Optional, Tuple

from qperf.constants import (
    COL_EVENT,
    COL_NAME,
    COL_QUESTION,
    COL_ROOM,
    COL_ROUND,
    COL_SEAT,
    COL_TEAM,
    COL_TOURNAMENT,
    MIN_COLUMNS,
)
from qperf.exceptions import MalformedRecordException
from qperf.type_hints import Columns
from qperf.utils import strip_quotes


class EventCode(Enum):
    """Event codes written by the quiz logging tool."""

    CORRECT_ANSWER = "TC"
    INCORRECT_ANSWER = "TE"
    BONUS_CORRECT = "BC"
    BONUS_INCORRECT = "BE"
    TEAM_NAME = "TN"
    QUIZZER_NAME = "QN"
    ROOM_MARKER = "RM"

    @property
    def is_scoring(self) -> bool:
        """True for the four codes that represent a question being played."""
        return self in SCORING_CODES

    @classmethod
    def from_token(cls, token: str) -> Optional["EventCode"]:
        """Look up a code from a raw column value, or None if not whitelisted."""
        try:
            return cls(strip_quotes(token))
        except ValueError:
            return None


SCORING_CODES = frozenset(
    {
        EventCode.CORRECT_ANSWER,
        EventCode.INCORRECT_ANSWER,
        EventCode.BONUS_CORRECT,
        EventCode.BONUS_INCORRECT,
    }
)


def _parse_int(value: str) -> int:
    try:
        return max(int(strip_quotes(value)), 0)
    except ValueError:
        return 0


@dataclass(frozen=True)
class EventRecord:
    """A single row of the quiz log.

    Attributes
    ----------
    tournament : str
        Tournament identifier.
    room : str
        Room identifier.
    round_id : str
        Round identifier, matching a question set id.
    question_number : int
        1-based question number, 0 when the log has none.
    name : str
        Quizzer name, or team name for ``TEAM_NAME`` events.
    team_number : int
        0-based team slot.
    seat_number : int
        0-based seat within the team.
    code : EventCode
        What happened.
    """

    tournament: str
    room: str
    round_id: str
    question_number: int
    name: str
    team_number: int
    seat_number: int
    code: EventCode

    @property
    def round_key(self) -> Tuple[str, str]:
        """The (room, round) pair that identifies the round this event belongs to."""
        return (self.room, self.round_id)

    @property
    def question_index(self) -> int:
        """0-based question index (-1 when the question number is missing)."""
        return self.question_number - 1

    @classmethod
    def from_columns(cls, columns: Columns) -> "EventRecord":
        """Build a record from the columns of a quiz log row.

        Raises:
            MalformedRecordException: If the row is too short or its event
                code is not one the logging tool writes.
        """
        if len(columns) < MIN_COLUMNS:
            raise MalformedRecordException(
                f"expected at least {MIN_COLUMNS} columns, found {len(columns)}"
            )
        code = EventCode.from_token(columns[COL_EVENT])
        if code is None:
            raise MalformedRecordException(
                f"unknown event code {columns[COL_EVENT]!r}"
            )
        return cls(
            tournament=strip_quotes(columns[COL_TOURNAMENT]),
            room=strip_quotes(columns[COL_ROOM]),
            round_id=strip_quotes(columns[COL_ROUND]),
            question_number=_parse_int(columns[COL_QUESTION]),
            name=strip_quotes(columns[COL_NAME]),
            team_number=_parse_int(columns[COL_TEAM]),
            seat_number=_parse_int(columns[COL_SEAT]),
            code=code,
        )
