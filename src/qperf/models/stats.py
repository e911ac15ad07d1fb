"""Per-quizzer statistic tables."""

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
from typing import Any, Dict, Iterator, List

from qperf.constants import (
    MEMORY_INDEX,
    MEMORY_QUESTION_TYPES,
    NUM_CATEGORIES,
    QUESTION_TYPE_INDICES,
)


def category_index(question_type: str) -> int:
    """Stat-table column for a question type letter.

    Anything that is not one of the eight real question types (the
    unresolved sentinel, stray letters, or the memory letter itself) lands
    in column 0.
    """
    index = QUESTION_TYPE_INDICES.get(question_type, 0)
    return 0 if index == MEMORY_INDEX else index


def _zeros() -> List[int]:
    return [0] * NUM_CATEGORIES


@dataclass
class QuizzerStats:
    """Counters for one quizzer, one entry per category column.

    Attributes
    ----------
    name : str
        Quizzer name.
    team : str
        Team the quizzer was first confirmed on.
    attempts, correct, bonus_attempts, bonus_correct : list of int
        Counters indexed by category column (see ``QUESTION_TYPES``).
    """

    name: str
    team: str = ""
    attempts: List[int] = field(default_factory=_zeros)
    correct: List[int] = field(default_factory=_zeros)
    bonus_attempts: List[int] = field(default_factory=_zeros)
    bonus_correct: List[int] = field(default_factory=_zeros)

    def _bump(self, counter: List[int], question_type: str) -> None:
        counter[category_index(question_type)] += 1
        if question_type in MEMORY_QUESTION_TYPES:
            counter[MEMORY_INDEX] += 1

    def record_answer(self, question_type: str, correct: bool) -> None:
        self._bump(self.attempts, question_type)
        if correct:
            self._bump(self.correct, question_type)

    def record_bonus(self, question_type: str, correct: bool) -> None:
        self._bump(self.bonus_attempts, question_type)
        if correct:
            self._bump(self.bonus_correct, question_type)

    def merge(self, other: "QuizzerStats") -> None:
        """Add another set of counters for the same quizzer into this one."""
        for mine, theirs in (
            (self.attempts, other.attempts),
            (self.correct, other.correct),
            (self.bonus_attempts, other.bonus_attempts),
            (self.bonus_correct, other.bonus_correct),
        ):
            for i, value in enumerate(theirs):
                mine[i] += value

    def row(self, index: int) -> List[int]:
        """The four counters for one category column."""
        return [
            self.attempts[index],
            self.correct[index],
            self.bonus_attempts[index],
            self.bonus_correct[index],
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "team": self.team,
            "attempts": list(self.attempts),
            "correct": list(self.correct),
            "bonus_attempts": list(self.bonus_attempts),
            "bonus_correct": list(self.bonus_correct),
        }


class QuizzerStatTable:
    """Quizzer name -> counters, kept in first-seen order."""

    def __init__(self) -> None:
        self._rows: Dict[str, QuizzerStats] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, name: object) -> bool:
        return name in self._rows

    def __iter__(self) -> Iterator[QuizzerStats]:
        return iter(self._rows.values())

    def __getitem__(self, name: str) -> QuizzerStats:
        return self._rows[name]

    def get_or_create(self, name: str, team: str = "") -> QuizzerStats:
        """Return the row for a quizzer, adding an empty one if needed."""
        stats = self._rows.get(name)
        if stats is None:
            stats = QuizzerStats(name=name, team=team)
            self._rows[name] = stats
        return stats

    def merge(self, other: "QuizzerStatTable") -> None:
        """Fold a partial table (e.g. from a worker) into this one."""
        for stats in other:
            self.get_or_create(stats.name, stats.team).merge(stats)
