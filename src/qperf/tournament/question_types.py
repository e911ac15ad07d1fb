"""Question type lookup for scored events."""

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

from typing import List, Optional

from qperf.constants import DEFAULT_QUESTION_TYPE, UNRESOLVED_QUESTION_TYPE
from qperf.type_hints import QuestionTypeMap


class QuestionTypeResolver:
    """Maps (round id, question index) to a question type letter."""

    def __init__(self, question_types: Optional[QuestionTypeMap] = None):
        self.question_types: QuestionTypeMap = dict(question_types or {})

    def has_round(self, round_id: str) -> bool:
        return round_id in self.question_types

    def known_rounds(self) -> List[str]:
        return sorted(self.question_types)

    def resolve(self, round_id: str, question_index: int) -> str:
        """Category letter for a question.

        The last letter collected from a set comes from the document tail,
        so only indices below ``len - 1`` are looked up; any other index
        falls back to the default type.

        Args:
            round_id: Round (question set) id
            question_index: 0-based question index

        Returns:
            The letter, ``DEFAULT_QUESTION_TYPE`` when the index is out of
            range, or ``UNRESOLVED_QUESTION_TYPE`` when the round has no set
        """
        letters = self.question_types.get(round_id)
        if letters is None:
            return UNRESOLVED_QUESTION_TYPE
        if 0 <= question_index and question_index + 1 < len(letters):
            return letters[question_index]
        return DEFAULT_QUESTION_TYPE
