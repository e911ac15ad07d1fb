"""Analysis configuration."""

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

from qperf.constants import DEFAULT_DELIMITER, QUESTION_TYPES


@dataclass
class AnalysisConfig:
    """Settings for one analysis run.

    Attributes
    ----------
    question_types : list of str
        Question type letters to include in the quizzer table.
    delimiter : str
        Column delimiter for the text report.
    tournament : str
        Only read log rows for this tournament. Empty reads every row.
    display_rounds : bool
        Include the per-round score breakdown in the report.
    verbose : bool
        Log per-event scoring traces at DEBUG level.
    workers : int
        Processes used to score rounds. 1 scores in-process.
    """

    question_types: List[str] = field(default_factory=lambda: list(QUESTION_TYPES))
    delimiter: str = DEFAULT_DELIMITER
    tournament: str = ""
    display_rounds: bool = False
    verbose: bool = False
    workers: int = 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "question_types": self.question_types,
            "delimiter": self.delimiter,
            "tournament": self.tournament,
            "display_rounds": self.display_rounds,
            "verbose": self.verbose,
            "workers": self.workers,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            question_types=list(data.get("question_types", QUESTION_TYPES)),
            delimiter=data.get("delimiter", DEFAULT_DELIMITER),
            tournament=data.get("tournament", ""),
            display_rounds=data.get("display_rounds", False),
            verbose=data.get("verbose", False),
            workers=data.get("workers", 1),
        )
