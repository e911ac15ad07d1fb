"""Question set documents.

Question sets are RTF documents holding one or more sets, each introduced
by a ``SET #<id>`` marker. Question lines are separated by ``\\tab``
control words, and the category letter of each question sits just before
the end of every other segment.
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

import re
from pathlib import Path
from typing import Dict, Iterable, List

from qperf.models.accumulator import Accumulator
from qperf.type_hints import QuestionTypeMap
from qperf.utils import setup_logger

logger = setup_logger(__name__)

SET_MARKER = re.compile(r"SET #([A-Za-z0-9]+)")
SEGMENT_SEPARATOR = "\\tab"

MALFORMED_SET_WARNING = (
    "Warning: Question set file may be incorrectly formatted. "
    "Please use only the original RTF files!"
)


def parse_question_sets(content: str, accumulator: Accumulator) -> QuestionTypeMap:
    """Extract category letters per set from one question set document.

    Args:
        content: Document text
        accumulator: Receives a warning if a set has an empty id

    Returns:
        Set id -> category letters in question order
    """
    question_types_by_set: Dict[str, List[str]] = {}
    set_id = ""
    question_types: List[str] = []

    for i, segment in enumerate(content.split(SEGMENT_SEPARATOR)):
        # Markers are checked on every segment; formatting is not reliable.
        match = SET_MARKER.search(segment)
        if match:
            if question_types:
                question_types_by_set[set_id] = question_types
            set_id = match.group(1)
            question_types = []

        if i % 2 == 0 and len(segment) > 1:
            question_types.append(segment[-2])

    question_types_by_set[set_id] = question_types

    if "" in question_types_by_set:
        accumulator.warn(MALFORMED_SET_WARNING)

    return question_types_by_set


def read_question_set_file(path: Path, accumulator: Accumulator) -> QuestionTypeMap:
    logger.debug(f"Reading question set file: {path}")
    content = Path(path).read_text(encoding="utf-8", errors="replace")
    return parse_question_sets(content, accumulator)


def build_question_type_map(
    paths: Iterable[Path], accumulator: Accumulator
) -> QuestionTypeMap:
    """Read every question set file into one map.

    When two files define the same set, the first one read wins.
    """
    question_types_by_set: QuestionTypeMap = {}
    for path in paths:
        for set_id, question_types in read_question_set_file(path, accumulator).items():
            if set_id in question_types_by_set:
                accumulator.warn(
                    f"Warning: Duplicate question set number: {set_id}, "
                    "using only the first."
                )
                continue
            question_types_by_set[set_id] = question_types

    logger.debug(f"Question types by set: {question_types_by_set}")
    return question_types_by_set
