"""Quiz log files.

Quiz logs are header-less CSV files written by the quiz logging tool, one
row per event. This module reads them and normalizes the rows into
``EventRecord`` objects, keeping only whitelisted event codes and,
optionally, a single tournament.
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

import csv
from pathlib import Path
from typing import Iterable, List, Tuple

from qperf.constants import COL_EVENT, COL_TOURNAMENT, MIN_COLUMNS
from qperf.exceptions import MalformedRecordException
from qperf.models.accumulator import Accumulator
from qperf.models.event import EventCode, EventRecord
from qperf.type_hints import Columns
from qperf.utils import setup_logger, strip_quotes

logger = setup_logger(__name__)


def read_quiz_data_file(path: Path, accumulator: Accumulator) -> List[Tuple[int, Columns]]:
    """Read the rows of one quiz log.

    Returns:
        (line number, columns) for every row. A file the csv module cannot
        parse is skipped with a warning and contributes no rows.
    """
    logger.debug(f"Reading quiz data file: {path}")
    try:
        with open(path, newline="", encoding="utf-8", errors="replace") as handle:
            return [
                (line_number, row)
                for line_number, row in enumerate(csv.reader(handle), start=1)
                if row
            ]
    except csv.Error as e:
        accumulator.warn(f"Quiz data contains formatting error in file {path}: {e}")
        return []


def normalize_rows(
    rows: Iterable[Tuple[str, int, Columns]],
    accumulator: Accumulator,
    tournament: str = "",
) -> List[EventRecord]:
    """Turn raw rows into event records.

    Rows whose event code is not whitelisted are dropped silently, as are
    rows from other tournaments when ``tournament`` is set. Rows that are
    too short to carry an event are skipped with a warning.

    Args:
        rows: (source name, line number, columns) for every raw row
        accumulator: Receives warnings
        tournament: Tournament to keep, or empty to keep every row

    Returns:
        Event records in input order
    """
    tournament = strip_quotes(tournament)
    records = []
    row_count = 0

    for source, line_number, columns in rows:
        row_count += 1
        if len(columns) < MIN_COLUMNS:
            accumulator.warn(
                f"Warning: Skipping malformed row {line_number} in {source}: "
                f"expected at least {MIN_COLUMNS} columns, found {len(columns)}"
            )
            continue
        if tournament and strip_quotes(columns[COL_TOURNAMENT]) != tournament:
            continue
        if EventCode.from_token(columns[COL_EVENT]) is None:
            continue
        try:
            records.append(EventRecord.from_columns(columns))
        except MalformedRecordException as e:
            accumulator.warn(
                f"Warning: Skipping malformed row {line_number} in {source}: {e}"
            )

    if not records and row_count > 0:
        accumulator.warn(f"Warning: No records found for tournament {tournament}")

    logger.info(f"Found {len(records)} records")
    return records


def load_records(
    paths: Iterable[Path], accumulator: Accumulator, tournament: str = ""
) -> List[EventRecord]:
    """Read and normalize every quiz log, in the order given."""
    rows = []
    for path in paths:
        rows.extend(
            (str(path), line_number, columns)
            for line_number, columns in read_quiz_data_file(path, accumulator)
        )
    return normalize_rows(rows, accumulator, tournament)
