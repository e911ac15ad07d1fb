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

# --- File types ---
QUESTION_SET_EXTENSION = ".rtf"
QUIZ_DATA_EXTENSION = ".csv"
QUESTION_SET_FILTER = "Question Sets (*.rtf);;All Files (*)"
QUIZ_DATA_FILTER = "Quiz Logs (*.csv);;All Files (*)"
OUTPUT_FILTER = "CSV Files (*.csv);;Text Files (*.txt);;All Files (*)"

# Question type letters, in stat-table column order.
# 'M' is the synthetic memory aggregate (Q + R + V), always the last column.
QUESTION_TYPES = ["A", "G", "I", "Q", "R", "S", "X", "V", "M"]
QUESTION_TYPE_INDICES = {letter: i for i, letter in enumerate(QUESTION_TYPES)}
MEMORY_TYPE = "M"
MEMORY_INDEX = QUESTION_TYPE_INDICES[MEMORY_TYPE]
MEMORY_QUESTION_TYPES = frozenset({"Q", "R", "V"})
NUM_CATEGORIES = len(QUESTION_TYPES)

# Category used when a question set exists but has no letter for the question
DEFAULT_QUESTION_TYPE = "G"
# Category used when the round has no question set at all (stat index 0)
UNRESOLVED_QUESTION_TYPE = "/"

QUESTION_TYPE_NAMES = {
    "A": "According To",
    "G": "General",
    "I": "Introductory",
    "Q": "Quote",
    "R": "Reference",
    "S": "Situation",
    "X": "Context",
    "V": "Verse",
    "M": "Memory (Q+R+V)",
}

# --- Quiz log layout (0-based column positions) ---
COL_TOURNAMENT = 1
COL_ROOM = 3
COL_ROUND = 4
COL_QUESTION = 5
COL_NAME = 7
COL_TEAM = 8
COL_SEAT = 9
COL_EVENT = 10
MIN_COLUMNS = COL_EVENT + 1

# --- Team scoring ---
CORRECT_POINTS = 20
BONUS_POINTS = 10
QUIZ_OUT_BONUS = 10
THIRD_QUIZZER_BONUS = 10
ERROR_DEDUCTION = 10

QUIZ_OUT_CORRECT = 4
THIRD_QUIZZER_COUNT = 3
ERROR_OUT_INCORRECT = 3
# Every incorrect answer on or after this (1-based) question is penalised
LATE_ERROR_QUESTION = 16

# --- Output ---
DEFAULT_DELIMITER = ","
RANKING_EXPLANATION = (
    "Teams are ranked first by number of losses, then by number of wins, "
    "then by head-to-head record."
)
