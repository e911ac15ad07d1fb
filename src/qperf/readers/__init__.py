"""Readers for question set documents and quiz logs."""

from qperf.readers.question_sets import build_question_type_map, parse_question_sets
from qperf.readers.quiz_data import load_records, normalize_rows

__all__ = [
    "build_question_type_map",
    "load_records",
    "normalize_rows",
    "parse_question_sets",
]
