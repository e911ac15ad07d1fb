"""Input validation for QPerf.

Validators return a ``ValidationResult``; the ``*_strict`` variants raise
the matching exception instead, for callers that want a fatal error.
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

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from qperf.constants import QUESTION_TYPES
from qperf.exceptions import (
    InvalidDelimiterException,
    InvalidInputPathException,
    InvalidQuestionTypeException,
)
from qperf.utils import strip_quotes


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value=None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Question Type Validation ==========


def validate_question_types(types: Union[str, Iterable[str]]) -> ValidationResult:
    """Validate a question type filter.

    Accepts either a string of letters (``"AGQ"``) or an iterable of single
    letters. Letters are upper-cased; commas and whitespace are ignored.

    Args:
        types: Requested question types

    Returns:
        ValidationResult whose sanitized value is the list of letters

    Example:
        >>> validate_question_types("a,g").sanitized_value
        ['A', 'G']
    """
    letters: List[str] = []
    for item in types:
        for char in str(item):
            if char in ", \t":
                continue
            letter = char.upper()
            if letter not in QUESTION_TYPES:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Invalid question type '{char}'.",
                )
            if letter not in letters:
                letters.append(letter)
    return ValidationResult(is_valid=True, sanitized_value=letters)


def validate_question_types_strict(types: Union[str, Iterable[str]]) -> List[str]:
    """Validate a question type filter and raise if invalid.

    Raises:
        InvalidQuestionTypeException: If any letter is not a question type
    """
    result = validate_question_types(types)
    if not result.is_valid:
        raise InvalidQuestionTypeException(result.error_message)
    return result.sanitized_value


# ========== Delimiter Validation ==========


def validate_delimiter(delimiter: Optional[str]) -> ValidationResult:
    """Validate the report delimiter. ``\\t`` is accepted as a tab."""
    if not delimiter:
        return ValidationResult(
            is_valid=False, error_message="Delimiter must not be empty"
        )
    if delimiter == "\\t":
        delimiter = "\t"
    return ValidationResult(is_valid=True, sanitized_value=delimiter)


def validate_delimiter_strict(delimiter: Optional[str]) -> str:
    result = validate_delimiter(delimiter)
    if not result.is_valid:
        raise InvalidDelimiterException(result.error_message)
    return result.sanitized_value


# ========== Path Validation ==========


def split_path_list(paths: Union[str, Path, Sequence[Union[str, Path]]]) -> List[str]:
    """Flatten path arguments into a list of path strings.

    A single argument may hold several comma-separated paths and may be
    wrapped in quotes, as happens when paths are pasted into a shell.
    """
    if isinstance(paths, (str, Path)):
        paths = [paths]
    result = []
    for item in paths:
        for part in strip_quotes(str(item)).split(","):
            part = strip_quotes(part)
            if part:
                result.append(part)
    return result


def validate_paths(
    paths: Union[str, Path, Sequence[Union[str, Path]]],
    extension: str,
    description: str,
) -> ValidationResult:
    """Check every path exists and carries the expected extension.

    Args:
        paths: One or more paths (see ``split_path_list``)
        extension: Required suffix, e.g. ``".csv"``
        description: What the files are, for error messages

    Returns:
        ValidationResult whose sanitized value is a list of ``Path``
    """
    path_strings = split_path_list(paths)
    if not path_strings:
        return ValidationResult(
            is_valid=False, error_message=f"No {description} paths were given"
        )

    validated = []
    for path_string in path_strings:
        path = Path(path_string)
        if not path.exists():
            return ValidationResult(
                is_valid=False,
                error_message=f"The path to the {description} does not exist: {path}",
            )
        if path.suffix.lower() != extension:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"The path to the {description} is not a "
                    f"{extension.lstrip('.').upper()} file: {path}"
                ),
            )
        validated.append(path)
    return ValidationResult(is_valid=True, sanitized_value=validated)


def validate_paths_strict(
    paths: Union[str, Path, Sequence[Union[str, Path]]],
    extension: str,
    description: str,
) -> List[Path]:
    """Validate paths and raise if any is unusable.

    Raises:
        InvalidInputPathException: If a path is missing or has the wrong extension
    """
    result = validate_paths(paths, extension, description)
    if not result.is_valid:
        raise InvalidInputPathException(result.error_message)
    return result.sanitized_value
