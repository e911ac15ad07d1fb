"""Exceptions for use in QPerf"""

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


# ========== Base Application Exception ==========


class QPerfException(Exception):
    """Base exception for all QPerf errors.

    All custom exceptions in the application should inherit from this class.
    Anything raised from this hierarchy aborts the whole run.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(QPerfException):
    """Base exception for validation errors."""

    pass


class InvalidQuestionTypeException(ValidationException):
    """Raised when a requested question type letter is not a known type."""

    pass


class InvalidDelimiterException(ValidationException):
    """Raised when the output delimiter is empty."""

    pass


# ========== Input Exceptions ==========


class InputException(QPerfException):
    """Base exception for input file errors."""

    pass


class InvalidInputPathException(InputException):
    """Raised when an input path does not exist or has the wrong extension."""

    pass


class MalformedRecordException(InputException):
    """Raised when a quiz log row cannot be turned into an event record."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(QPerfException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
