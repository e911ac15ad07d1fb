"""Shared helpers for QPerf."""

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

import logging
import sys

ROOT_LOGGER_NAME = "qperf"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger under the package root logger.

    The root ``qperf`` logger gets one stderr handler the first time any
    module asks for a logger; module loggers propagate to it.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        The configured logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package loggers between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def strip_quotes(value: str) -> str:
    """Remove surrounding single or double quotes from a value.

    Quiz logs wrap most values in single quotes, and paths typed on a
    command line often arrive wrapped in quotes too.
    """
    return value.strip().strip("'").strip('"')
