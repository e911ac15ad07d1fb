"""Command-line interface for QPerf."""

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

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from qperf import APP_NAME, APP_VERSION
from qperf.constants import DEFAULT_DELIMITER, QUESTION_TYPES
from qperf.exceptions import InvalidConfigurationException, QPerfException
from qperf.models.config import AnalysisConfig
from qperf.reporting import build_report
from qperf.tournament.pipeline import analyze
from qperf.utils import set_verbose, setup_logger
from qperf.utils.validation import validate_question_types

logger = setup_logger(__name__)


def parse_question_types(value: str) -> List[str]:
    """Parse a question type filter such as ``"AGQ"`` or ``"a,g,q"``.

    Raises:
        argparse.ArgumentTypeError: If a letter is not a question type
    """
    result = validate_question_types(value)
    if not result:
        raise argparse.ArgumentTypeError(
            f"{result.error_message} Choose from {''.join(QUESTION_TYPES)}"
        )
    return result.sanitized_value


def load_configuration(config_file: Optional[str]) -> Dict[str, Any]:
    """Read analysis settings from a JSON file.

    Returns:
        The settings object, or an empty dict when no file was given

    Raises:
        InvalidConfigurationException: If the file is missing, unreadable,
            not JSON, or not a JSON object
    """
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        raise InvalidConfigurationException(
            f"Configuration file not found: {config_file}"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise InvalidConfigurationException(
            f"Failed to load configuration from {config_file}: {e}"
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigurationException(
            f"Configuration file must hold a JSON object: {config_file}"
        )
    logger.info("Loaded configuration from: %s", config_file)
    return config


def build_config(args: argparse.Namespace) -> AnalysisConfig:
    """Combine a configuration file (if any) with command-line options.

    Options given on the command line win over the file.
    """
    config = AnalysisConfig.from_dict(load_configuration(args.config))
    if args.types is not None:
        config.question_types = args.types
    if args.delimiter is not None:
        config.delimiter = args.delimiter
    if args.tournament is not None:
        config.tournament = args.tournament
    if args.display_rounds:
        config.display_rounds = True
    if args.verbose:
        config.verbose = True
    if args.workers is not None:
        config.workers = args.workers
    return config


def run(args: argparse.Namespace) -> int:
    """Run an analysis and write the report.

    Returns:
        Exit code
    """
    config = build_config(args)
    result = analyze(args.question_sets, args.quiz_data, config)

    for warning in result.warnings:
        print(warning, file=sys.stderr)

    report = build_report(result)
    if args.output:
        Path(args.output).write_text(report, encoding="utf-8")
        logger.info("Report written to: %s", args.output)
    else:
        sys.stdout.write(report)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="qperf",
        description="Quizzer statistics and team standings from quiz logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All question types, comma separated
  qperf sets.rtf quiz_log.csv

  # Several files, only memory questions, tab separated
  qperf sets1.rtf,sets2.rtf day1.csv,day2.csv --types QRVM --delimiter '\\t'

  # One tournament, with the score of every round, to a file
  qperf sets.rtf quiz_log.csv --tournament Spring -r -o results.csv
        """,
    )

    parser.add_argument(
        "question_sets",
        help="Question set RTF file(s), comma separated",
    )
    parser.add_argument(
        "quiz_data",
        help="Quiz log CSV file(s), comma separated",
    )

    parser.add_argument(
        "-t",
        "--types",
        type=parse_question_types,
        help=f"Question types to report (default: {''.join(QUESTION_TYPES)})",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        help=f"Output column delimiter (default: '{DEFAULT_DELIMITER}')",
    )
    parser.add_argument(
        "--tournament",
        help="Only use quiz log rows from this tournament",
    )
    parser.add_argument(
        "-r",
        "--display-rounds",
        action="store_true",
        help="Include the team scores of every round",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        help="Processes used to score rounds (default: 1)",
    )
    parser.add_argument("-o", "--output", help="Write the report to this file")
    parser.add_argument("--config", help="Load configuration from JSON file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_verbose(True)

    try:
        return run(args)
    except QPerfException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
