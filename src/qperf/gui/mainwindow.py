"""Main GUI window for QPerf."""

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
from pathlib import Path
from typing import Dict, List, Optional

from PyQt6 import QtWidgets
from PyQt6.QtCore import QFileInfo

from qperf import APP_NAME, APP_VERSION
from qperf.constants import (
    DEFAULT_DELIMITER,
    OUTPUT_FILTER,
    QUESTION_SET_FILTER,
    QUESTION_TYPE_NAMES,
    QUESTION_TYPES,
    QUIZ_DATA_FILTER,
)
from qperf.exceptions import QPerfException
from qperf.models.config import AnalysisConfig
from qperf.reporting import build_report
from qperf.tournament.pipeline import AnalysisResult, analyze
from qperf.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class QPerfMainWindow(QtWidgets.QMainWindow):
    """Pick input files and options, run an analysis, save the report."""

    def __init__(self) -> None:
        super().__init__()
        self.question_set_files: List[str] = []
        self.quiz_data_files: List[str] = []
        self.result: Optional[AnalysisResult] = None
        self.report: str = ""
        self.type_checkboxes: Dict[str, QtWidgets.QCheckBox] = {}

        self._setup_ui()
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 1000, 800)
        self.central_widget = QtWidgets.QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QtWidgets.QVBoxLayout(self.central_widget)
        self._setup_inputs_panel()
        self._setup_options_panel()
        self._setup_actions()
        self._setup_output_panel()
        self.statusBar().showMessage("Ready - Select question sets and quiz logs.")
        logging.info(f"{APP_NAME} v{APP_VERSION} started.")

    def _setup_inputs_panel(self):
        inputs_group = QtWidgets.QGroupBox("Input Files")
        inputs_layout = QtWidgets.QGridLayout(inputs_group)

        self.btn_question_sets = QtWidgets.QPushButton("Select Question Sets...")
        self.btn_question_sets.clicked.connect(self.select_question_sets)
        self.lbl_question_sets = QtWidgets.QLabel("Selected: None")
        inputs_layout.addWidget(self.btn_question_sets, 0, 0)
        inputs_layout.addWidget(self.lbl_question_sets, 0, 1)

        self.btn_quiz_data = QtWidgets.QPushButton("Select Quiz Logs...")
        self.btn_quiz_data.clicked.connect(self.select_quiz_data)
        self.lbl_quiz_data = QtWidgets.QLabel("Selected: None")
        inputs_layout.addWidget(self.btn_quiz_data, 1, 0)
        inputs_layout.addWidget(self.lbl_quiz_data, 1, 1)
        inputs_layout.setColumnStretch(1, 1)

        self.main_layout.addWidget(inputs_group)

    def _setup_options_panel(self):
        options_group = QtWidgets.QGroupBox("Options")
        options_layout = QtWidgets.QVBoxLayout(options_group)

        types_layout = QtWidgets.QHBoxLayout()
        types_layout.addWidget(QtWidgets.QLabel("Question types:"))
        for letter in QUESTION_TYPES:
            checkbox = QtWidgets.QCheckBox(letter)
            checkbox.setChecked(True)
            checkbox.setToolTip(QUESTION_TYPE_NAMES[letter])
            self.type_checkboxes[letter] = checkbox
            types_layout.addWidget(checkbox)
        types_layout.addStretch()
        options_layout.addLayout(types_layout)

        form_layout = QtWidgets.QFormLayout()
        self.edit_delimiter = QtWidgets.QLineEdit(DEFAULT_DELIMITER)
        self.edit_delimiter.setMaximumWidth(60)
        form_layout.addRow("Delimiter:", self.edit_delimiter)
        self.edit_tournament = QtWidgets.QLineEdit()
        self.edit_tournament.setPlaceholderText("All tournaments")
        form_layout.addRow("Tournament:", self.edit_tournament)
        options_layout.addLayout(form_layout)

        self.chk_display_rounds = QtWidgets.QCheckBox("Show the score of every round")
        options_layout.addWidget(self.chk_display_rounds)
        self.chk_verbose = QtWidgets.QCheckBox("Verbose logging")
        options_layout.addWidget(self.chk_verbose)

        self.main_layout.addWidget(options_group)

    def _setup_actions(self):
        button_layout = QtWidgets.QHBoxLayout()

        self.btn_clear = QtWidgets.QPushButton("Clear")
        self.btn_clear.clicked.connect(self.clear)
        button_layout.addWidget(self.btn_clear)

        button_layout.addStretch()

        self.btn_save = QtWidgets.QPushButton("Save Output...")
        self.btn_save.clicked.connect(self.save_output)
        button_layout.addWidget(self.btn_save)

        self.btn_run = QtWidgets.QPushButton("Run")
        self.btn_run.setDefault(True)
        self.btn_run.clicked.connect(self.run_analysis)
        button_layout.addWidget(self.btn_run)

        self.main_layout.addLayout(button_layout)

    def _setup_output_panel(self):
        self.lbl_warnings = QtWidgets.QLabel("")
        self.lbl_warnings.setWordWrap(True)
        self.lbl_warnings.setStyleSheet("color: #b35900;")
        self.main_layout.addWidget(self.lbl_warnings)

        self.txt_output = QtWidgets.QPlainTextEdit()
        self.txt_output.setReadOnly(True)
        self.txt_output.setLineWrapMode(QtWidgets.QPlainTextEdit.LineWrapMode.NoWrap)
        self.main_layout.addWidget(self.txt_output, 1)

    def _update_ui_state(self):
        files_ready = bool(self.question_set_files and self.quiz_data_files)
        self.btn_run.setEnabled(files_ready)
        self.btn_save.setEnabled(bool(self.report))

    @staticmethod
    def _describe_files(files: List[str]) -> str:
        names = ", ".join(QFileInfo(f).fileName() for f in files)
        return f"Selected: {names or 'None'}"

    def select_question_sets(self):
        files, _ = QtWidgets.QFileDialog.getOpenFileNames(
            self, "Select Question Sets", "", QUESTION_SET_FILTER
        )
        if files:
            self.set_question_set_files(files)

    def select_quiz_data(self):
        files, _ = QtWidgets.QFileDialog.getOpenFileNames(
            self, "Select Quiz Logs", "", QUIZ_DATA_FILTER
        )
        if files:
            self.set_quiz_data_files(files)

    def set_question_set_files(self, files: List[str]):
        self.question_set_files = list(files)
        self.lbl_question_sets.setText(self._describe_files(self.question_set_files))
        self._update_ui_state()

    def set_quiz_data_files(self, files: List[str]):
        self.quiz_data_files = list(files)
        self.lbl_quiz_data.setText(self._describe_files(self.quiz_data_files))
        self._update_ui_state()

    def current_config(self) -> AnalysisConfig:
        """Analysis settings from the option widgets."""
        return AnalysisConfig(
            question_types=[
                letter
                for letter, checkbox in self.type_checkboxes.items()
                if checkbox.isChecked()
            ],
            delimiter=self.edit_delimiter.text() or DEFAULT_DELIMITER,
            tournament=self.edit_tournament.text().strip(),
            display_rounds=self.chk_display_rounds.isChecked(),
            verbose=self.chk_verbose.isChecked(),
        )

    def run_analysis(self) -> bool:
        """Analyze the selected files and show the report.

        Returns:
            True if a report was produced
        """
        self.statusBar().showMessage("Processing...")
        try:
            self.result = analyze(
                self.question_set_files, self.quiz_data_files, self.current_config()
            )
        except QPerfException as e:
            logger.error("Analysis failed: %s", e)
            QtWidgets.QMessageBox.critical(self, "Analysis Error", str(e))
            self.statusBar().showMessage("Analysis failed.")
            return False

        self.report = build_report(self.result)
        self.txt_output.setPlainText(self.report)
        self.lbl_warnings.setText("\n".join(self.result.warnings))
        if self.report.strip():
            self.statusBar().showMessage(
                f"Done - {len(self.result.rounds)} rounds, "
                f"{len(self.result.standings)} teams."
            )
        else:
            self.statusBar().showMessage("Done - no output was produced.")
        self._update_ui_state()
        return True

    def save_output(self) -> bool:
        if not self.report:
            return False
        filename, _ = QtWidgets.QFileDialog.getSaveFileName(
            self, "Save Output", "qperf_results.csv", OUTPUT_FILTER
        )
        if not filename:
            return False
        try:
            Path(filename).write_text(self.report, encoding="utf-8")
        except OSError as e:
            logging.exception("Error saving output:")
            QtWidgets.QMessageBox.critical(
                self, "Save Error", f"Could not save output:\n{e}"
            )
            return False
        self.statusBar().showMessage(f"Output saved to {filename}")
        return True

    def clear(self):
        """Forget the selected files and the last report."""
        self.set_question_set_files([])
        self.set_quiz_data_files([])
        self.result = None
        self.report = ""
        self.txt_output.clear()
        self.lbl_warnings.clear()
        self.statusBar().showMessage("Ready - Select question sets and quiz logs.")
        self._update_ui_state()
