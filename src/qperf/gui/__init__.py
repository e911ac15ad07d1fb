"""Desktop front end for QPerf."""

import sys

from PyQt6 import QtWidgets

from qperf import APP_NAME
from qperf.gui.mainwindow import QPerfMainWindow


def main() -> int:
    """Start the QPerf window and run the Qt event loop."""
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = QPerfMainWindow()
    window.show()
    return app.exec()


__all__ = ["QPerfMainWindow", "main"]
