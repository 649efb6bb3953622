"""
Log dock widget for displaying application log messages.
"""

from PySide6.QtWidgets import QDockWidget, QPlainTextEdit

MAX_LOG_LINES = 2000


class LogDock(QDockWidget):
    """Read-only, size-capped view of the ViewModel's log messages."""

    def __init__(self, parent=None):
        super().__init__("Log", parent)
        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setMaximumBlockCount(MAX_LOG_LINES)
        self.log_text.appendPlainText("Crossplot explorer ready.")
        self.setWidget(self.log_text)

    def append_log(self, msg: str):
        self.log_text.appendPlainText(str(msg))
