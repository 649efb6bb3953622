"""
Controls dock widget for loading a table and choosing the plotted columns.
"""

from PySide6.QtWidgets import (
    QDockWidget, QWidget, QVBoxLayout, QPushButton, QLabel,
    QHBoxLayout, QComboBox, QFormLayout
)
from PySide6.QtCore import Signal

from view.constants import COLUMN_PLACEHOLDER, ERROR_BG, ERROR_FG, PRIMARY_COLOR, SECONDARY_COLOR


class ControlsDock(QDockWidget):
    """Dock widget for file loading and X/Y column selection."""

    # Signals
    load_data_clicked = Signal()
    save_sample_clicked = Signal()
    x_column_selected = Signal(str)   # "" when the placeholder is chosen
    y_column_selected = Signal(str)

    def __init__(self, parent=None):
        """
        Initialize the controls dock.

        Args:
            parent: Parent widget (typically the main window)
        """
        super().__init__("Controls", parent)
        self._init_ui()

    def _init_ui(self):
        """Initialize the UI components."""
        left_widget = QWidget()
        layout = QVBoxLayout(left_widget)

        # Action buttons
        self.load_btn = QPushButton("Load CSV")
        self.sample_btn = QPushButton("Save Sample CSV")
        btn_row = QHBoxLayout()
        btn_row.addWidget(self.load_btn)
        btn_row.addWidget(self.sample_btn)
        layout.addWidget(QLabel("Data"))
        layout.addLayout(btn_row)

        # File name and table size
        self.file_label = QLabel("")
        self.file_label.setStyleSheet(f"color: {SECONDARY_COLOR};")
        self.summary_label = QLabel("")
        self.summary_label.setStyleSheet("color: #888;")
        layout.addWidget(self.file_label)
        layout.addWidget(self.summary_label)

        # Error banner, hidden until a load fails
        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(
            f"color: {ERROR_FG}; background: {ERROR_BG}; border: 1px solid #faa;"
            " padding: 8px; border-radius: 7px;"
        )
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        # Column selectors, shown once the table has more than one column
        self.selectors = QWidget()
        form = QFormLayout(self.selectors)
        self.x_combo = QComboBox()
        self.y_combo = QComboBox()
        x_label = QLabel("X-axis:")
        y_label = QLabel("Y-axis:")
        for label in (x_label, y_label):
            label.setStyleSheet(f"color: {PRIMARY_COLOR}; font-weight: 500;")
        form.addRow(x_label, self.x_combo)
        form.addRow(y_label, self.y_combo)
        self.selectors.setVisible(False)
        layout.addWidget(self.selectors)

        layout.addStretch(1)

        self.setWidget(left_widget)

        # Connect internal signals to emit dock signals
        self.load_btn.clicked.connect(self.load_data_clicked.emit)
        self.sample_btn.clicked.connect(self.save_sample_clicked.emit)
        self.x_combo.currentIndexChanged.connect(self._on_x_changed)
        self.y_combo.currentIndexChanged.connect(self._on_y_changed)

    def _on_x_changed(self, index):
        self.x_column_selected.emit(self.x_combo.itemData(index) or "")

    def _on_y_changed(self, index):
        self.y_column_selected.emit(self.y_combo.itemData(index) or "")

    def set_headers(self, headers):
        """
        Refill both column selectors with *headers*, placeholder selected.

        Args:
            headers: Sequence of column names (may contain duplicates)
        """
        headers = list(headers or [])
        for combo in (self.x_combo, self.y_combo):
            combo.blockSignals(True)
            combo.clear()
            combo.addItem(COLUMN_PLACEHOLDER, "")
            for name in headers:
                combo.addItem(name, name)
            combo.setCurrentIndex(0)
            combo.blockSignals(False)
        self.selectors.setVisible(len(headers) > 1)

    def set_selection(self, x_column, y_column):
        """Reflect the ViewModel's selection without re-emitting it."""
        for combo, name in ((self.x_combo, x_column), (self.y_combo, y_column)):
            idx = combo.findData(name) if name else 0
            combo.blockSignals(True)
            combo.setCurrentIndex(max(idx, 0))
            combo.blockSignals(False)

    def set_file(self, name, summary):
        self.file_label.setText(name or "")
        self.summary_label.setText(f"({summary})" if summary else "")

    def set_error(self, message):
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))
