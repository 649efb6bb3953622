# view/main_window.py
# type: ignore
from PySide6.QtWidgets import (
    QMainWindow, QDockWidget, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QStackedWidget
)
from PySide6.QtCore import Qt
import pyqtgraph as pg

from models import points_to_arrays
from view.view_box import CrossplotViewBox
from view.input_handler import InputHandler
from view.constants import (
    ACCENT_COLOR, CONTROLS_HINT, EMPTY_HINT, PLOT_BG, POINT_SIZE,
    PRIMARY_COLOR, SECONDARY_COLOR,
)
from view.docks.controls_dock import ControlsDock
from view.docks.log_dock import LogDock
from viewmodel.logging_helpers import log_exception

PAGE_HINT = 0
PAGE_NO_DATA = 1
PAGE_PLOT = 2


class MainWindow(QMainWindow):
    def __init__(self, viewmodel=None):
        super().__init__()
        self.setWindowTitle("CSV Crossplot Explorer")
        self.viewmodel = viewmodel

        # --- Central area: hint / no-data message / plot ---
        self._init_plot()

        # --- Docks ---
        self._init_docks()

        for dock in [self.controls_dock, self.log_dock]:
            dock.setFeatures(QDockWidget.DockWidgetMovable | QDockWidget.DockWidgetFloatable)

        if self.viewmodel is not None:
            self._connect_viewmodel()

        self.resize(1100, 700)

    # --------------------------
    # Plot setup
    # --------------------------
    def _init_plot(self):
        self.viewbox = CrossplotViewBox()
        self.plot_widget = pg.PlotWidget(viewBox=self.viewbox)
        self.plot_widget.setBackground(PLOT_BG)
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setCursor(Qt.CrossCursor)

        self.input_handler = InputHandler(self.viewbox, self.viewmodel)

        # scatter (data points); tooltips come from the point's hover text
        self.scatter = pg.ScatterPlotItem(
            size=POINT_SIZE,
            pen=pg.mkPen(PRIMARY_COLOR),
            brush=pg.mkBrush(ACCENT_COLOR + "CC"),
            hoverable=True,
            hoverSize=POINT_SIZE + 3,
            tip=self._point_tip,
        )
        self.plot_widget.addItem(self.scatter)

        for ax in ("left", "bottom"):
            axis = self.plot_widget.getAxis(ax)
            axis.setPen(pg.mkPen(SECONDARY_COLOR))
            axis.setTextPen(pg.mkPen(SECONDARY_COLOR))

        plot_page = QWidget()
        plot_layout = QVBoxLayout(plot_page)
        plot_layout.addWidget(self.plot_widget, 1)

        legend_row = QHBoxLayout()
        self.x_legend = QLabel("")
        self.y_legend = QLabel("")
        self.count_legend = QLabel("")
        self.count_legend.setStyleSheet(f"color: {ACCENT_COLOR}; font-weight: 600;")
        legend_row.addWidget(self.x_legend)
        legend_row.addStretch(1)
        legend_row.addWidget(self.y_legend)
        legend_row.addStretch(1)
        legend_row.addWidget(self.count_legend)
        plot_layout.addLayout(legend_row)

        hint = QLabel(f"Controls: {CONTROLS_HINT}")
        hint.setAlignment(Qt.AlignCenter)
        hint.setStyleSheet("color: #876b24; background: #fff9f0; padding: 7px; border-radius: 8px;")
        plot_layout.addWidget(hint)

        self.empty_label = QLabel(EMPTY_HINT)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color: #4f5e7e; font-size: 14px;")
        self.no_data_label = QLabel("")
        self.no_data_label.setAlignment(Qt.AlignCenter)
        self.no_data_label.setStyleSheet(f"color: {SECONDARY_COLOR}; font-size: 14px;")

        self.stack = QStackedWidget()
        self.stack.insertWidget(PAGE_HINT, self.empty_label)
        self.stack.insertWidget(PAGE_NO_DATA, self.no_data_label)
        self.stack.insertWidget(PAGE_PLOT, plot_page)
        self.stack.setCurrentIndex(PAGE_HINT)
        self.setCentralWidget(self.stack)

    def _init_docks(self):
        self.controls_dock = ControlsDock(self)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.controls_dock)
        self.log_dock = LogDock(self)
        self.addDockWidget(Qt.BottomDockWidgetArea, self.log_dock)

    def _connect_viewmodel(self):
        vm = self.viewmodel
        self.controls_dock.load_data_clicked.connect(lambda: vm.handle_action("load_data", parent=self))
        self.controls_dock.save_sample_clicked.connect(lambda: vm.handle_action("save_sample", parent=self))
        self.controls_dock.x_column_selected.connect(lambda name: vm.handle_action("select_columns", x_column=name))
        self.controls_dock.y_column_selected.connect(lambda name: vm.handle_action("select_columns", y_column=name))

        vm.log_message.connect(self.append_log)
        vm.table_loaded.connect(self.controls_dock.set_headers)
        vm.file_changed.connect(self.controls_dock.set_file)
        vm.error_changed.connect(self.controls_dock.set_error)
        vm.selection_changed.connect(self.controls_dock.set_selection)
        vm.plot_updated.connect(self.update_plot_data)
        vm.viewport_changed.connect(self.apply_viewport)
        vm.drag_state_changed.connect(self._on_drag_state_changed)

    # --------------------------
    # ViewModel → View
    # --------------------------
    def update_plot_data(self, points):
        points = list(points or [])
        if points:
            x, y = points_to_arrays(points)
            self.scatter.setData(x=x, y=y, data=points)
        else:
            self.scatter.clear()

        x_col = self.viewmodel.state.x_column if self.viewmodel else ""
        y_col = self.viewmodel.state.y_column if self.viewmodel else ""
        self.x_legend.setText(f"X: {x_col}")
        self.y_legend.setText(f"Y: {y_col}")
        self.count_legend.setText(f"{len(points)} points")

        status = self.viewmodel.status_message() if self.viewmodel else ""
        if points:
            self.stack.setCurrentIndex(PAGE_PLOT)
        elif status:
            self.no_data_label.setText(status)
            self.stack.setCurrentIndex(PAGE_NO_DATA)
        else:
            self.stack.setCurrentIndex(PAGE_HINT)

    def apply_viewport(self, viewport):
        try:
            self.viewbox.apply_viewport(viewport)
            x_ticks, y_ticks = self.viewmodel.ticks()
            self.plot_widget.getAxis("bottom").setTicks([x_ticks])
            self.plot_widget.getAxis("left").setTicks([y_ticks])
        except Exception as e:
            log_exception("Failed to apply viewport", e, vm=self.viewmodel)

    def _on_drag_state_changed(self, dragging):
        self.plot_widget.setCursor(Qt.SizeAllCursor if dragging else Qt.CrossCursor)

    def _point_tip(self, x, y, data):
        if data is None or self.viewmodel is None:
            return f"{x}, {y}"
        return self.viewmodel.hover_text(data)

    def append_log(self, msg):
        self.log_dock.append_log(msg)
