# viewmodel/crossplot_vm.py
from PySide6.QtCore import QObject, Signal
import os
import typing as _typing

from models import ModelState, ParsedTable, DataPoint, Viewport, CrossplotError, ReadFailureError
from models.viewport import ViewportEngine
from dataio.table_parser import parse
from dataio.data_loader import select_data_file, file_info_for
from dataio.sample_data import save_sample_csv
from worker.file_reader import FileReadWorker
from .interaction import InteractionController
from .logging_helpers import log_exception, log_message, safe_call, safe_emit

PARSE_ERROR_PREFIX = "Failed to parse CSV: "
NO_NUMERIC_DATA = "No valid numeric data for the selected columns."


class CrossplotViewModel(QObject):
    """
    Central logic layer: loads tables, projects the selected columns and
    turns plot gestures into viewport updates for the view.
    """

    log_message = Signal(str)
    table_loaded = Signal(object)          # tuple of headers (empty after a failure)
    file_changed = Signal(str, str)        # file name, "N columns, M rows"
    error_changed = Signal(str)            # user-facing error text, "" to clear
    selection_changed = Signal(str, str)   # x column, y column
    plot_updated = Signal(object)          # list[DataPoint]
    viewport_changed = Signal(object)      # Viewport
    drag_state_changed = Signal(bool)      # True while panning

    def __init__(self, model_state=None, config=None):
        super().__init__()
        self.state = model_state or ModelState()
        if config is None:
            from dataio import get_config
            config = get_config()
        self.config = config
        self.controller = InteractionController(
            ViewportEngine(),
            zoom_in_factor=config.zoom_in_factor,
            zoom_out_factor=config.zoom_out_factor,
            pad_fraction=config.pad_fraction,
        )
        self._error = ""
        # Every read request gets a new token; results carrying an older one are dropped
        self._request_token = 0
        self._readers: dict = {}

    def _log_message(self, message: str) -> None:
        log_message(message, vm=self)

    # --------------------------
    # Accessors
    # --------------------------
    @property
    def table(self) -> _typing.Optional[ParsedTable]:
        return self.state.table

    @property
    def headers(self):
        return self.state.headers

    @property
    def points(self) -> _typing.List[DataPoint]:
        return self.state.points

    @property
    def viewport(self) -> Viewport:
        return self.controller.viewport

    @property
    def error(self) -> str:
        return self._error

    @property
    def request_token(self) -> int:
        return self._request_token

    def status_message(self) -> str:
        """Text for the plot area when nothing can be drawn."""
        if self.state.has_selection and not self.state.points:
            return NO_NUMERIC_DATA
        return ""

    def hover_text(self, point: DataPoint) -> str:
        return point.hover_text(self.state.x_column, self.state.y_column)

    def ticks(self):
        return self.controller.engine.ticks()

    # --------------------------
    # Data I/O
    # --------------------------
    def load_data(self, parent=None):
        """Open a file dialog and read the chosen file in the background."""
        path = select_data_file(parent)
        if not path:
            return None
        return self.request_file(path)

    def request_file(self, path: str) -> int:
        """Start reading *path* on a worker thread; returns the request token."""
        token = self._begin_request(file_info_for(path))
        # keep running readers referenced until their thread has exited
        self._readers = {t: w for t, w in self._readers.items() if w.isRunning()}
        worker = FileReadWorker(path, token)
        worker.text_loaded.connect(self._on_text_loaded)
        worker.error_occurred.connect(self._on_read_failed)
        self._readers[token] = worker
        worker.start()
        self._log_message(f"Reading {os.path.basename(path)}...")
        return token

    def _begin_request(self, file_info: _typing.Optional[dict] = None) -> int:
        """Reset the selection for an incoming file and issue a new token."""
        self._request_token += 1
        self._set_error("")
        self.state.clear_selection()
        self.state.file_info = dict(file_info) if file_info else None
        self._reset_plot()
        name = (file_info or {}).get("name") or ""
        safe_emit(self.file_changed, name, "", vm=self, signal_name="file_changed")
        safe_emit(self.selection_changed, "", "", vm=self, signal_name="selection_changed")
        return self._request_token

    def _on_text_loaded(self, token: int, text: str, file_info: object):
        if token != self._request_token:
            self._log_message(f"Discarded result of superseded read #{token}.")
            return
        if self.load_text(text, file_info if isinstance(file_info, dict) else None, token=token):
            self._persist_load_folder(file_info)

    def _on_read_failed(self, token: int, message: str):
        if token != self._request_token:
            self._log_message(f"Discarded failure of superseded read #{token}.")
            return
        self._fail(ReadFailureError(message))

    def load_text(self, text: str, file_info: _typing.Optional[dict] = None, token: _typing.Optional[int] = None) -> bool:
        """Parse *text* and make it the current table. Returns True on success.

        Without a *token* this counts as a new request of its own.
        """
        if token is None:
            self._begin_request(file_info)
        try:
            table = parse(text, self.config.delimiter)
        except CrossplotError as exc:
            self._fail(exc)
            return False

        self.state.set_table(table, file_info)
        self._set_error("")
        name = (file_info or {}).get("name") or ""
        safe_emit(self.table_loaded, table.headers, vm=self, signal_name="table_loaded")
        safe_emit(self.file_changed, name, table.summary(), vm=self, signal_name="file_changed")
        self._log_message(f"Loaded {name or 'table'} ({table.summary()})")
        return True

    def _fail(self, exc: Exception):
        """Report a read/parse failure and drop everything loaded before it."""
        self.state.clear()
        self._reset_plot()
        safe_emit(self.table_loaded, (), vm=self, signal_name="table_loaded")
        safe_emit(self.selection_changed, "", "", vm=self, signal_name="selection_changed")
        self._set_error(PARSE_ERROR_PREFIX + str(exc))
        self._log_message(self._error)

    def _persist_load_folder(self, file_info):
        path = (file_info or {}).get("path") if isinstance(file_info, dict) else None
        folder = os.path.dirname(path) if path else ""
        if not folder:
            return
        self.config.default_load_folder = folder
        safe_call(self.config.save, context="save config", vm=self)

    def save_sample(self, parent=None):
        folder = self.config.default_save_folder or None
        path = safe_call(save_sample_csv, parent, folder, context="save sample CSV", vm=self)
        if path:
            self._log_message(f"Sample CSV saved to {path}")
        return path

    # --------------------------
    # Column selection
    # --------------------------
    def select_columns(self, x_column: _typing.Optional[str] = None, y_column: _typing.Optional[str] = None):
        """Change the X and/or Y column, re-project and re-fit the view."""
        if self.state.table is None:
            return []
        try:
            points = self.state.select_columns(x_column, y_column)
        except CrossplotError as exc:
            self._set_error(str(exc))
            self._log_message(str(exc))
            points = []
        else:
            if self._error:
                self._set_error("")
        safe_emit(self.selection_changed, self.state.x_column, self.state.y_column,
                  vm=self, signal_name="selection_changed")

        was_dragging = self.controller.is_dragging
        viewport = self.controller.set_points(points)
        if was_dragging:
            safe_emit(self.drag_state_changed, False, vm=self, signal_name="drag_state_changed")
        safe_emit(self.plot_updated, list(points), vm=self, signal_name="plot_updated")
        if points:
            safe_emit(self.viewport_changed, viewport, vm=self, signal_name="viewport_changed")
            self._log_message(f"Plotting {self.state.y_column} vs {self.state.x_column}: {len(points)} points")
        return points

    def set_x_column(self, name: str):
        return self.select_columns(x_column=name)

    def set_y_column(self, name: str):
        return self.select_columns(y_column=name)

    # --------------------------
    # Gestures
    # --------------------------
    def pointer_down(self, x, y):
        self.controller.pointer_down(x, y)
        if self.controller.is_dragging:
            safe_emit(self.drag_state_changed, True, vm=self, signal_name="drag_state_changed")

    def pointer_move(self, x, y, width, height):
        if not self.controller.is_dragging:
            return
        self._emit_viewport(self.controller.pointer_move(x, y, width, height))

    def pointer_up(self):
        was_dragging = self.controller.is_dragging
        self.controller.pointer_up()
        if was_dragging:
            safe_emit(self.drag_state_changed, False, vm=self, signal_name="drag_state_changed")

    def pointer_leave(self):
        self.pointer_up()

    def wheel(self, x, y, width, height, delta):
        if not self.controller.active:
            return
        self._emit_viewport(self.controller.wheel(x, y, width, height, delta))

    def double_click(self):
        if not self.controller.active:
            return
        self._emit_viewport(self.controller.double_click())

    def _emit_viewport(self, viewport: Viewport):
        safe_emit(self.viewport_changed, viewport, vm=self, signal_name="viewport_changed")

    # --------------------------
    # Internals
    # --------------------------
    def _reset_plot(self):
        was_dragging = self.controller.is_dragging
        self.controller.reset()
        if was_dragging:
            safe_emit(self.drag_state_changed, False, vm=self, signal_name="drag_state_changed")
        safe_emit(self.plot_updated, [], vm=self, signal_name="plot_updated")

    def _set_error(self, message: str):
        if message == self._error:
            return
        self._error = message
        safe_emit(self.error_changed, message, vm=self, signal_name="error_changed")

    def handle_action(self, action: str, **kwargs):
        """
        Central dispatcher for view-driven actions.

        Examples:
            handle_action('load_data')
            handle_action('select_columns', x_column='GR', y_column='RES')
            handle_action('wheel', x=120, y=80, width=640, height=320, delta=-120)

        Returns:
            The result of the action, or None if it is unknown or fails.
        """
        if not action:
            self._log_message("handle_action: no action provided")
            return None

        a = str(action).strip()
        mapping = {
            "load_data": lambda: self.load_data(kwargs.get("parent")),
            "request_file": lambda: self.request_file(kwargs["path"]),
            "save_sample": lambda: self.save_sample(kwargs.get("parent")),
            "select_columns": lambda: self.select_columns(kwargs.get("x_column"), kwargs.get("y_column")),
            "pointer_down": lambda: self.pointer_down(kwargs["x"], kwargs["y"]),
            "pointer_move": lambda: self.pointer_move(kwargs["x"], kwargs["y"], kwargs["width"], kwargs["height"]),
            "pointer_up": self.pointer_up,
            "pointer_leave": self.pointer_leave,
            "wheel": lambda: self.wheel(kwargs["x"], kwargs["y"], kwargs["width"], kwargs["height"], kwargs["delta"]),
            "double_click": self.double_click,
        }
        func = mapping.get(a)
        if func is None:
            self._log_message(f"Unknown action requested: '{action}'")
            return None
        try:
            return func()
        except Exception as e:
            log_exception(f"handle_action('{action}') failed", e, vm=self)
            return None
