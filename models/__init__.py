# models/__init__.py

"""Public API for the models package.

Pure data and geometry for the crossplot; nothing here imports Qt.

Exports provided:
  - ParsedTable, DataPoint - immutable table and point records
  - project(table, x_column, y_column) - numeric point selection
  - Viewport, ViewportEngine - data-space window and its operations
  - axis_ticks(lo, hi) - tick positions and labels for one axis
  - ModelState - runtime state container
  - the CrossplotError family of exceptions
"""

from .errors import (
    CrossplotError,
    EmptyInputError,
    ReadFailureError,
    UnknownColumnError,
    EmptyPointSetError,
)
from .table import ParsedTable, DataPoint, format_hover_text, points_to_arrays
from .projector import project
from .viewport import (
    Viewport,
    ViewportEngine,
    DEFAULT_VIEWPORT,
    DEFAULT_PAD_FRACTION,
    TICK_DIVISIONS,
    axis_ticks,
)
from .model_state import ModelState

__all__ = [
    "CrossplotError",
    "EmptyInputError",
    "ReadFailureError",
    "UnknownColumnError",
    "EmptyPointSetError",
    "ParsedTable",
    "DataPoint",
    "format_hover_text",
    "points_to_arrays",
    "project",
    "Viewport",
    "ViewportEngine",
    "DEFAULT_VIEWPORT",
    "DEFAULT_PAD_FRACTION",
    "TICK_DIVISIONS",
    "axis_ticks",
    "ModelState",
]
