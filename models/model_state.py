# models/model_state.py
from typing import Any, Dict, List, Optional

from models.table import DataPoint, ParsedTable
from models.projector import project


class ModelState:
    """
    Holds the loaded table, the selected column pair and the points
    projected from them. Knows nothing about Qt or the viewport.
    """

    def __init__(self):
        self.table: Optional[ParsedTable] = None
        # Information about the loaded file (path, name, size)
        self.file_info: Optional[Dict[str, Any]] = None
        self.x_column: str = ""
        self.y_column: str = ""
        self.points: List[DataPoint] = []

    # ------------------------------------------------------------------
    # Data accessors
    # ------------------------------------------------------------------
    def set_table(self, table: ParsedTable, file_info: Optional[Dict[str, Any]] = None):
        """Replace the table; column selections and points are reset."""
        self.table = table
        self.file_info = dict(file_info) if file_info else None
        self.clear_selection()

    def clear(self):
        self.table = None
        self.file_info = None
        self.clear_selection()

    def clear_selection(self):
        self.x_column = ""
        self.y_column = ""
        self.points = []

    @property
    def headers(self):
        return self.table.headers if self.table is not None else ()

    @property
    def has_selection(self) -> bool:
        return bool(self.x_column) and bool(self.y_column)

    def select_columns(self, x_column: Optional[str] = None, y_column: Optional[str] = None) -> List[DataPoint]:
        """Update the column pair and recompute points once both are chosen.

        Raises UnknownColumnError if a chosen name is not a header.
        """
        if x_column is not None:
            self.x_column = str(x_column)
        if y_column is not None:
            self.y_column = str(y_column)
        if self.table is None or not self.has_selection:
            self.points = []
            return self.points
        try:
            self.points = project(self.table, self.x_column, self.y_column)
        except Exception:
            self.points = []
            raise
        return self.points

    def summary(self) -> str:
        if self.table is None:
            return ""
        return self.table.summary()
