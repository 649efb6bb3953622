# models/table.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class ParsedTable:
    """Header row plus data rows of a delimited text file.

    Cells stay strings; numeric interpretation happens in the projector.
    Rows may be shorter or longer than ``headers``.
    """

    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    def __post_init__(self):
        # freeze whatever sequences the caller handed in
        object.__setattr__(self, "headers", tuple(str(h) for h in self.headers))
        object.__setattr__(self, "rows", tuple(tuple(r) for r in self.rows))

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def summary(self) -> str:
        """Human readable size, e.g. ``"4 columns, 6 rows"``."""
        return f"{self.column_count} columns, {self.row_count} rows"

    def column_index(self, name: str) -> int:
        """Index of the first header equal to *name*, or -1."""
        try:
            return self.headers.index(name)
        except ValueError:
            return -1


@dataclass(frozen=True)
class DataPoint:
    x: float
    y: float
    source_index: int
    row: Tuple[str, ...] = ()

    def hover_text(self, x_column: str, y_column: str) -> str:
        return format_hover_text(x_column, self.x, y_column, self.y)


def format_hover_text(x_column: str, x: float, y_column: str, y: float) -> str:
    return f"{x_column}: {_format_value(x)}\n{y_column}: {_format_value(y)}"


def _format_value(value: float) -> str:
    # integral values print without a trailing ".0" (1000 rather than 1000.0)
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def points_to_arrays(points: Sequence[DataPoint]):
    """Split *points* into ``(x, y)`` float arrays for plotting."""
    x = np.fromiter((p.x for p in points), dtype=float, count=len(points))
    y = np.fromiter((p.y for p in points), dtype=float, count=len(points))
    return x, y
