# models/projector.py
import logging
from typing import List

import numpy as np
import pandas as pd

from .errors import UnknownColumnError
from .table import DataPoint, ParsedTable

logger = logging.getLogger(__name__)


def _column_values(table: ParsedTable, index: int) -> np.ndarray:
    """Numeric values of column *index*; missing or non-numeric cells become NaN."""
    cells = [row[index] if index < len(row) else None for row in table.rows]
    series = pd.Series(cells, dtype=object)
    return pd.to_numeric(series, errors="coerce").to_numpy(dtype=float)


def project(table: ParsedTable, x_column: str, y_column: str) -> List[DataPoint]:
    """Select two named columns of *table* as numeric points.

    Rows whose x or y cell is missing, non-numeric or not finite are dropped.
    Each point keeps the index and contents of the row it came from; output
    order follows the table.
    """
    x_idx = table.column_index(x_column)
    if x_idx < 0:
        raise UnknownColumnError(x_column)
    y_idx = table.column_index(y_column)
    if y_idx < 0:
        raise UnknownColumnError(y_column)

    if not table.rows:
        return []

    x = _column_values(table, x_idx)
    y = _column_values(table, y_idx)
    valid_mask = np.isfinite(x) & np.isfinite(y)

    points = [
        DataPoint(x=float(x[i]), y=float(y[i]), source_index=int(i), row=table.rows[i])
        for i in np.flatnonzero(valid_mask)
    ]
    dropped = len(table.rows) - len(points)
    if dropped:
        logger.debug("Dropped %d of %d rows without numeric '%s'/'%s'",
                     dropped, len(table.rows), x_column, y_column)
    return points
