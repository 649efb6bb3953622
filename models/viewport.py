# models/viewport.py
"""Data-space window of the crossplot and the operations that move it.

The :class:`ViewportEngine` holds the only live :class:`Viewport`. Every
operation returns the viewport that is current afterwards; when a computation
would produce an inverted, zero-width or non-finite window the previous
viewport is kept instead, so callers never have to check the result.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import EmptyPointSetError
from .table import DataPoint

logger = logging.getLogger(__name__)

DEFAULT_PAD_FRACTION = 0.05
# number of equal divisions per axis; tick positions include both ends
TICK_DIVISIONS = 5


@dataclass(frozen=True)
class Viewport:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def x_range(self) -> float:
        return self.xmax - self.xmin

    @property
    def y_range(self) -> float:
        return self.ymax - self.ymin

    def is_valid(self) -> bool:
        values = (self.xmin, self.xmax, self.ymin, self.ymax)
        if not all(math.isfinite(v) for v in values):
            return False
        return self.xmax > self.xmin and self.ymax > self.ymin

    def normalized(self) -> "Viewport":
        """Return a well-formed copy: swapped bounds are reordered, empty ranges widened by 1."""
        xmin, xmax = sorted((float(self.xmin), float(self.xmax)))
        ymin, ymax = sorted((float(self.ymin), float(self.ymax)))
        if not xmax > xmin:
            xmin, xmax = xmin - 1.0, xmax + 1.0
        if not ymax > ymin:
            ymin, ymax = ymin - 1.0, ymax + 1.0
        return Viewport(xmin, xmax, ymin, ymax)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.xmin, self.xmax, self.ymin, self.ymax)


DEFAULT_VIEWPORT = Viewport(-1.0, 1.0, -1.0, 1.0)


def axis_ticks(lo: float, hi: float, divisions: int = TICK_DIVISIONS) -> List[Tuple[float, str]]:
    """Evenly spaced ``(value, label)`` ticks from *lo* to *hi*, labels with two decimals."""
    values = np.linspace(float(lo), float(hi), int(divisions) + 1)
    return [(float(v), f"{v:.2f}") for v in values]


class ViewportEngine:
    """Owns the current viewport and applies auto-fit, zoom and pan to it."""

    def __init__(self, viewport: Optional[Viewport] = None):
        self._viewport = DEFAULT_VIEWPORT
        if viewport is not None:
            self.set_viewport(viewport)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def set_viewport(self, viewport: Viewport) -> Viewport:
        """Store *viewport*, correcting inverted or empty ranges first."""
        candidate = Viewport(*(float(v) for v in viewport.as_tuple()))
        if not all(math.isfinite(v) for v in candidate.as_tuple()):
            logger.warning("Ignoring non-finite viewport %s", candidate)
            return self._viewport
        self._viewport = candidate.normalized()
        return self._viewport

    def _commit(self, candidate: Viewport) -> Viewport:
        if candidate.is_valid():
            self._viewport = candidate
        else:
            logger.debug("Rejected viewport %s; keeping %s", candidate, self._viewport)
        return self._viewport

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def auto_fit(self, points: Sequence[DataPoint], pad_fraction: float = DEFAULT_PAD_FRACTION) -> Viewport:
        """Fit the viewport to *points* plus a proportional margin.

        Raises :class:`EmptyPointSetError` for an empty sequence; the current
        viewport is left untouched in that case.
        """
        if not points:
            raise EmptyPointSetError()
        xs = np.array([p.x for p in points], dtype=float)
        ys = np.array([p.y for p in points], dtype=float)
        xmin0, xmax0 = float(xs.min()), float(xs.max())
        ymin0, ymax0 = float(ys.min()), float(ys.max())

        # a zero pad (all values identical) would leave a zero-width window
        x_pad = (xmax0 - xmin0) * pad_fraction or 1.0
        y_pad = (ymax0 - ymin0) * pad_fraction or 1.0

        return self._commit(Viewport(xmin0 - x_pad, xmax0 + x_pad, ymin0 - y_pad, ymax0 + y_pad))

    def zoom_at(self, frac_x: float, frac_y: float, factor: float) -> Viewport:
        """Scale the bounds towards the pointer fraction; ``factor < 1`` zooms in.

        ``frac_y`` is measured top-down, as on screen.
        """
        fx = min(max(float(frac_x), 0.0), 1.0)
        fy = min(max(float(frac_y), 0.0), 1.0)
        factor = float(factor)
        vp = self._viewport

        nxmin = fx * (vp.xmin * factor) + (1 - fx) * vp.xmin
        nxmax = fx * (vp.xmax * factor) + (1 - fx) * vp.xmax
        nymin = (1 - fy) * vp.ymin + fy * (vp.ymin * factor)
        nymax = (1 - fy) * vp.ymax + fy * (vp.ymax * factor)
        return self._commit(Viewport(nxmin, nxmax, nymin, nymax))

    def pan_by_pixels(self, dx_pixels: float, dy_pixels: float,
                      width_pixels: float, height_pixels: float,
                      base_viewport: Viewport) -> Viewport:
        """Shift *base_viewport* by a pixel drag; the window size never changes.

        *base_viewport* is the snapshot taken when the drag started, so every
        move of one gesture is measured from the same origin.
        """
        if not (width_pixels > 0 and height_pixels > 0):
            return self._viewport
        x_shift = (float(dx_pixels) / float(width_pixels)) * base_viewport.x_range
        y_shift = (float(dy_pixels) / float(height_pixels)) * base_viewport.y_range
        return self._commit(Viewport(
            base_viewport.xmin - x_shift,
            base_viewport.xmax - x_shift,
            base_viewport.ymin + y_shift,
            base_viewport.ymax + y_shift,
        ))

    def ticks(self, divisions: int = TICK_DIVISIONS):
        """``(x_ticks, y_ticks)`` for the current viewport."""
        vp = self._viewport
        return axis_ticks(vp.xmin, vp.xmax, divisions), axis_ticks(vp.ymin, vp.ymax, divisions)
