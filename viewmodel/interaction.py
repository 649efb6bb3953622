# viewmodel/interaction.py
"""Pointer and wheel gestures on the crossplot, independent of any toolkit.

The controller is a two-state machine (idle / dragging). The view reports raw
pixel positions relative to the plot rectangle; the controller turns them into
:class:`ViewportEngine` calls and keeps the drag anchor of the current gesture.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from models.errors import EmptyPointSetError
from models.table import DataPoint
from models.viewport import DEFAULT_PAD_FRACTION, Viewport, ViewportEngine

ZOOM_IN_FACTOR = 0.85
ZOOM_OUT_FACTOR = 1.15

IDLE = "idle"
DRAGGING = "dragging"


@dataclass(frozen=True)
class DragAnchor:
    pointer_x: float
    pointer_y: float
    viewport: Viewport


class InteractionController:
    def __init__(self, engine: Optional[ViewportEngine] = None,
                 zoom_in_factor: float = ZOOM_IN_FACTOR,
                 zoom_out_factor: float = ZOOM_OUT_FACTOR,
                 pad_fraction: float = DEFAULT_PAD_FRACTION):
        self.engine = engine or ViewportEngine()
        self.zoom_in_factor = zoom_in_factor
        self.zoom_out_factor = zoom_out_factor
        self.pad_fraction = pad_fraction
        self._points: Sequence[DataPoint] = ()
        self._anchor: Optional[DragAnchor] = None

    @property
    def viewport(self) -> Viewport:
        return self.engine.viewport

    @property
    def state(self) -> str:
        return DRAGGING if self._anchor is not None else IDLE

    @property
    def is_dragging(self) -> bool:
        return self._anchor is not None

    @property
    def anchor(self) -> Optional[DragAnchor]:
        return self._anchor

    @property
    def points(self) -> Sequence[DataPoint]:
        return self._points

    @property
    def active(self) -> bool:
        """Gestures are only meaningful while there is something plotted."""
        return len(self._points) > 0

    def set_points(self, points: Sequence[DataPoint]) -> Viewport:
        """Take a new projection: cancel any drag and fit the view to it."""
        self._points = tuple(points)
        self._anchor = None
        if self._points:
            self.engine.auto_fit(self._points, self.pad_fraction)
        return self.engine.viewport

    def reset(self):
        self._points = ()
        self._anchor = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def pointer_down(self, x: float, y: float) -> Viewport:
        if self.active:
            self._anchor = DragAnchor(float(x), float(y), self.engine.viewport)
        return self.engine.viewport

    def pointer_move(self, x: float, y: float, width: float, height: float) -> Viewport:
        anchor = self._anchor
        if anchor is None:
            return self.engine.viewport
        # measured from the press point, never from the previous move
        dx = float(x) - anchor.pointer_x
        dy = float(y) - anchor.pointer_y
        return self.engine.pan_by_pixels(dx, dy, width, height, anchor.viewport)

    def pointer_up(self) -> Viewport:
        self._anchor = None
        return self.engine.viewport

    pointer_leave = pointer_up

    def wheel(self, x: float, y: float, width: float, height: float, delta: float) -> Viewport:
        """Zoom at the pointer; a negative *delta* (scrolling up) zooms in."""
        if not self.active or not (width > 0 and height > 0):
            return self.engine.viewport
        factor = self.zoom_in_factor if delta < 0 else self.zoom_out_factor
        return self.engine.zoom_at(float(x) / width, float(y) / height, factor)

    def double_click(self) -> Viewport:
        """Fit the view back to all points."""
        try:
            return self.engine.auto_fit(self._points, self.pad_fraction)
        except EmptyPointSetError:
            return self.engine.viewport
