"""
Dock widgets package for the crossplot window.
"""

from .controls_dock import ControlsDock
from .log_dock import LogDock

__all__ = ["ControlsDock", "LogDock"]
