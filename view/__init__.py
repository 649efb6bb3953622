# view/__init__.py
from .main_window import MainWindow
from .input_handler import InputHandler
from .view_box import CrossplotViewBox

__all__ = ["MainWindow", "InputHandler", "CrossplotViewBox"]
