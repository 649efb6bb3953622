# view/input_handler.py
from PySide6.QtCore import QObject

from viewmodel.logging_helpers import log_exception


class InputHandler(QObject):
    """
    Forwards plot gestures from the ViewBox signals to the ViewModel.

    The ViewBox only knows pixels; the ViewModel only knows actions. This
    class is the wiring between the two and holds no state of its own.
    """

    def __init__(self, viewbox=None, viewmodel=None, parent=None):
        super().__init__(parent)
        self.viewmodel = viewmodel
        self.viewbox = viewbox
        if self.viewbox is not None:
            self._connect_viewbox()

    def set_viewmodel(self, vm):
        self.viewmodel = vm

    # -----------------------
    # ViewBox signal hookups
    # -----------------------
    def _connect_viewbox(self):
        vb = self.viewbox
        vb.dragStarted.connect(self.on_drag_started)
        vb.dragMoved.connect(self.on_drag_moved)
        vb.dragFinished.connect(self.on_drag_finished)
        vb.wheelScrolled.connect(self.on_wheel)
        vb.doubleClicked.connect(self.on_double_click)
        vb.pointerLeft.connect(self.on_pointer_left)

    def _dispatch(self, action: str, **kwargs):
        if self.viewmodel is None:
            return None
        try:
            return self.viewmodel.handle_action(action, **kwargs)
        except Exception as e:
            log_exception(f"Input action '{action}' failed", e, vm=self.viewmodel)
            return None

    # -----------------------
    # ViewBox event handlers
    # -----------------------
    def on_drag_started(self, x, y):
        self._dispatch("pointer_down", x=x, y=y)

    def on_drag_moved(self, x, y, width, height):
        self._dispatch("pointer_move", x=x, y=y, width=width, height=height)

    def on_drag_finished(self):
        self._dispatch("pointer_up")

    def on_pointer_left(self):
        self._dispatch("pointer_leave")

    def on_wheel(self, x, y, width, height, delta):
        self._dispatch("wheel", x=x, y=y, width=width, height=height, delta=delta)

    def on_double_click(self):
        self._dispatch("double_click")
