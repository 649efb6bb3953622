# view/view_box.py
from PySide6 import QtCore
import pyqtgraph as pg


class CrossplotViewBox(pg.ViewBox):
    """
    ViewBox that reports raw gestures instead of changing its own range.

    Positions are in pixels relative to the top-left corner of the box, the
    convention the interaction controller expects. The range is only ever set
    from outside via :meth:`apply_viewport`.
    Emits:
      - dragStarted(x, y) at the press point
      - dragMoved(x, y, width, height) for every move, including the last
      - dragFinished()
      - wheelScrolled(x, y, width, height, delta), delta < 0 meaning zoom in
      - doubleClicked()
      - pointerLeft()
    """

    dragStarted = QtCore.Signal(float, float)
    dragMoved = QtCore.Signal(float, float, float, float)
    dragFinished = QtCore.Signal()
    wheelScrolled = QtCore.Signal(float, float, float, float, float)
    doubleClicked = QtCore.Signal()
    pointerLeft = QtCore.Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAspectLocked(False)
        self.disableAutoRange()
        self.setMenuEnabled(False)
        self._dragging = False

    def apply_viewport(self, viewport):
        self.setRange(xRange=(viewport.xmin, viewport.xmax),
                      yRange=(viewport.ymin, viewport.ymax), padding=0)

    def _size(self):
        return float(self.width()), float(self.height())

    # ---------------------
    # Mouse events
    # ---------------------
    def mouseDragEvent(self, ev, axis=None):
        if ev.button() != QtCore.Qt.MouseButton.LeftButton:
            ev.ignore()
            return
        ev.accept()
        if ev.isStart():
            start = ev.buttonDownPos()
            self._dragging = True
            self.dragStarted.emit(float(start.x()), float(start.y()))
        if not self._dragging:
            return
        pos = ev.pos()
        w, h = self._size()
        self.dragMoved.emit(float(pos.x()), float(pos.y()), w, h)
        if ev.isFinish():
            self._dragging = False
            self.dragFinished.emit()

    def wheelEvent(self, ev, axis=None):
        pos = ev.pos()
        w, h = self._size()
        # Qt reports a positive delta for scrolling up; the controller wants the opposite
        self.wheelScrolled.emit(float(pos.x()), float(pos.y()), w, h, float(-ev.delta()))
        ev.accept()

    def mouseClickEvent(self, ev):
        if ev.button() == QtCore.Qt.MouseButton.LeftButton and ev.double():
            self.doubleClicked.emit()
        ev.accept()

    def hoverEvent(self, ev):
        if ev.isExit():
            self.pointerLeft.emit()
