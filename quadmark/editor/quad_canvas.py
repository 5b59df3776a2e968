"""
Canvas widget for QuadMark.

The QuadCanvas is a fixed-size drawing area that:
- Owns the rendered surface (a QImage the size of the canvas)
- Reports left-button pointer events in canvas-local coordinates
- Defers all drawing until the background image has loaded

It holds no interaction state of its own; EditorWidget wires its signals to
a QuadEditor and calls redraw() whenever the editor changes.
"""

from typing import Optional

from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QColor, QImage, QMouseEvent, QPainter
from PySide6.QtWidgets import QWidget

from quadmark.editor import renderer
from quadmark.editor.quadrilateral import Quadrilateral
from quadmark.services.logging_service import get_logger


class QuadCanvas(QWidget):
    """
    Fixed-size canvas showing the background and the quadrilateral.

    Signals:
        pointer_pressed: Left button pressed (canvas coordinates).
        pointer_moved: Pointer moved while tracked (canvas coordinates).
        pointer_released: Left button released (canvas coordinates).
    """

    pointer_pressed = Signal(QPointF)
    pointer_moved = Signal(QPointF)
    pointer_released = Signal(QPointF)

    PLACEHOLDER_COLOR = QColor(26, 26, 26)

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)

        self._surface = QImage(width, height, QImage.Format.Format_ARGB32)
        self._surface.fill(self.PLACEHOLDER_COLOR)

        self._background: Optional[QImage] = None
        self._quad: Optional[Quadrilateral] = None
        self._pending: bool = False

        self.setFixedSize(width, height)

    # ─── Surface ──────────────────────────────────────────────────────────

    @property
    def surface(self) -> QImage:
        return self._surface

    @property
    def pending(self) -> bool:
        """True when a redraw is waiting for the background image."""
        return self._pending

    def set_background(self, image: QImage) -> None:
        """
        Install the background image and draw the accumulated state once.
        """
        self._background = image
        self._logger.info(
            f"Background set: {image.width()}x{image.height()} "
            f"onto {self._surface.width()}x{self._surface.height()} canvas"
        )
        self._paint_surface()

    def redraw(self, quad: Optional[Quadrilateral]) -> None:
        """Redraw with a new shape, or remember it until the background loads."""
        self._quad = quad

        if self._background is None:
            self._pending = True
            return

        self._paint_surface()

    def _paint_surface(self) -> None:
        renderer.render(self._surface, self._background, self._quad)
        self._pending = False
        self.update()

    def export_png(self) -> bytes:
        """PNG bytes of the current surface. Does not touch editor state."""
        return renderer.export_png(self._surface)

    # ─── Event Handlers ───────────────────────────────────────────────────

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self._surface)

        if self._background is None:
            painter.setPen(QColor(100, 100, 100))
            painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, "Loading image...")

        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.pointer_pressed.emit(event.position())

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        # Qt keeps delivering moves after the pointer leaves the widget
        # while a button is held, so gestures survive leave/re-enter.
        self.pointer_moved.emit(event.position())

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.pointer_released.emit(event.position())
