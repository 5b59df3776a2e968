"""
Renderer for the QuadMark canvas.

Paints the background image, the quadrilateral outline and its corner handles
onto a QImage, and encodes images as PNG bytes for export.
"""

from typing import Optional

from PySide6.QtCore import QBuffer, QByteArray, QIODevice, QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPen, QPolygonF

from quadmark.editor.geometry import HANDLE_RADIUS, Point
from quadmark.editor.quadrilateral import Quadrilateral
from quadmark.services.logging_service import get_logger


STROKE_COLOR = QColor("#00FFA1")
STROKE_WIDTH = 4
HANDLE_COLOR = QColor("#2853E3")

_logger = get_logger(__name__)


def _to_qpoint(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def render(target: QImage, background: QImage, quad: Optional[Quadrilateral]) -> None:
    """
    Draw the full scene onto `target`.

    The background is stretched to exactly fill the target (no letterbox).
    When a quadrilateral is given, its closed outline is stroked and a filled
    handle is drawn on every corner in declaration order.

    Args:
        target: Image to paint into; fully overwritten by the background.
        background: The loaded background image.
        quad: The shape to draw, or None for background only.
    """
    painter = QPainter(target)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

    painter.drawImage(QRectF(0, 0, target.width(), target.height()), background)

    if quad is not None:
        _draw_outline(painter, quad)
        _draw_handles(painter, quad)

    painter.end()


def _draw_outline(painter: QPainter, quad: Quadrilateral) -> None:
    """Stroke TL -> TR -> BR -> BL and back to TL."""
    polygon = QPolygonF([_to_qpoint(p) for p in quad.outline()])
    painter.setPen(QPen(STROKE_COLOR, STROKE_WIDTH))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPolygon(polygon)


def _draw_handles(painter: QPainter, quad: Quadrilateral) -> None:
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(HANDLE_COLOR)
    for point in quad.corners():
        painter.drawEllipse(_to_qpoint(point), HANDLE_RADIUS, HANDLE_RADIUS)


def export_png(image: QImage) -> bytes:
    """
    Encode an image as PNG.

    Returns:
        The PNG bytes, or b"" if encoding failed (the failure is logged).
    """
    byte_array = QByteArray()
    buffer = QBuffer(byte_array)
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    ok = image.save(buffer, "PNG")
    buffer.close()

    if not ok:
        _logger.error("PNG encoding failed")
        return b""

    return byte_array.data()
