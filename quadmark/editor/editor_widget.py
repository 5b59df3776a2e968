"""
Editor widget for QuadMark - the main editor UI component.

This widget composes the editor interface:
- Top toolbar with Undo, Redo, Clear and Save
- Center canvas showing the background and the quadrilateral

The widget is a thin dispatcher: canvas pointer signals are forwarded to a
QuadEditor, and every editor change redraws the canvas and refreshes the
toolbar's enabled states.
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QPointF, Qt, Slot
from PySide6.QtGui import QColor, QIcon, QImage, QPainter, QPainterPath, QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QSizePolicy,
    QToolBar,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from quadmark.editor.geometry import Point
from quadmark.editor.history import HistoryStack
from quadmark.editor.interaction import QuadEditor
from quadmark.editor.quad_canvas import QuadCanvas
from quadmark.services.config_service import ConfigService
from quadmark.services.logging_service import get_logger


def _create_action_icon(shape: str, color: QColor = QColor(220, 220, 220)) -> QIcon:
    """Draw a small toolbar icon programmatically."""
    size = 24
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(color)
    painter.setBrush(Qt.BrushStyle.NoBrush)

    if shape in ("undo", "redo"):
        # Curved arrow, mirrored for redo
        if shape == "redo":
            painter.translate(size, 0)
            painter.scale(-1, 1)
        path = QPainterPath()
        path.moveTo(18, 18)
        path.cubicTo(18, 8, 12, 7, 6, 9)
        painter.drawPath(path)
        painter.drawLine(6, 9, 10, 5)
        painter.drawLine(6, 9, 10, 13)

    elif shape == "clear":
        # Quadrilateral with a cross through it
        painter.drawRect(5, 5, 14, 14)
        painter.drawLine(3, 21, 21, 3)

    elif shape == "save":
        # Floppy disk
        painter.drawRect(4, 4, 16, 16)
        painter.drawRect(7, 4, 10, 6)
        painter.drawRect(7, 12, 10, 6)

    painter.end()
    return QIcon(pixmap)


class EditorWidget(QWidget):
    """
    Main editor widget composing the toolbar and the quadrilateral canvas.

    Undo is enabled only while the undo stack has entries and Redo only while
    the redo stack has entries.
    """

    def __init__(self, config_service: Optional[ConfigService] = None, parent=None):
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._config = config_service

        width = config_service.canvas_width if config_service else 800
        height = config_service.canvas_height if config_service else 600
        limit = config_service.history_limit if config_service else None

        self._editor = QuadEditor(HistoryStack(limit=limit))
        self._canvas: Optional[QuadCanvas] = None
        self._handlers_attached = False

        self._setup_ui(width, height)
        self._attach_handlers()
        self._update_actions()

    def _setup_ui(self, width: int, height: int) -> None:
        """Build the UI layout."""
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # ─── Top Toolbar ──────────────────────────────────────────────
        self._toolbar = QToolBar()
        self._toolbar.setMovable(False)
        self._toolbar.setToolButtonStyle(Qt.ToolButtonStyle.ToolButtonTextBesideIcon)
        self._toolbar.setStyleSheet("""
            QToolBar {
                background-color: #2a2a2a;
                border-bottom: 1px solid #3a3a3a;
                padding: 6px 8px;
                spacing: 4px;
            }
            QToolButton {
                background-color: transparent;
                color: #ddd;
                border: none;
                border-radius: 8px;
                padding: 6px 8px;
                margin: 2px;
                min-height: 32px;
            }
            QToolButton:hover {
                background-color: rgba(255, 255, 255, 0.1);
            }
            QToolButton:pressed {
                background-color: rgba(255, 255, 255, 0.15);
            }
            QToolButton:disabled {
                color: #777;
            }
        """)

        self._undo_btn = self._add_button("Undo", "undo", self.undo)
        self._redo_btn = self._add_button("Redo", "redo", self.redo)
        self._clear_btn = self._add_button("Clear", "clear", self.clear)

        spacer = QWidget()
        spacer.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self._toolbar.addWidget(spacer)

        self._save_btn = self._add_button("Save", "save", self.save)

        main_layout.addWidget(self._toolbar)

        # ─── Center Content ───────────────────────────────────────────
        content = QHBoxLayout()
        content.setContentsMargins(12, 12, 12, 12)

        self._canvas = QuadCanvas(width, height)
        content.addWidget(self._canvas, 0, Qt.AlignmentFlag.AlignCenter)

        main_layout.addLayout(content, 1)

    def _add_button(self, text: str, icon_shape: str, slot) -> QToolButton:
        btn = QToolButton()
        btn.setText(text)
        btn.setIcon(_create_action_icon(icon_shape))
        btn.setToolTip(text)
        btn.clicked.connect(slot)
        self._toolbar.addWidget(btn)
        return btn

    # ─── Handler Registration ─────────────────────────────────────────────

    def _attach_handlers(self) -> None:
        """Connect canvas pointer signals to the editor."""
        if self._canvas is None or self._canvas.surface.isNull():
            self._logger.warning("Canvas not ready; pointer handlers not attached")
            return

        self._canvas.pointer_pressed.connect(self._on_pointer_pressed)
        self._canvas.pointer_moved.connect(self._on_pointer_moved)
        self._canvas.pointer_released.connect(self._on_pointer_released)
        self._editor.add_listener(self._on_editor_changed)
        self._handlers_attached = True
        self._logger.debug("Pointer handlers attached")

    def teardown(self) -> None:
        """Disconnect every handler so no callback outlives the canvas."""
        if not self._handlers_attached:
            return

        self._canvas.pointer_pressed.disconnect(self._on_pointer_pressed)
        self._canvas.pointer_moved.disconnect(self._on_pointer_moved)
        self._canvas.pointer_released.disconnect(self._on_pointer_released)
        self._editor.remove_listener(self._on_editor_changed)
        self._handlers_attached = False
        self._logger.debug("Pointer handlers detached")

    @property
    def handlers_attached(self) -> bool:
        return self._handlers_attached

    # ─── Accessors ────────────────────────────────────────────────────────

    @property
    def canvas(self) -> Optional[QuadCanvas]:
        return self._canvas

    @property
    def editor(self) -> QuadEditor:
        return self._editor

    @property
    def undo_button(self) -> QToolButton:
        return self._undo_btn

    @property
    def redo_button(self) -> QToolButton:
        return self._redo_btn

    # ─── Signal Handlers ──────────────────────────────────────────────────

    @Slot(QPointF)
    def _on_pointer_pressed(self, pos: QPointF) -> None:
        self._editor.pointer_down(Point(pos.x(), pos.y()))

    @Slot(QPointF)
    def _on_pointer_moved(self, pos: QPointF) -> None:
        self._editor.pointer_move(Point(pos.x(), pos.y()))

    @Slot(QPointF)
    def _on_pointer_released(self, pos: QPointF) -> None:
        self._editor.pointer_up(Point(pos.x(), pos.y()))

    def _on_editor_changed(self, editor: QuadEditor) -> None:
        self._canvas.redraw(editor.quad)
        self._update_actions()

    def _update_actions(self) -> None:
        self._undo_btn.setEnabled(self._editor.can_undo)
        self._redo_btn.setEnabled(self._editor.can_redo)

    # ─── Commands ─────────────────────────────────────────────────────────

    @Slot()
    def undo(self) -> None:
        self._editor.undo()

    @Slot()
    def redo(self) -> None:
        self._editor.redo()

    @Slot()
    def clear(self) -> None:
        self._editor.clear()

    def set_background(self, image: QImage) -> None:
        """Hand the loaded background image to the canvas."""
        self._canvas.set_background(image)

    @Slot()
    def save(self) -> Optional[Path]:
        """
        Export the canvas as PNG under the fixed export file name.

        Returns:
            The written file path, or None if the file could not be written.
        """
        if self._config:
            save_folder = Path(self._config.default_save_folder)
            filename = self._config.export_filename
        else:
            save_folder = Path.home() / "Pictures" / "QuadMark"
            filename = "canvas_image.png"

        data = self._canvas.export_png()
        if not data:
            return None

        filepath = save_folder / filename
        try:
            save_folder.mkdir(parents=True, exist_ok=True)
            filepath.write_bytes(data)
        except OSError as e:
            self._logger.error(f"Failed to save to {filepath}: {e}")
            return None

        self._logger.info(f"Saved to {filepath}")
        return filepath
