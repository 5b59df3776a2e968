"""
Main window for QuadMark.

Hosts the editor widget and tears its handlers down when the window closes.
"""

from typing import Optional

from PySide6.QtGui import QImage
from PySide6.QtWidgets import QMainWindow, QWidget

from quadmark.editor.editor_widget import EditorWidget
from quadmark.services.config_service import ConfigService
from quadmark.services.logging_service import get_logger


class MainWindow(QMainWindow):
    """
    Main application window for QuadMark.

    Contains the editor (toolbar + canvas) as its central widget.
    """

    def __init__(
        self,
        config_service: Optional[ConfigService] = None,
        parent: Optional[QWidget] = None
    ) -> None:
        """
        Initialize the MainWindow.

        Args:
            config_service: Optional config service for canvas size and export.
            parent: Optional parent widget.
        """
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._config = config_service
        self._editor: Optional[EditorWidget] = None

        self._setup_window()
        self._setup_central_widget()

        self._logger.info("MainWindow initialized")

    def _setup_window(self) -> None:
        self.setWindowTitle("QuadMark")

    def _setup_central_widget(self) -> None:
        self._editor = EditorWidget(self._config, self)
        self.setCentralWidget(self._editor)

    @property
    def editor(self) -> Optional[EditorWidget]:
        return self._editor

    def set_background(self, image: QImage) -> None:
        """
        Show a loaded background image in the editor.

        Args:
            image: The decoded background image.
        """
        if self._editor:
            self._editor.set_background(image)

    def closeEvent(self, event) -> None:
        """Detach editor handlers before the canvas goes away."""
        self._logger.info("MainWindow closing")
        if self._editor:
            self._editor.teardown()
        super().closeEvent(event)
