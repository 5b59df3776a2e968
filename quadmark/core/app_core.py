"""
Application core for QuadMark.

This module contains the AppCore class which is responsible for:
- Initializing services (config, logging)
- Applying global styling (dark theme)
- Creating and showing the main window
- Fetching the background image and handing it to the editor
"""

from typing import Optional

from PySide6.QtCore import QObject, Slot
from PySide6.QtGui import QColor, QImage, QPalette
from PySide6.QtWidgets import QApplication

from quadmark.core.image_loader import BackgroundLoader
from quadmark.services.config_service import ConfigService
from quadmark.services.logging_service import get_logger, setup_logging
from quadmark.ui.main_window import MainWindow


class AppCore(QObject):
    """
    Central application core that wires together all components.

    The startup flow:
    1. Load configuration
    2. Show the editor window immediately (interaction works before the
       background arrives; drawing is deferred until it does)
    3. Fetch the background image asynchronously
    4. On success, hand the image to the editor canvas
    """

    def __init__(
        self,
        app: QApplication,
        config_service: Optional[ConfigService] = None,
    ) -> None:
        """
        Initialize the application core.

        Args:
            app: The QApplication instance.
            config_service: Optional pre-built config service.
        """
        super().__init__()
        self._app = app

        self._config_service: Optional[ConfigService] = config_service
        self._loader: Optional[BackgroundLoader] = None
        self._main_window: Optional[MainWindow] = None

        self._init_services()
        self._apply_dark_theme()
        self._init_ui()
        self._connect_signals()
        self._load_background()

    def _init_services(self) -> None:
        """Initialize all application services."""
        setup_logging()
        self._logger = get_logger(__name__)
        self._logger.info("Initializing QuadMark application core...")

        if self._config_service is None:
            self._config_service = ConfigService()
        self._logger.info(f"Theme from config: {self._config_service.theme}")

        self._loader = BackgroundLoader(self)

    def _apply_dark_theme(self) -> None:
        """Dark palette for the window, canvas frame and toolbar buttons."""
        palette = QPalette()
        palette.setColor(QPalette.ColorRole.Window, QColor(45, 45, 45))
        palette.setColor(QPalette.ColorRole.WindowText, QColor(220, 220, 220))
        palette.setColor(QPalette.ColorRole.Button, QColor(55, 55, 55))
        palette.setColor(QPalette.ColorRole.ButtonText, QColor(220, 220, 220))
        # Undo/Redo with nothing to step through
        palette.setColor(
            QPalette.ColorGroup.Disabled,
            QPalette.ColorRole.ButtonText,
            QColor(127, 127, 127)
        )
        self._app.setPalette(palette)
        self._logger.debug("Dark palette applied")

    def _init_ui(self) -> None:
        """Create and show the main window."""
        self._main_window = MainWindow(self._config_service)
        self._main_window.show()
        self._logger.info("Main window shown")

    def _connect_signals(self) -> None:
        if self._loader:
            self._loader.loaded.connect(self._on_background_loaded)
            self._loader.failed.connect(self._on_background_failed)

        self._logger.debug("All signals connected")

    def _load_background(self) -> None:
        if self._loader and self._config_service:
            self._loader.load(self._config_service.background_url)

    # ─── Background Image ─────────────────────────────────────────────────

    @Slot(QImage)
    def _on_background_loaded(self, image: QImage) -> None:
        if self._main_window:
            self._main_window.set_background(image)

    @Slot(str)
    def _on_background_failed(self, message: str) -> None:
        # The canvas keeps showing its placeholder
        self._logger.warning(f"Continuing without background image: {message}")

    # ─── Application Lifecycle ────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean shutdown."""
        self._logger.info("Shutting down QuadMark...")

        if self._main_window:
            self._main_window.close()

        QApplication.quit()
