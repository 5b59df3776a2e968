"""
QuadMark - draw and reshape a quadrilateral over an image.

This is the main entry point for the application.
Run with: python -m quadmark.app
"""

import signal
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from quadmark import __version__
from quadmark.core.app_core import AppCore
from quadmark.services.logging_service import get_logger, setup_logging


# Global references for signal handlers
_app: QApplication = None
_app_core: AppCore = None
_should_quit = False


def request_quit(signum, frame):
    """Handle termination signals; the Qt timer below performs the quit."""
    global _should_quit
    _should_quit = True


def check_for_quit():
    """Timer callback to check if we should quit."""
    if _should_quit:
        logger = get_logger(__name__)
        logger.info("Signal received, quitting...")

        if _app_core:
            _app_core.shutdown()
        elif _app:
            _app.quit()


def main() -> int:
    """
    Main entry point for QuadMark.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    global _app, _app_core

    # Initialize logging first to catch early errors
    setup_logging()
    logger = get_logger(__name__)

    try:
        logger.info("Starting QuadMark...")

        _app = QApplication(sys.argv)
        _app.setApplicationName("QuadMark")
        _app.setOrganizationName("QuadMark")
        _app.setApplicationVersion(__version__)

        signal.signal(signal.SIGINT, request_quit)
        signal.signal(signal.SIGTERM, request_quit)

        # Qt event loop blocks Python signals; poll for them
        quit_timer = QTimer()
        quit_timer.timeout.connect(check_for_quit)
        quit_timer.start(100)

        _app_core = AppCore(_app)

        logger.info("QuadMark initialization complete. Entering event loop...")

        exit_code = _app.exec()

        logger.info(f"QuadMark exiting with code {exit_code}")
        return exit_code

    except Exception as e:
        logger.critical(f"Fatal error during startup: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
