"""
Background image loader for QuadMark.

Fetches the background image asynchronously with QNetworkAccessManager.
Both remote URLs and local paths are accepted (local paths become file://
URLs). Completion is reported through signals so the canvas can defer
drawing until the image is available.
"""

from typing import Optional

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QImage
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkReply, QNetworkRequest

from quadmark.services.logging_service import get_logger


class BackgroundLoader(QObject):
    """
    Loads a single image from a URL.

    Signals:
        loaded: Emitted with the decoded QImage.
        failed: Emitted with an error message.
    """

    loaded = Signal(QImage)
    failed = Signal(str)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._manager = QNetworkAccessManager(self)
        self._reply: Optional[QNetworkReply] = None

    def load(self, url: str) -> None:
        """Start fetching `url`; any previous request is abandoned."""
        if self._reply is not None:
            self._reply.finished.disconnect(self._on_finished)
            self._reply.abort()
            self._reply.deleteLater()

        qurl = QUrl.fromUserInput(url)
        self._logger.info(f"Loading background image from {qurl.toString()}")

        self._reply = self._manager.get(QNetworkRequest(qurl))
        self._reply.finished.connect(self._on_finished)

    def _on_finished(self) -> None:
        reply = self._reply
        self._reply = None
        if reply is None:
            return

        try:
            if reply.error() != QNetworkReply.NetworkError.NoError:
                message = reply.errorString()
                self._logger.error(f"Background image request failed: {message}")
                self.failed.emit(message)
                return

            image = QImage()
            if not image.loadFromData(reply.readAll()):
                self._logger.error("Background image data could not be decoded")
                self.failed.emit("Could not decode image data")
                return

            self._logger.info(f"Background image loaded: {image.width()}x{image.height()}")
            self.loaded.emit(image)
        finally:
            reply.deleteLater()
