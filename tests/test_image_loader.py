"""Tests for the asynchronous background image loader."""

from PySide6.QtCore import QEventLoop, QTimer

from quadmark.core.image_loader import BackgroundLoader


def wait_for_result(loader, url, timeout_ms=5000):
    """Run a local event loop until the loader reports back."""
    results = {}
    loop = QEventLoop()

    def on_loaded(image):
        results["image"] = image
        loop.quit()

    def on_failed(message):
        results["error"] = message
        loop.quit()

    loader.loaded.connect(on_loaded)
    loader.failed.connect(on_failed)
    QTimer.singleShot(timeout_ms, loop.quit)

    loader.load(url)
    loop.exec()
    return results


def test_loads_local_file(qapp, background, tmp_path):
    path = tmp_path / "bg.png"
    assert background.save(str(path), "PNG")

    results = wait_for_result(BackgroundLoader(), str(path))

    assert "image" in results
    assert results["image"].width() == background.width()
    assert results["image"].height() == background.height()


def test_undecodable_data_fails(qapp, tmp_path):
    path = tmp_path / "bg.png"
    path.write_bytes(b"definitely not an image")

    results = wait_for_result(BackgroundLoader(), str(path))

    assert "error" in results
    assert "image" not in results


def test_missing_file_fails(qapp, tmp_path):
    results = wait_for_result(BackgroundLoader(), str(tmp_path / "missing.png"))
    assert "error" in results
