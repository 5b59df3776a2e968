"""Tests for scene rendering and PNG export."""

import pytest
from PySide6.QtGui import QColor, QImage

from quadmark.editor import renderer
from quadmark.editor.geometry import Point
from quadmark.editor.quadrilateral import Quadrilateral


RECT = Quadrilateral.from_anchor(Point(100, 100), Point(200, 150))


def color_at(image, x, y):
    return image.pixelColor(x, y).name()


@pytest.fixture
def target(qapp):
    image = QImage(800, 600, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0))
    return image


def test_background_stretches_to_fill(target, background):
    renderer.render(target, background, None)
    for x, y in [(5, 5), (400, 300), (790, 590), (795, 10)]:
        assert color_at(target, x, y) == background.pixelColor(0, 0).name()


def test_no_shape_draws_background_only(target, background):
    renderer.render(target, background, None)
    assert color_at(target, 100, 100) == background.pixelColor(0, 0).name()
    assert color_at(target, 150, 100) == background.pixelColor(0, 0).name()


def test_handles_drawn_on_every_corner(target, background):
    renderer.render(target, background, RECT)
    for point in RECT.corners():
        assert color_at(target, int(point.x), int(point.y)) == renderer.HANDLE_COLOR.name()


def test_outline_stroked(target, background):
    renderer.render(target, background, RECT)
    # Midpoints of the top, right, bottom and left edges
    for x, y in [(150, 100), (200, 125), (150, 150), (100, 125)]:
        assert color_at(target, x, y) == renderer.STROKE_COLOR.name()


def test_interior_shows_background(target, background):
    renderer.render(target, background, RECT)
    assert color_at(target, 150, 125) == background.pixelColor(0, 0).name()


def test_rerender_overwrites_previous_shape(target, background):
    renderer.render(target, background, RECT)
    renderer.render(target, background, None)
    assert color_at(target, 100, 100) == background.pixelColor(0, 0).name()


def test_export_png_round_trip(target, background):
    renderer.render(target, background, RECT)
    data = renderer.export_png(target)

    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    decoded = QImage.fromData(data)
    assert decoded.size() == target.size()
    assert color_at(decoded, 100, 100) == renderer.HANDLE_COLOR.name()
