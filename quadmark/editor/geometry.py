"""
Geometry and hit-testing helpers for the QuadMark editor.

Points are immutable canvas-pixel coordinates. Corner hit-testing walks the
corners in their declaration order, so overlapping handles always resolve to
the earlier corner.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from quadmark.editor.quadrilateral import Quadrilateral


# Radius of a corner handle; also the hit-test tolerance
HANDLE_RADIUS = 6.0

# Draw gestures shorter than this are treated as a click and discarded
CANCEL_DISTANCE = 5.0


@dataclass(frozen=True)
class Point:
    """A point in canvas pixel coordinates."""
    x: float
    y: float


class Corner(Enum):
    """Corner keys of a quadrilateral, in hit-test order."""
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def find_corner_near(
    quad: "Quadrilateral",
    point: Point,
    tolerance: float = HANDLE_RADIUS,
) -> Optional[Corner]:
    """
    Find the corner handle under a point.

    Args:
        quad: The quadrilateral to test.
        point: The query point (canvas coordinates).
        tolerance: Maximum distance from a corner that still counts as a hit.

    Returns:
        The first corner, in declaration order, within tolerance of the
        point, or None if no corner qualifies.
    """
    for corner in Corner:
        if distance(quad.corner(corner), point) <= tolerance:
            return corner
    return None
