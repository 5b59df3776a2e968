"""
Quadrilateral model for the QuadMark editor.

A Quadrilateral is an immutable value with four named corners. No geometric
constraint is enforced: after corner dragging the shape may be non-convex or
self-intersecting.

Two construction strategies exist and are kept separate:
- from_anchor(): rebuilds the whole axis-aligned rectangle from a fixed
  top-left anchor and the live pointer position (used while drawing)
- with_corner_moved(): replaces exactly one corner (used while dragging)
"""

from dataclasses import dataclass, replace
from typing import Tuple

from quadmark.editor.geometry import Corner, Point


@dataclass(frozen=True)
class Quadrilateral:
    """Four-corner shape in canvas pixel coordinates."""
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point

    @classmethod
    def degenerate(cls, point: Point) -> "Quadrilateral":
        """Create a zero-area seed shape with every corner at `point`."""
        return cls(point, point, point, point)

    @classmethod
    def from_anchor(cls, anchor: Point, current: Point) -> "Quadrilateral":
        """
        Build an axis-aligned rectangle from a top-left anchor.

        The shape is derived fresh from the two points every time, so it
        stays axis-aligned no matter how many pointer moves precede it.
        """
        return cls(
            top_left=anchor,
            top_right=Point(current.x, anchor.y),
            bottom_left=Point(anchor.x, current.y),
            bottom_right=current,
        )

    def corner(self, corner: Corner) -> Point:
        """Return the point of a named corner."""
        return getattr(self, corner.value)

    def corners(self) -> Tuple[Point, Point, Point, Point]:
        """Return all corners in declaration order."""
        return tuple(self.corner(c) for c in Corner)

    def with_corner_moved(self, corner: Corner, point: Point) -> "Quadrilateral":
        """Return a copy with exactly one corner replaced."""
        return replace(self, **{corner.value: point})

    def outline(self) -> Tuple[Point, Point, Point, Point]:
        """Return the closed outline path order: TL, TR, BR, BL."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)
