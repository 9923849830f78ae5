"""Turtle marker shapes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Marker outlines in marker-local coordinates, +x pointing along the heading.
CLASSIC_OUTLINE = ((0, 0), (-10, -5), (-10, 5))
ARROW_OUTLINE = ((-10, 5), (0, 0), (-10, -5))
SQUARE_OUTLINE = ((5, 5), (5, -5), (-5, -5), (-5, 5))
TRIANGLE_OUTLINE = tuple((y, -x) for x, y in ((8, -7), (-8, -7), (0, 8)))
TURTLE_OUTLINE = (
    (10, 0), (8, -2), (9, -7), (7, -9), (0, -10), (-7, -9), (-9, -7), (-8, -2),
    (-10, 0), (-8, 2), (-9, 7), (-7, 9), (0, 10), (7, 9), (9, 7), (8, 2),
)

CIRCLE_MARKER_RADIUS = 7


@dataclass(frozen=True)
class Shape:
    """A named marker: either a polygon outline or a circle."""

    name: str
    outline: Optional[tuple[tuple[float, float], ...]] = None
    radius: float = CIRCLE_MARKER_RADIUS

    @property
    def is_circle(self) -> bool:
        return self.outline is None


DEFAULT_SHAPES: dict[str, Shape] = {
    "arrow": Shape("arrow", ARROW_OUTLINE),
    "turtle": Shape("turtle", TURTLE_OUTLINE),
    "circle": Shape("circle"),
    "square": Shape("square", SQUARE_OUTLINE),
    "triangle": Shape("triangle", TRIANGLE_OUTLINE),
    "classic": Shape("classic", CLASSIC_OUTLINE),
}
