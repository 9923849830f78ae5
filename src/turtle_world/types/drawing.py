"""Drawing history types recorded by each turtle."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NamedTuple, Optional, Tuple

RGB = Tuple[int, int, int]


class Font(NamedTuple):
    """Font description used by text writings."""

    name: str = "Arial"
    size: float = 8
    style: str = "normal"


@dataclass
class Point:
    """2D point in surface pixel coordinates (origin top-left, y down)."""

    x: float
    y: float


@dataclass
class PenState:
    """Pen configuration of a turtle."""

    is_down: bool = True
    color: Optional[RGB] = (0, 0, 0)
    fill_color: Optional[RGB] = (0, 0, 0)
    width: float = 1
    is_filling: bool = False

    def copy(self) -> "PenState":
        """Create a value copy of this pen state."""
        return replace(self)


@dataclass
class PathSegment:
    """A contiguous run of points drawn with one pen snapshot."""

    pen: PenState
    points: list[Point] = field(default_factory=list)

    @property
    def is_strokable(self) -> bool:
        """Whether this segment produces visible ink."""
        return self.pen.is_down and len(self.points) >= 2


@dataclass
class Fill:
    """A closed region captured between begin_fill and end_fill."""

    path: list[Point]
    color: Optional[RGB]


@dataclass(frozen=True)
class Writing:
    """Text written at a fixed position."""

    text: str
    x: float
    y: float
    align: str
    font: Font
    color: Optional[RGB]


@dataclass(frozen=True)
class Dot:
    """A filled circle stamped at a position."""

    x: float
    y: float
    size: float
    color: Optional[RGB]


@dataclass
class DrawingHistory:
    """Everything a turtle has drawn so far."""

    segments: list[PathSegment] = field(default_factory=list)
    fills: list[Fill] = field(default_factory=list)
    writings: list[Writing] = field(default_factory=list)
    dots: list[Dot] = field(default_factory=list)

    def clear(self) -> None:
        """Truncate every container to empty."""
        self.segments.clear()
        self.fills.clear()
        self.writings.clear()
        self.dots.clear()
