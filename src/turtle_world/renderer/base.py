"""The immediate-mode drawing surface the redraw engine paints onto."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from turtle_world.types import RGB, Font

# Text alignment values accepted by Canvas.text_align.
TEXT_ALIGNMENTS = ("left", "center", "right")


@runtime_checkable
class Canvas(Protocol):
    """Minimal 2D-context style drawing surface.

    Styles are plain attributes. Colors are RGB tuples; a ``None`` style makes
    the corresponding fill or stroke a no-op.
    """

    width: int
    height: int
    fill_style: Optional[RGB]
    stroke_style: Optional[RGB]
    line_width: float
    font: Font
    text_align: str
    text_baseline: str

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close_path(self) -> None: ...

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None: ...

    def fill(self) -> None: ...

    def stroke(self) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def measure_text(self, text: str) -> float: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...
