"""Headless canvas that records drawing calls.

Used for testing and for inspecting paint order without a raster.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from turtle_world.types import RGB, Font

# Average glyph advance relative to the font size.
CHAR_WIDTH_RATIO = 0.6


class RecordingCanvas:
    """A canvas that logs every primitive call instead of painting.

    Each entry in ``calls`` is a tuple ``(name, *args)``. Fill, stroke and text
    calls also capture the style in effect so tests can assert on colors.
    """

    def __init__(self, width: int = 400, height: int = 300):
        """Initialize the recording canvas.

        Args:
            width: Surface width in pixels.
            height: Surface height in pixels.
        """
        self.width = width
        self.height = height
        self.fill_style: Optional[RGB] = (0, 0, 0)
        self.stroke_style: Optional[RGB] = (0, 0, 0)
        self.line_width: float = 1
        self.font = Font()
        self.text_align = "left"
        self.text_baseline = "alphabetic"

        self.calls: list[tuple[Any, ...]] = []
        self.saved_paths: list[Path] = []
        self._path: list[tuple[float, float]] = []
        self._stack: list[tuple] = []
        self._render_count = 0

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, *args))

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._render_count += 1
        self._record("clear_rect", x, y, w, h)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._record("fill_rect", x, y, w, h, self.fill_style)

    def begin_path(self) -> None:
        self._path = []
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._path.append((x, y))
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._path.append((x, y))
        self._record("line_to", x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        self._record("arc", x, y, radius, start, end)

    def fill(self) -> None:
        self._record("fill", self.fill_style, tuple(self._path))

    def stroke(self) -> None:
        self._record("stroke", self.stroke_style, self.line_width, tuple(self._path))

    def save(self) -> None:
        self._stack.append((self.fill_style, self.stroke_style, self.line_width, self.font))
        self._record("save")

    def restore(self) -> None:
        if self._stack:
            self.fill_style, self.stroke_style, self.line_width, self.font = self._stack.pop()
        self._record("restore")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def measure_text(self, text: str) -> float:
        return len(text) * self.font.size * CHAR_WIDTH_RATIO

    def fill_text(self, text: str, x: float, y: float) -> None:
        self._record("fill_text", text, x, y, self.fill_style, self.font, self.text_align)

    def save_image(self, path: Union[str, Path]) -> Path:
        output = Path(path)
        self.saved_paths.append(output)
        return output

    # --- inspection helpers ----------------------------------------------

    @property
    def render_count(self) -> int:
        """Number of full redraws seen (each starts with a clear)."""
        return self._render_count

    def reset_log(self) -> None:
        """Forget recorded calls."""
        self.calls.clear()

    def last_frame(self) -> list[tuple[Any, ...]]:
        """Calls recorded since the most recent clear_rect."""
        for index in range(len(self.calls) - 1, -1, -1):
            if self.calls[index][0] == "clear_rect":
                return self.calls[index:]
        return []

    def names(self, frame: Optional[list[tuple[Any, ...]]] = None) -> list[str]:
        """Call names of a frame (defaults to the last one)."""
        calls = self.last_frame() if frame is None else frame
        return [call[0] for call in calls]
