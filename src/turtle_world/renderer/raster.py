"""Pillow-backed raster canvas."""

from __future__ import annotations

import math
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from turtle_world.types import RGB, Font

# Canvas fonts are sized in points; Pillow wants pixels.
POINTS_TO_PIXELS = 96 / 72

_ANCHOR_H = {"left": "l", "start": "l", "center": "m", "right": "r", "end": "r"}
_ANCHOR_V = {"top": "t", "middle": "m", "alphabetic": "s", "bottom": "d"}

Matrix = tuple[float, float, float, float, float, float]
IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


@lru_cache(maxsize=64)
def load_font(name: str, size_px: int, style: str = "normal") -> ImageFont.FreeTypeFont:
    """Load a TrueType font by family name, falling back to Pillow's bundled font.

    Args:
        name: Font family, e.g. "Arial".
        size_px: Pixel size.
        style: "normal", "bold", "italic" or "bold italic".

    Returns:
        A font usable with ImageDraw.text().
    """
    suffix = {"bold": " Bold", "italic": " Italic", "bold italic": " Bold Italic"}.get(style, "")
    for candidate in (f"{name}{suffix}.ttf", f"{name}.ttf", name):
        try:
            return ImageFont.truetype(candidate, size_px)
        except OSError:
            continue
    return ImageFont.load_default(size=size_px)


class RasterCanvas:
    """Renders canvas primitives into a Pillow RGBA image.

    Keeps a 2D affine transform and style stack so markers can be drawn with
    save/translate/rotate/restore like a browser 2D context.
    """

    def __init__(self, width: int = 1000, height: int = 800):
        """Initialize the canvas.

        Args:
            width: Width in pixels.
            height: Height in pixels.
        """
        self.width = width
        self.height = height

        # Frame buffer
        self.image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
        self.draw = ImageDraw.Draw(self.image)

        # Styles
        self.fill_style: Optional[RGB] = (0, 0, 0)
        self.stroke_style: Optional[RGB] = (0, 0, 0)
        self.line_width: float = 1
        self.font = Font()
        self.text_align = "left"
        self.text_baseline = "alphabetic"

        self._matrix: Matrix = IDENTITY
        self._stack: list[tuple] = []
        self._subpaths: list[list[tuple[float, float]]] = []
        self._closed: list[bool] = []

    # --- transforms -------------------------------------------------------

    def _apply(self, x: float, y: float) -> tuple[float, float]:
        a, b, c, d, e, f = self._matrix
        return (a * x + c * y + e, b * x + d * y + f)

    def save(self) -> None:
        self._stack.append((
            self._matrix,
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.font,
            self.text_align,
            self.text_baseline,
        ))

    def restore(self) -> None:
        if not self._stack:
            return
        (
            self._matrix,
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.font,
            self.text_align,
            self.text_baseline,
        ) = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        a, b, c, d, e, f = self._matrix
        self._matrix = (a, b, c, d, e + a * x + c * y, f + b * x + d * y)

    def rotate(self, angle: float) -> None:
        """Rotate clockwise by ``angle`` radians (y axis points down)."""
        a, b, c, d, e, f = self._matrix
        cos, sin = math.cos(angle), math.sin(angle)
        self._matrix = (
            a * cos + c * sin,
            b * cos + d * sin,
            -a * sin + c * cos,
            -b * sin + d * cos,
            e,
            f,
        )

    # --- rectangles -------------------------------------------------------

    def _device_box(self, x: float, y: float, w: float, h: float) -> list[float]:
        corners = [self._apply(x, y), self._apply(x + w, y + h)]
        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        return [min(xs), min(ys), max(xs) - 1, max(ys) - 1]

    def clear_rect(self, x: float, y: float, w: float, h: float) -> None:
        self.draw.rectangle(self._device_box(x, y, w, h), fill=(0, 0, 0, 0))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        if self.fill_style is None:
            return
        self.draw.rectangle(self._device_box(x, y, w, h), fill=(*self.fill_style, 255))

    # --- paths ------------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []
        self._closed = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._apply(x, y)])
        self._closed.append(False)

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self._apply(x, y))

    def close_path(self) -> None:
        if not self._subpaths:
            return
        self._closed[-1] = True
        first = self._subpaths[-1][0]
        self._subpaths.append([first])
        self._closed.append(False)

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        sweep = end - start
        steps = max(8, int(abs(sweep) * max(radius, 1) / 2))
        for i in range(steps + 1):
            t = start + sweep * i / steps
            self.line_to(x + radius * math.cos(t), y + radius * math.sin(t))

    def fill(self) -> None:
        if self.fill_style is None:
            return
        for points in self._subpaths:
            if len(points) >= 3:
                self.draw.polygon(points, fill=(*self.fill_style, 255))

    def stroke(self) -> None:
        if self.stroke_style is None:
            return
        width = max(1, int(round(self.line_width)))
        for points, closed in zip(self._subpaths, self._closed):
            if len(points) < 2:
                continue
            line = points + [points[0]] if closed else points
            self.draw.line(line, fill=(*self.stroke_style, 255), width=width, joint="curve")

    # --- text -------------------------------------------------------------

    def _pil_font(self) -> ImageFont.FreeTypeFont:
        font = self.font
        size_px = max(1, int(round(font.size * POINTS_TO_PIXELS)))
        return load_font(font.name, size_px, font.style)

    def measure_text(self, text: str) -> float:
        return float(self.draw.textlength(text, font=self._pil_font()))

    def fill_text(self, text: str, x: float, y: float) -> None:
        if self.fill_style is None:
            return
        anchor = _ANCHOR_H.get(self.text_align, "l") + _ANCHOR_V.get(self.text_baseline, "s")
        self.draw.text(
            self._apply(x, y),
            text,
            fill=(*self.fill_style, 255),
            font=self._pil_font(),
            anchor=anchor,
        )

    # --- output -----------------------------------------------------------

    def snapshot(self) -> np.ndarray:
        """Copy the current pixels into an (height, width, 4) uint8 array."""
        return np.array(self.image, dtype=np.uint8)

    def save_image(self, path: Union[str, Path]) -> Path:
        """Write the frame buffer to disk (format from the file extension)."""
        output = Path(path)
        self.image.save(output)
        return output
