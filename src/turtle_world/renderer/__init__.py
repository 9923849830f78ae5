"""Renderer package for Turtle World."""

from __future__ import annotations

from .base import Canvas, TEXT_ALIGNMENTS
from .headless import RecordingCanvas
from .raster import RasterCanvas, load_font

__all__ = [
    "Canvas",
    "TEXT_ALIGNMENTS",
    "RecordingCanvas",
    "RasterCanvas",
    "load_font",
]
