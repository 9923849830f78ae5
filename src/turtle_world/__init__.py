"""Turtle World: animated turtle graphics on a shared raster surface."""

from __future__ import annotations

from .color import normalize_color
from .config import AnimationConfig, SurfaceConfig, SPEED_PRESETS
from .engine import Surface, Scheduler, CommandQueue, FrameLoop
from .app import Turtle, turtle_on_new_surface, expose
from .renderer import RasterCanvas, RecordingCanvas

__version__ = "0.1.0"

__all__ = [
    "normalize_color",
    "AnimationConfig",
    "SurfaceConfig",
    "SPEED_PRESETS",
    "Surface",
    "Scheduler",
    "CommandQueue",
    "FrameLoop",
    "Turtle",
    "turtle_on_new_surface",
    "expose",
    "RasterCanvas",
    "RecordingCanvas",
]
