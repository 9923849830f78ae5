"""Public application layer: the turtle facade and helpers."""

from __future__ import annotations

from .turtle import Turtle, turtle_on_new_surface
from .expose import expose, TURTLE_METHODS, SCREEN_METHODS

__all__ = [
    "Turtle",
    "turtle_on_new_surface",
    "expose",
    "TURTLE_METHODS",
    "SCREEN_METHODS",
]
