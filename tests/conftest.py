"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Callable

import pytest

from turtle_world.app import Turtle
from turtle_world.engine import Surface
from turtle_world.renderer import RasterCanvas, RecordingCanvas


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        self.now += dt
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Create a synthetic clock starting at zero."""
    return FakeClock()


@pytest.fixture
def canvas() -> RecordingCanvas:
    """Create a 400x300 recording canvas."""
    return RecordingCanvas(400, 300)


@pytest.fixture
def surface(canvas, clock) -> Surface:
    """Create a surface on the recording canvas driven by the fake clock."""
    surface = Surface(canvas, clock=clock)
    surface.frame_loop.sleep = clock.advance
    return surface


@pytest.fixture
def turtle(surface) -> Turtle:
    """Create a turtle on the recording surface."""
    return surface.create_turtle(name="t1")


@pytest.fixture
def raster_surface(clock) -> Surface:
    """Create a small Pillow-backed surface."""
    surface = Surface(RasterCanvas(120, 90), clock=clock)
    surface.frame_loop.sleep = clock.advance
    return surface


@pytest.fixture
def drain(clock) -> Callable[..., int]:
    """Tick a surface's scheduler with synthetic time until its queue is empty."""

    def _drain(surface: Surface, dt: float = 1 / 60, max_ticks: int = 100_000) -> int:
        ticks = 0
        while not surface.scheduler.idle:
            surface.scheduler.tick(clock.advance(dt))
            ticks += 1
            if ticks > max_ticks:
                raise AssertionError("command queue did not drain")
        return ticks

    return _drain
