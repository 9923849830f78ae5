"""Scheduling and redraw engine for Turtle World."""

from __future__ import annotations

from .agent_state import TurtleState
from .drivers import (
    DriverState,
    AnimationDriver,
    LinearMoveDriver,
    RotateDriver,
    ArcDriver,
    InstantDriver,
    make_driver,
    animation_duration,
    default_arc_steps,
)
from .scheduler import CommandQueue, Scheduler
from .frame_loop import FrameLoop
from .surface import Surface

__all__ = [
    "TurtleState",
    "DriverState",
    "AnimationDriver",
    "LinearMoveDriver",
    "RotateDriver",
    "ArcDriver",
    "InstantDriver",
    "make_driver",
    "animation_duration",
    "default_arc_steps",
    "CommandQueue",
    "Scheduler",
    "FrameLoop",
    "Surface",
]
