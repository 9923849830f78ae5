"""Configuration dataclasses for surfaces and animation timing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "SPEED_PRESETS",
    "AnimationConfig",
    "SurfaceConfig",
]

# Named speed levels accepted by Turtle.speed().
SPEED_PRESETS = {
    "fastest": 0,
    "fast": 10,
    "normal": 6,
    "slow": 3,
    "slowest": 1,
}


@dataclass(frozen=True)
class AnimationConfig:
    """Timing constants for the animation drivers.

    A move of ``d`` pixels at speed ``s`` lasts ``|d| / (s * linear_speed_factor)``
    seconds; a turn of ``a`` degrees lasts ``|a| / (s * rotational_speed_factor)``.
    Speed 0 always means no animation.
    """

    linear_speed_factor: float = 15.0
    rotational_speed_factor: float = 50.0
    # Speed used while an arc is being drawn (only when the turtle is animated).
    arc_speed: float = 10.0
    # Goto targets closer than this (pixels) are treated as no-ops.
    goto_epsilon: float = 0.01
    default_speed: float = 6.0
    min_speed: float = 0.5
    max_speed: float = 10.0

    def __post_init__(self) -> None:
        if self.linear_speed_factor <= 0 or self.rotational_speed_factor <= 0:
            raise ValueError("speed factors must be positive")


@dataclass(frozen=True)
class SurfaceConfig:
    """Default surface dimensions and frame rate."""

    width: int = 1000
    height: int = 800
    background: str = "#ffffff"
    target_fps: int = 60

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("surface dimensions must be positive")
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")
