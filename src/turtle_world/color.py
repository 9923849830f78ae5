"""Color argument normalization."""

from __future__ import annotations

from numbers import Real
from typing import Any, Optional

from PIL import ImageColor

from turtle_world.types import RGB


def _channel(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return max(0, min(255, int(round(value))))


def normalize_color(*args: Any) -> Optional[RGB]:
    """Turn heterogeneous color arguments into an ``(r, g, b)`` tuple.

    Accepts a color string (``"red"``, ``"#ff0000"``, ``"rgb(255, 0, 0)"``),
    a 3-element sequence, or three separate numbers. Anything else, including
    no arguments at all, yields ``None``.

    Args:
        *args: The raw color arguments.

    Returns:
        The canonical RGB tuple, or None if the arguments are not a color.
    """
    if not args:
        return None

    first = args[0]
    if isinstance(first, str):
        try:
            return ImageColor.getcolor(first.strip(), "RGB")
        except ValueError:
            return None

    if isinstance(first, (list, tuple)):
        triple = first
    elif len(args) == 3:
        triple = args
    else:
        return None

    if len(triple) != 3:
        return None
    channels = [_channel(v) for v in triple]
    if any(c is None for c in channels):
        return None
    return (channels[0], channels[1], channels[2])
