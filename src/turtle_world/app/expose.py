"""Copy a turtle's drawing methods onto another object."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from turtle_world.app.turtle import Turtle

logger = logging.getLogger(__name__)

TURTLE_METHODS = (
    "forward", "fd", "backward", "bk", "right", "rt", "left", "lt",
    "goto", "setpos", "penup", "pu", "up", "pendown", "pd", "down",
    "pensize", "width", "pencolor", "hideturtle", "ht",
    "showturtle", "st", "clear", "reset", "pos", "position",
    "speed", "circle", "dot", "fillcolor", "color", "begin_fill", "end_fill",
    "shape", "write",
    "home", "setheading", "seth",
)

SCREEN_METHODS = ("bgcolor",)


def expose(turtle: Turtle, target: Any) -> bool:
    """Bind the turtle's methods (and the screen's) onto ``target``.

    ``target`` may be a mapping such as ``globals()`` or any object that
    accepts attribute assignment. ``turtle`` and ``screen`` entries are added
    as well.

    Args:
        turtle: The turtle whose methods are exposed.
        target: Where to put them.

    Returns:
        True if the methods were exposed, False if the target was rejected.
    """
    bindings: dict[str, Any] = {}
    for name in TURTLE_METHODS:
        bindings[name] = getattr(turtle, name)
    for name in SCREEN_METHODS:
        bindings[name] = getattr(turtle.screen, name)
    bindings["turtle"] = turtle
    bindings["screen"] = turtle.screen

    if isinstance(target, MutableMapping):
        target.update(bindings)
        return True

    try:
        for name, value in bindings.items():
            setattr(target, name, value)
    except (AttributeError, TypeError):
        logger.warning("expose() requires a valid target object, got %r", type(target).__name__)
        return False
    return True
