"""Command records placed on a surface's queue."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from turtle_world.engine.agent_state import TurtleState


class CommandKind(Enum):
    """Kinds of queued commands."""

    # Animated
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"
    GOTO = "goto"
    CIRCLE = "circle"

    # Instantaneous
    SETHEADING = "setheading"
    PENCOLOR = "pencolor"
    FILLCOLOR = "fillcolor"
    COLOR = "color"
    PENSIZE = "pensize"
    PENUP = "penup"
    PENDOWN = "pendown"
    BEGIN_FILL = "begin_fill"
    END_FILL = "end_fill"
    HIDETURTLE = "hideturtle"
    SHOWTURTLE = "showturtle"
    SHAPE = "shape"
    CLEAR = "clear"
    RESET = "reset"
    WRITE = "write"
    DOT = "dot"

    # Surface scoped
    BGCOLOR = "bgcolor"

    @property
    def is_surface_scoped(self) -> bool:
        """Whether this kind targets the surface rather than a turtle."""
        return self is CommandKind.BGCOLOR


@dataclass
class Command:
    """One queued unit of turtle or surface intent."""

    agent: Optional[TurtleState]
    kind: CommandKind
    args: tuple[Any, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        owner = self.agent.name if self.agent is not None else "surface"
        return f"Command({owner}, {self.kind.value}, {self.args!r})"
