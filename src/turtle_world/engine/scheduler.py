"""Shared command queue and the per-frame scheduler."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Callable, Iterator, Optional

from turtle_world.types import Command
from .drivers import AnimationDriver, DriverState, make_driver

if TYPE_CHECKING:
    from turtle_world.engine.surface import Surface

logger = logging.getLogger(__name__)

Listener = Callable[[str, Command], None]


class CommandQueue:
    """FIFO buffer of commands shared by every turtle on a surface."""

    def __init__(self):
        self._commands: deque[Command] = deque()
        self.total_enqueued = 0

    def enqueue(self, command: Command) -> None:
        """Append a command to the tail of the queue."""
        self._commands.append(command)
        self.total_enqueued += 1

    def popleft(self) -> Command:
        return self._commands.popleft()

    def peek(self) -> Optional[Command]:
        return self._commands[0] if self._commands else None

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)


class Scheduler:
    """Drains a surface's queue one command at a time.

    ``tick`` is called once per frame by the host clock. Exactly one command is
    in flight across the whole surface at any moment, so commands from
    different turtles run strictly in enqueue order.
    """

    def __init__(self, surface: Surface, queue: CommandQueue):
        """Initialize the scheduler.

        Args:
            surface: The surface whose state the drivers mutate.
            queue: The shared command queue.
        """
        self.surface = surface
        self.queue = queue
        self._active: Optional[AnimationDriver] = None
        self._active_command: Optional[Command] = None
        self._listeners: list[Listener] = []
        self.tick_count = 0

    @property
    def busy(self) -> bool:
        """True while a command is in flight."""
        return self._active is not None

    @property
    def idle(self) -> bool:
        """True when nothing is in flight and nothing is waiting."""
        return not self.busy and len(self.queue) == 0

    @property
    def active_command(self) -> Optional[Command]:
        return self._active_command

    def enqueue(self, command: Command) -> None:
        self.queue.enqueue(command)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Subscribe to command lifecycle events.

        Args:
            listener: Called with ("started" | "completed", command).

        Returns:
            An unsubscribe function.
        """
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def tick(self, now: float) -> None:
        """Run one frame of the scheduler.

        Args:
            now: Monotonic time in seconds.
        """
        self.tick_count += 1

        if self._active is not None:
            self._advance(lambda driver: driver.step(now))
            return

        if not self.queue:
            return

        command = self.queue.popleft()
        self._active_command = command
        logger.debug("Starting %r", command)
        self._notify("started", command)

        def begin(_driver: Optional[AnimationDriver]) -> DriverState:
            self._active = make_driver(self.surface, command)
            return self._active.start(now)

        self._advance(begin)

    def _advance(self, run: Callable[[Optional[AnimationDriver]], DriverState]) -> None:
        # A failing command is dropped so the rest of the queue keeps flowing.
        try:
            state = run(self._active)
        except Exception:
            logger.exception("Command %r failed; skipping it", self._active_command)
            self._finish()
            return
        if state is DriverState.COMPLETE:
            self._finish()

    def _finish(self) -> None:
        command = self._active_command
        self._active = None
        self._active_command = None
        logger.debug("Completed %r", command)
        self._notify("completed", command)

    def _notify(self, event: str, command: Command) -> None:
        for listener in list(self._listeners):
            listener(event, command)
