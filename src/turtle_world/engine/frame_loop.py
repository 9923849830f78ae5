"""Frame clock that ticks the scheduler."""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from turtle_world.engine.scheduler import Scheduler


class FrameLoop:
    """Host frame clock driving a scheduler, one tick per frame."""

    def __init__(
        self,
        scheduler: Scheduler,
        target_fps: int = 60,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize the frame loop.

        Args:
            scheduler: The scheduler to tick.
            target_fps: Target frames per second.
            clock: Monotonic time source in seconds.
            sleep: Blocking sleep used by run_until_idle().
        """
        self.scheduler = scheduler
        self.target_fps = target_fps
        self.target_frame_time = 1.0 / target_fps
        self.clock = clock
        self.sleep = sleep

        self._running = False
        self._frame_count = 0
        self._fps = 0.0
        self._fps_frames = 0
        self._fps_update_time = 0.0
        self._last_time = 0.0

    def start(self) -> None:
        """Start the loop."""
        self._running = True
        self._last_time = self.clock()

    def stop(self) -> None:
        """Stop the loop."""
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def fps(self) -> float:
        """Measured frames per second."""
        return self._fps

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def tick(self, now: Optional[float] = None) -> None:
        """Process a single frame.

        Args:
            now: Frame timestamp in seconds; defaults to the clock.
        """
        if now is None:
            now = self.clock()
        dt = max(0.0, now - self._last_time)
        self._last_time = now

        self.scheduler.tick(now)

        # Track FPS
        self._frame_count += 1
        self._fps_frames += 1
        self._fps_update_time += dt
        if self._fps_update_time >= 1.0:
            self._fps = self._fps_frames / self._fps_update_time
            self._fps_frames = 0
            self._fps_update_time = 0.0

    def process_frame(self) -> float:
        """Tick once and return the time spent doing it."""
        frame_start = self.clock()
        self.tick(frame_start)
        return self.clock() - frame_start

    def run_until_idle(self, max_frames: Optional[int] = None) -> int:
        """Tick until every queued command has finished.

        Args:
            max_frames: Optional safety limit on the number of frames.

        Returns:
            Number of frames processed.
        """
        if not self._running:
            self.start()
        frames = 0
        while self._running and not self.scheduler.idle:
            if max_frames is not None and frames >= max_frames:
                break
            spent = self.process_frame()
            frames += 1
            sleep_time = self.target_frame_time - spent
            if sleep_time > 0 and not self.scheduler.idle:
                self.sleep(sleep_time)
        return frames

    async def run_forever(self, until_idle: bool = False) -> None:
        """Tick on every frame until stopped.

        Args:
            until_idle: Return as soon as the queue has drained.
        """
        self.start()
        while self._running:
            if until_idle and self.scheduler.idle:
                break

            spent = self.process_frame()

            # Calculate sleep time to maintain target FPS
            sleep_time = max(0, self.target_frame_time - spent)
            await asyncio.sleep(sleep_time)
