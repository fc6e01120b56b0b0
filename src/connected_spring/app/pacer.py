"""Real-time tick pacing with drift correction."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

from .sim_controller import SimulationContext


logger = logging.getLogger(__name__)

FPS_WINDOW_MS = 1000.0
GRID_TOLERANCE_MS = 1e-6


def wall_clock_ms() -> float:
    return time.perf_counter() * 1000.0


def timer_delay_ms(delay: float) -> int:
    """Whole milliseconds for a timer that must not fire before the grid point."""
    return max(0, math.ceil(delay))


@dataclass(slots=True)
class PacerState:
    target_frame_interval_ms: float
    last_tick_wall_time: float = 0.0
    fps_window_start: float = 0.0
    fps_counter: int = 0
    fps: int = 0
    is_first_tick: bool = True


class Pacer:
    """Run ``steps_per_tick`` steps per tick and pick the next tick's delay.

    The caller owns the timer: it calls tick() and re-arms a single-shot
    timer with the returned delay in milliseconds, or stops when tick()
    returns None.
    """

    def __init__(
        self,
        context: SimulationContext,
        target_frame_interval_ms: float | None = None,
        clock: Callable[[], float] = wall_clock_ms,
        on_fps: Callable[[int], None] | None = None,
    ) -> None:
        interval = (
            context.frame_interval_ms
            if target_frame_interval_ms is None
            else float(target_frame_interval_ms)
        )
        if interval <= 0:
            raise ValueError("target_frame_interval_ms must be > 0")
        self.context = context
        self.state = PacerState(target_frame_interval_ms=interval)
        self._clock = clock
        self._on_fps = on_fps
        self._stopped = False

    @property
    def running(self) -> bool:
        return not self.state.is_first_tick and not self._stopped

    @property
    def stopped(self) -> bool:
        return self._stopped

    def stop(self) -> None:
        self._stopped = True

    def tick(self) -> float | None:
        if self._stopped:
            return None
        state = self.state

        if state.is_first_tick:
            now = self._clock()
            state.fps_window_start = now
            state.last_tick_wall_time = now
            state.is_first_tick = False
            return state.target_frame_interval_ms

        if not self.context.paused:
            self.context.run_steps(self.context.clock.steps_per_tick)
        self.context.update_graph_scale()

        now = self._clock()
        state.last_tick_wall_time = now
        state.fps_counter += 1
        if now - state.fps_window_start >= FPS_WINDOW_MS:
            state.fps = state.fps_counter
            state.fps_counter = 0
            state.fps_window_start = now
            self.context.fps = state.fps
            logger.debug("fps %d", state.fps)
            if self._on_fps is not None:
                self._on_fps(state.fps)

        return self.next_delay(now)

    def next_delay(self, now: float) -> float:
        """Delay to the next tick, aligned to the fps window base."""
        interval = self.state.target_frame_interval_ms
        residual = (now - self.state.fps_window_start) % interval
        if interval - residual < GRID_TOLERANCE_MS:
            residual = 0.0
        return max(0.0, interval - residual)
