"""Fixed-step simulation clock."""

from __future__ import annotations

from dataclasses import dataclass

from ..math.scaling import scale_down, scale_up


MIN_STEPS_PER_TICK = 2


def steps_for_interval(frame_interval_ms: float, dt: float) -> int:
    """Number of fixed steps that cover one frame interval of wall time."""
    if frame_interval_ms <= 0:
        raise ValueError("frame_interval_ms must be > 0")
    if dt <= 0:
        raise ValueError("dt must be > 0")
    return max(MIN_STEPS_PER_TICK, int(round(frame_interval_ms / 1000.0 / dt)))


@dataclass(slots=True)
class SimulationClock:
    dt: float
    steps_per_tick: int = MIN_STEPS_PER_TICK
    elapsed_time: float = 0.0

    def __post_init__(self) -> None:
        if self.dt <= 0:
            raise ValueError("dt must be > 0")
        self.steps_per_tick = max(MIN_STEPS_PER_TICK, int(self.steps_per_tick))

    @classmethod
    def for_frame_interval(cls, dt: float, frame_interval_ms: float) -> "SimulationClock":
        return cls(dt=dt, steps_per_tick=steps_for_interval(frame_interval_ms, dt))

    def advance(self) -> None:
        self.elapsed_time += self.dt

    def increase_steps(self) -> int:
        self.steps_per_tick = scale_up(self.steps_per_tick, MIN_STEPS_PER_TICK)
        return self.steps_per_tick

    def decrease_steps(self) -> int:
        self.steps_per_tick = scale_down(self.steps_per_tick, MIN_STEPS_PER_TICK)
        return self.steps_per_tick

    def copy(self) -> "SimulationClock":
        return SimulationClock(
            dt=self.dt,
            steps_per_tick=self.steps_per_tick,
            elapsed_time=self.elapsed_time,
        )
