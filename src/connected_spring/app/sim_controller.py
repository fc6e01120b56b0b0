"""Headless simulation context shared by the pacer, commands and viewport."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ..core.chain import Chain
from ..core.diagnostics import (
    body1_energy,
    body2_energy,
    coupling_energy,
    external_force_magnitude,
    spring_extensions,
    total_energy,
)
from ..core.history import EnergyHistory
from ..core.math.scaling import scale_down, scale_up
from ..core.state import SimulationClock
from ..io.scenario import ScenarioDefinition, default_scenario, scenario_to_runtime


logger = logging.getLogger(__name__)

MIN_HISTORY_CAPACITY = 2


@dataclass(slots=True)
class EnergyHistories:
    body1: EnergyHistory
    body2: EnergyHistory
    coupling: EnergyHistory
    total: EnergyHistory
    external_force: EnergyHistory

    @classmethod
    def create(cls, stride: int, capacity: int) -> "EnergyHistories":
        return cls(*(EnergyHistory(stride, capacity) for _ in range(5)))

    def all(self) -> tuple[EnergyHistory, ...]:
        return (self.body1, self.body2, self.coupling, self.total, self.external_force)


class SimulationContext:
    """Owns one chain, its clock and the energy histories.

    All mutation happens on the thread that drives the pacer; readers only
    look at the state between ticks.
    """

    def __init__(
        self,
        chain: Chain,
        clock: SimulationClock,
        frame_interval_ms: float,
        history_stride: int = 40,
        history_capacity: int = 2000,
    ) -> None:
        if frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")
        self.chain = chain
        self.clock = clock
        self.frame_interval_ms = float(frame_interval_ms)
        self.histories = EnergyHistories.create(history_stride, history_capacity)
        self.paused = False
        self.pin_scale = True
        self.pending_frequency = ""
        self.fps = 0
        self._graph_scale = 0.0
        self._initial_chain = chain.copy()
        self._initial_clock = clock.copy()

    @classmethod
    def from_scenario(cls, defn: ScenarioDefinition | None = None) -> "SimulationContext":
        runtime = scenario_to_runtime(defn if defn is not None else default_scenario())
        return cls(
            chain=runtime.chain,
            clock=runtime.clock,
            frame_interval_ms=runtime.frame_interval_ms,
            history_stride=runtime.history_stride,
            history_capacity=runtime.history_capacity,
        )

    @property
    def elapsed_time(self) -> float:
        return self.clock.elapsed_time

    @property
    def frequency(self) -> float:
        return self.chain.external.angular_frequency

    @property
    def amplitude(self) -> float:
        return self.chain.external.amplitude

    @property
    def history_capacity(self) -> int:
        return self.histories.total.capacity

    def step_once(self) -> None:
        self.chain.step(self.clock)
        h = self.histories
        h.body1.push(body1_energy(self.chain))
        h.body2.push(body2_energy(self.chain))
        h.coupling.push(coupling_energy(self.chain))
        h.total.push(total_energy(self.chain))
        # Sampled at the post-step time, like the energies above.
        h.external_force.push(external_force_magnitude(self.chain, self.clock.elapsed_time))

    def run_steps(self, count: int) -> int:
        for _ in range(count):
            self.step_once()
        return count

    def reset(self) -> None:
        self.chain = self._initial_chain.copy()
        self.clock = self._initial_clock.copy()
        for history in self.histories.all():
            history.clear()
        self._graph_scale = 0.0
        logger.info("simulation reset")

    def set_history_capacity(self, capacity: int) -> int:
        capacity = max(MIN_HISTORY_CAPACITY, int(capacity))
        for history in self.histories.all():
            history.capacity = capacity
        return capacity

    def increase_history(self) -> int:
        return self.set_history_capacity(scale_up(self.history_capacity, MIN_HISTORY_CAPACITY))

    def decrease_history(self) -> int:
        return self.set_history_capacity(scale_down(self.history_capacity, MIN_HISTORY_CAPACITY))

    def update_graph_scale(self) -> float:
        """Refresh the energy graph's vertical scale after a tick.

        Pinned: running maximum of the total energy ever shown. Unpinned:
        maximum of the current window only.
        """
        window_max = self.histories.total.max_over_window()
        if self.pin_scale:
            self._graph_scale = max(self._graph_scale, window_max)
        else:
            self._graph_scale = window_max
        return self._graph_scale

    @property
    def graph_scale(self) -> float:
        return self._graph_scale

    def body_positions(self) -> np.ndarray:
        return np.array([self.chain.b1.position, self.chain.b2.position], dtype=np.float64)

    def spring_extensions(self) -> tuple[float, float, float]:
        return spring_extensions(self.chain)

    def diagnostics(self) -> dict[str, float | int | bool | str]:
        return {
            "time": self.clock.elapsed_time,
            "frequency": self.frequency,
            "pending_frequency": self.pending_frequency,
            "amplitude": self.amplitude,
            "steps_per_tick": self.clock.steps_per_tick,
            "history_capacity": self.history_capacity,
            "energy": total_energy(self.chain),
            "fps": self.fps,
            "paused": self.paused,
            "pin_scale": self.pin_scale,
        }
