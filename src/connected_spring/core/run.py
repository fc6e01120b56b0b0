"""Headless run loop with optional sampling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from .chain import Chain
from .diagnostics import total_energy
from .state import SimulationClock


@dataclass(slots=True)
class RunResult:
    final_chain: Chain
    final_time: float
    time: np.ndarray | None = None
    positions: np.ndarray | None = None
    velocities: np.ndarray | None = None
    energy: np.ndarray | None = None


def run(
    chain: Chain,
    clock: SimulationClock,
    steps: int,
    sample_every: int | None = None,
    callback: Callable[[int, Chain], None] | None = None,
) -> RunResult:
    if steps < 0:
        raise ValueError("steps must be >= 0")
    if sample_every is not None and sample_every <= 0:
        raise ValueError("sample_every must be > 0")

    times: list[float] = []
    pos: list[tuple[float, float]] = []
    vel: list[tuple[float, float]] = []
    energy: list[float] = []

    def sample() -> None:
        times.append(clock.elapsed_time)
        pos.append((chain.b1.position, chain.b2.position))
        vel.append((chain.b1.velocity, chain.b2.velocity))
        energy.append(total_energy(chain))

    if sample_every is not None:
        sample()

    for step in range(1, steps + 1):
        chain.step(clock)
        if callback is not None:
            callback(step, chain)
        if sample_every is not None and step % sample_every == 0:
            sample()

    if sample_every is None:
        return RunResult(final_chain=chain, final_time=clock.elapsed_time)

    return RunResult(
        final_chain=chain,
        final_time=clock.elapsed_time,
        time=np.asarray(times, dtype=np.float64),
        positions=np.asarray(pos, dtype=np.float64),
        velocities=np.asarray(vel, dtype=np.float64),
        energy=np.asarray(energy, dtype=np.float64),
    )
