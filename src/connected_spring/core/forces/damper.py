"""Linear viscous damper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Damper:
    coefficient: float

    def __post_init__(self) -> None:
        if self.coefficient < 0:
            raise ValueError("coefficient must be >= 0")

    def force(self, velocity: float) -> float:
        return -self.coefficient * velocity

    def energy_loss_rate(self, velocity: float) -> float:
        """Return the dissipated power. Not part of the total energy."""
        return self.coefficient * velocity**2
