"""Periodic driving force."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class ExternalForce:
    amplitude: float
    angular_frequency: float

    def force(self, t: float) -> float:
        # Phase comes from absolute time, so a frequency change jumps phase.
        return self.amplitude * math.sin(self.angular_frequency * t)

    def set_frequency(self, angular_frequency: float) -> None:
        self.angular_frequency = float(angular_frequency)
