"""Point-mass body state and its fixed-step integration."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class Body:
    """One-dimensional point mass with kinetic (Coulomb) friction.

    acceleration is transient: it is overwritten by every call to
    integrate() before being used.
    """
    mass: float
    position: float
    velocity: float = 0.0
    friction: float = 0.0
    acceleration: float = 0.0

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.position = float(self.position)
        self.velocity = float(self.velocity)
        self.friction = float(self.friction)
        self.acceleration = float(self.acceleration)
        self.validate()

    def validate(self) -> None:
        if not self.mass > 0:
            raise ValueError("mass must be > 0")
        if self.friction < 0:
            raise ValueError("friction must be >= 0")

    def integrate(self, applied_force: float, dt: float) -> None:
        """Advance one step under a pre-summed net force."""
        self.acceleration = applied_force / self.mass
        self.position += dt * self.velocity + 0.5 * dt * dt * self.acceleration
        self.velocity += dt * self.acceleration
        self._apply_friction(dt)

    def _apply_friction(self, dt: float) -> None:
        # Fixed-magnitude impulse; snaps to rest instead of overshooting zero.
        if self.velocity == 0.0:
            return
        impulse = self.mass * self.friction * dt
        if abs(self.velocity) < abs(impulse):
            self.velocity = 0.0
        else:
            self.velocity -= math.copysign(impulse, self.velocity)

    def energy(self) -> float:
        return 0.5 * self.mass * self.velocity**2

    def copy(self) -> "Body":
        return Body(
            mass=self.mass,
            position=self.position,
            velocity=self.velocity,
            friction=self.friction,
            acceleration=self.acceleration,
        )
