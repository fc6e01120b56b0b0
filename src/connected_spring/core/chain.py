"""Two bodies coupled in series between two fixed anchors."""

from __future__ import annotations

from dataclasses import dataclass

from .forces import Damper, ExternalForce, Spring
from .state import Body, SimulationClock


@dataclass(slots=True)
class Chain:
    """anchor --s1-- b1 --s2-- b2 --s3-- anchor at ``bound``.

    b1 carries damper d1 and the external force, b2 carries damper d2.
    Body ordering is not enforced; the bodies may cross each other or the
    anchors, and the springs then see negative lengths.
    """
    b1: Body
    b2: Body
    s1: Spring
    s2: Spring
    s3: Spring
    d1: Damper
    d2: Damper
    external: ExternalForce
    bound: float

    def __post_init__(self) -> None:
        if not self.bound > 0:
            raise ValueError("bound must be > 0")

    def spring_lengths(self) -> tuple[float, float, float]:
        return (
            self.b1.position,
            self.b2.position - self.b1.position,
            self.bound - self.b2.position,
        )

    def net_forces(self, t: float) -> tuple[float, float]:
        """Net force on each body for the current (pre-step) state."""
        l1, l2, l3 = self.spring_lengths()
        f1 = (
            self.external.force(t)
            + self.s1.force(l1, True)
            + self.s2.force(l2, False)
            + self.d1.force(self.b1.velocity)
        )
        f2 = (
            self.s2.force(l2, True)
            + self.s3.force(l3, False)
            + self.d2.force(self.b2.velocity)
        )
        return f1, f2

    def step(self, clock: SimulationClock) -> None:
        # Both forces come from the same pre-step state; no sequential update.
        f1, f2 = self.net_forces(clock.elapsed_time)
        self.b1.integrate(f1, clock.dt)
        self.b2.integrate(f2, clock.dt)
        clock.advance()

    def copy(self) -> "Chain":
        return Chain(
            b1=self.b1.copy(),
            b2=self.b2.copy(),
            s1=self.s1,
            s2=self.s2,
            s3=self.s3,
            d1=self.d1,
            d2=self.d2,
            external=ExternalForce(
                amplitude=self.external.amplitude,
                angular_frequency=self.external.angular_frequency,
            ),
            bound=self.bound,
        )
