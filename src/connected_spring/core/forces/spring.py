"""Linear (Hooke's law) spring."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Spring:
    natural_length: float
    stiffness: float

    def __post_init__(self) -> None:
        if self.natural_length <= 0:
            raise ValueError("natural_length must be > 0")
        if self.stiffness < 0:
            raise ValueError("stiffness must be >= 0")

    def force(self, length: float, is_left_side: bool) -> float:
        """Force on the body at one end of the spring.

        ``is_left_side`` is True when the spring lies to the left of the body
        receiving the force; a stretched spring then pulls it in the negative
        direction. Negative lengths are accepted as a compressed state.
        """
        sign = -1.0 if is_left_side else 1.0
        return (length - self.natural_length) * self.stiffness * sign

    def energy(self, length: float) -> float:
        return 0.5 * self.stiffness * (length - self.natural_length) ** 2
