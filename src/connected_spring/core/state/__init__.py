"""State namespace."""

from .body import Body  # noqa: F401
from .clock import SimulationClock  # noqa: F401
