"""Diagnostics namespace."""

from .chain import (  # noqa: F401
    body1_energy,
    body2_energy,
    coupling_energy,
    damper_loss_rate,
    external_force_magnitude,
    spring_extensions,
    total_energy,
)
