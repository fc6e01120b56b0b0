"""Energy and force diagnostics for a Chain."""

from __future__ import annotations

from ..chain import Chain


def body1_energy(chain: Chain) -> float:
    """Kinetic energy of b1 plus the anchor spring s1."""
    return chain.b1.energy() + chain.s1.energy(chain.b1.position)


def body2_energy(chain: Chain) -> float:
    """Kinetic energy of b2 plus the far anchor spring s3."""
    return chain.b2.energy() + chain.s3.energy(chain.bound - chain.b2.position)


def coupling_energy(chain: Chain) -> float:
    return chain.s2.energy(chain.b2.position - chain.b1.position)


def total_energy(chain: Chain) -> float:
    """Mechanical energy of the whole chain.

    Damper losses are not included, so this drifts down whenever the
    dampers or friction are active.
    """
    return body1_energy(chain) + body2_energy(chain) + coupling_energy(chain)


def external_force_magnitude(chain: Chain, t: float) -> float:
    return abs(chain.external.force(t))


def damper_loss_rate(chain: Chain) -> float:
    return chain.d1.energy_loss_rate(chain.b1.velocity) + chain.d2.energy_loss_rate(
        chain.b2.velocity
    )


def spring_extensions(chain: Chain) -> tuple[float, float, float]:
    """Length minus natural length for s1, s2, s3."""
    l1, l2, l3 = chain.spring_lengths()
    return (
        l1 - chain.s1.natural_length,
        l2 - chain.s2.natural_length,
        l3 - chain.s3.natural_length,
    )
