from __future__ import annotations

from pathlib import Path

import logging

import pytest

from connected_spring.core.chain import Chain
from connected_spring.core.forces import Damper, ExternalForce, Spring
from connected_spring.core.state import Body, SimulationClock


EXAMPLES_DIR = Path(__file__).resolve().parents[1] / "examples"


def make_chain(
    p1: float = 10.0,
    p2: float = 20.0,
    v1: float = 0.0,
    v2: float = 0.0,
    friction: float = 0.0,
    damping: float = 1.0,
    amplitude: float = 0.0,
    frequency: float = 0.0,
) -> Chain:
    return Chain(
        b1=Body(mass=10.0, position=p1, velocity=v1, friction=friction),
        b2=Body(mass=10.0, position=p2, velocity=v2, friction=friction),
        s1=Spring(natural_length=10.0, stiffness=10.0),
        s2=Spring(natural_length=10.0, stiffness=10.0),
        s3=Spring(natural_length=10.0, stiffness=10.0),
        d1=Damper(coefficient=damping),
        d2=Damper(coefficient=damping),
        external=ExternalForce(amplitude=amplitude, angular_frequency=frequency),
        bound=30.0,
    )


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("connected_spring")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock() -> SimulationClock:
    return SimulationClock(dt=0.001, steps_per_tick=17)


@pytest.fixture
def scenario_path() -> Path:
    return EXAMPLES_DIR / "scenarios" / "connected_spring_v1.json"
