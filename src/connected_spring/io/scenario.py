"""Scenario I/O and adapters."""

from __future__ import annotations

import copy
import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np

from ..core.chain import Chain
from ..core.forces import Damper, ExternalForce, Spring
from ..core.state import Body, SimulationClock


logger = logging.getLogger(__name__)

ScenarioDefinition = dict[str, Any]

# Forcing frequencies of note for the symmetric default chain.
RESONANCE_PRESETS: dict[str, float] = {
    "bonding_resonance": 1.0,
    "anti_resonance": math.sqrt(2.0),
    "anti_bonding_resonance": math.sqrt(3.0),
}

_DEFAULT_SCENARIO: ScenarioDefinition = {
    "schema_version": 1,
    "metadata": {
        "name": "Connected Spring",
        "description": "Two masses, three springs, driven at the anti-bonding resonance.",
    },
    "simulation": {
        "dt": 0.001,
        "frame_interval_ms": 1000.0 / 60.0,
        "bound": 30.0,
    },
    "bodies": [
        {"mass": 10.0, "position": 10.0, "velocity": 0.0, "friction": 0.0},
        {"mass": 10.0, "position": 20.0, "velocity": 0.0, "friction": 0.0},
    ],
    "springs": [
        {"natural_length": 10.0, "stiffness": 10.0},
        {"natural_length": 10.0, "stiffness": 10.0},
        {"natural_length": 10.0, "stiffness": 10.0},
    ],
    "dampers": [
        {"coefficient": 1.0},
        {"coefficient": 1.0},
    ],
    "external_force": {
        "amplitude": 5.0,
        "angular_frequency": RESONANCE_PRESETS["anti_bonding_resonance"],
    },
    "history": {
        "stride": 40,
        "capacity": 2000,
    },
}


@dataclass(slots=True)
class ScenarioRuntime:
    chain: Chain
    clock: SimulationClock
    frame_interval_ms: float
    history_stride: int
    history_capacity: int


def default_scenario() -> ScenarioDefinition:
    return copy.deepcopy(_DEFAULT_SCENARIO)


def load_scenario(path: str | Path) -> ScenarioDefinition:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    defn = validate_scenario(data)
    logger.info("loaded scenario %s", path)
    return defn


def save_scenario(path: str | Path, defn: ScenarioDefinition) -> None:
    Path(path).write_text(
        json.dumps(defn, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def scenario_to_runtime(defn: ScenarioDefinition) -> ScenarioRuntime:
    sim = defn["simulation"]
    dt = float(sim["dt"])
    frame_interval_ms = float(sim["frame_interval_ms"])

    b1, b2 = (
        Body(
            mass=float(b["mass"]),
            position=float(b["position"]),
            velocity=float(b.get("velocity", 0.0)),
            friction=float(b.get("friction", 0.0)),
        )
        for b in defn["bodies"]
    )
    s1, s2, s3 = (
        Spring(natural_length=float(s["natural_length"]), stiffness=float(s["stiffness"]))
        for s in defn["springs"]
    )
    d1, d2 = (Damper(coefficient=float(d["coefficient"])) for d in defn["dampers"])
    ext = defn["external_force"]
    chain = Chain(
        b1=b1,
        b2=b2,
        s1=s1,
        s2=s2,
        s3=s3,
        d1=d1,
        d2=d2,
        external=ExternalForce(
            amplitude=float(ext["amplitude"]),
            angular_frequency=float(ext["angular_frequency"]),
        ),
        bound=float(sim["bound"]),
    )
    history = defn.get("history", {})
    return ScenarioRuntime(
        chain=chain,
        clock=SimulationClock.for_frame_interval(dt, frame_interval_ms),
        frame_interval_ms=frame_interval_ms,
        history_stride=int(history.get("stride", 40)),
        history_capacity=int(history.get("capacity", 2000)),
    )


def _require(obj: dict[str, Any], key: str, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"missing required field: {ctx}.{key}")
    return obj[key]


def _require_number(obj: dict[str, Any], key: str, ctx: str) -> float:
    value = _require(obj, key, ctx)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{ctx}.{key} must be a number")
    if not np.isfinite(value):
        raise ValueError(f"{ctx}.{key} must be finite")
    return float(value)


def _validate_list(values: Any, expected_len: int, ctx: str) -> list[dict[str, Any]]:
    if not isinstance(values, list) or len(values) != expected_len:
        raise ValueError(f"{ctx} must be a list of length {expected_len}")
    for idx, entry in enumerate(values):
        if not isinstance(entry, dict):
            raise ValueError(f"{ctx}[{idx}] must be an object")
    return values


def validate_scenario(data: Any) -> ScenarioDefinition:
    if not isinstance(data, dict):
        raise ValueError("scenario must be a JSON object")
    if data.get("schema_version") != 1:
        raise ValueError("schema_version must be 1")

    sim = _require(data, "simulation", "scenario")
    if _require_number(sim, "dt", "simulation") <= 0:
        raise ValueError("simulation.dt must be > 0")
    if _require_number(sim, "frame_interval_ms", "simulation") <= 0:
        raise ValueError("simulation.frame_interval_ms must be > 0")
    if _require_number(sim, "bound", "simulation") <= 0:
        raise ValueError("simulation.bound must be > 0")

    bodies = _validate_list(_require(data, "bodies", "scenario"), 2, "bodies")
    for idx, b in enumerate(bodies):
        ctx = f"bodies[{idx}]"
        if _require_number(b, "mass", ctx) <= 0:
            raise ValueError(f"{ctx}.mass must be > 0")
        _require_number(b, "position", ctx)
        if "velocity" in b:
            _require_number(b, "velocity", ctx)
        if "friction" in b and _require_number(b, "friction", ctx) < 0:
            raise ValueError(f"{ctx}.friction must be >= 0")

    springs = _validate_list(_require(data, "springs", "scenario"), 3, "springs")
    for idx, s in enumerate(springs):
        ctx = f"springs[{idx}]"
        if _require_number(s, "natural_length", ctx) <= 0:
            raise ValueError(f"{ctx}.natural_length must be > 0")
        if _require_number(s, "stiffness", ctx) < 0:
            raise ValueError(f"{ctx}.stiffness must be >= 0")

    dampers = _validate_list(_require(data, "dampers", "scenario"), 2, "dampers")
    for idx, d in enumerate(dampers):
        if _require_number(d, "coefficient", f"dampers[{idx}]") < 0:
            raise ValueError(f"dampers[{idx}].coefficient must be >= 0")

    ext = _require(data, "external_force", "scenario")
    if not isinstance(ext, dict):
        raise ValueError("external_force must be an object")
    _require_number(ext, "amplitude", "external_force")
    _require_number(ext, "angular_frequency", "external_force")

    if "history" in data:
        history = data["history"]
        if not isinstance(history, dict):
            raise ValueError("history must be an object")
        for key in ("stride", "capacity"):
            if key in history:
                value = history[key]
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ValueError(f"history.{key} must be an integer >= 1")

    return data
