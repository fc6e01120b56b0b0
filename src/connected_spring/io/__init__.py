"""Scenario configuration I/O."""

from .scenario import (  # noqa: F401
    RESONANCE_PRESETS,
    ScenarioDefinition,
    ScenarioRuntime,
    default_scenario,
    load_scenario,
    save_scenario,
    scenario_to_runtime,
    validate_scenario,
)
