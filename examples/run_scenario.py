"""Run a scenario JSON headlessly and optionally save sampled data."""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np

from connected_spring.core.diagnostics import (
    body1_energy,
    body2_energy,
    coupling_energy,
    damper_loss_rate,
    total_energy,
)
from connected_spring.core.run import run
from connected_spring.io import load_scenario, scenario_to_runtime


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("scenario", type=Path)
    parser.add_argument("--steps", type=int, default=20000)
    parser.add_argument("--sample-every", type=int, default=None)
    parser.add_argument("--out", type=Path, default=None)
    args = parser.parse_args()

    runtime = scenario_to_runtime(load_scenario(args.scenario))
    sample_every = args.sample_every or runtime.history_stride
    result = run(runtime.chain, runtime.clock, args.steps, sample_every=sample_every)
    chain = result.final_chain

    print("steps:", args.steps)
    print("dt:", runtime.clock.dt)
    print("sim time:", result.final_time)
    print("positions:", chain.b1.position, chain.b2.position)
    print("body 1 energy:", body1_energy(chain))
    print("body 2 energy:", body2_energy(chain))
    print("coupling energy:", coupling_energy(chain))
    print("total energy:", total_energy(chain))
    print("damper loss rate:", damper_loss_rate(chain))

    if args.out is not None and result.time is not None:
        np.savez_compressed(
            args.out,
            time=result.time,
            positions=result.positions,
            velocities=result.velocities,
            energy=result.energy,
        )
        print("saved samples to:", args.out)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
