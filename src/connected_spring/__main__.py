"""Command-line entrypoint."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .logging_config import setup_logging


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="connected_spring")
    parser.add_argument("scenario", type=Path, nargs="?", default=None)
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--steps", type=int, default=10000, help="steps for --headless")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--version", action="version", version=f"connected_spring v{__version__}")
    return parser


def run_headless(scenario: Path | None, steps: int) -> int:
    from .core.diagnostics import damper_loss_rate, total_energy
    from .core.run import run
    from .io.scenario import default_scenario, load_scenario, scenario_to_runtime

    defn = load_scenario(scenario) if scenario is not None else default_scenario()
    runtime = scenario_to_runtime(defn)
    result = run(runtime.chain, runtime.clock, steps)
    chain = result.final_chain

    print("steps:", steps)
    print("dt:", runtime.clock.dt)
    print("sim time:", result.final_time)
    print("positions:", chain.b1.position, chain.b2.position)
    print("velocities:", chain.b1.velocity, chain.b2.velocity)
    print("total energy:", total_energy(chain))
    print("damper loss rate:", damper_loss_rate(chain))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level, args.log_file)
    except ValueError as exc:
        parser.error(str(exc))
    if args.steps < 0:
        logger.error("--steps must be >= 0")
        return 2
    if args.headless:
        return run_headless(args.scenario, args.steps)

    from .app.main import main as app_main

    logger.info("starting connected_spring v%s", __version__)
    return app_main(args.scenario)


if __name__ == "__main__":
    raise SystemExit(main())
