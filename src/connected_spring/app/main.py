"""Desktop application launcher."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6 import QtWidgets

from ..io.scenario import default_scenario, load_scenario
from .sim_controller import SimulationContext
from .window import MainWindow


def main(scenario_path: str | Path | None = None) -> int:
    defn = load_scenario(scenario_path) if scenario_path is not None else default_scenario()
    context = SimulationContext.from_scenario(defn)

    qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv)
    window = MainWindow(context)
    window.show()
    window.start()
    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1] if len(sys.argv) > 1 else None))
