"""Main window for the desktop app."""

from __future__ import annotations

import logging

from PySide6 import QtCore, QtGui, QtWidgets

from .commands import CommandProcessor
from .keymap import command_for_key
from .pacer import Pacer, timer_delay_ms
from .sim_controller import SimulationContext
from .viewport import ViewportWidget


logger = logging.getLogger(__name__)

APP_NAME = "Connected Spring"


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, context: SimulationContext) -> None:
        super().__init__()
        self.resize(600, 300)
        self.setWindowTitle(APP_NAME)

        self._context = context
        self._pacer = Pacer(context)
        self._commands = CommandProcessor(
            context,
            notify=self._on_notification,
            on_quit=self._on_quit,
        )
        self._timer = QtCore.QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setTimerType(QtCore.Qt.TimerType.PreciseTimer)
        self._timer.timeout.connect(self._on_tick)

        self._viewport = ViewportWidget(self)
        self.setCentralWidget(self._viewport)

        self._status_label = QtWidgets.QLabel(self)
        self.statusBar().addPermanentWidget(self._status_label)
        self.statusBar().showMessage("Ready")
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)

    def start(self) -> None:
        self._timer.start(0)

    def _on_tick(self) -> None:
        delay = self._pacer.tick()
        if delay is None:
            return
        self._viewport.update_from(self._context)
        self._update_status()
        self._timer.start(timer_delay_ms(delay))

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:  # noqa: N802
        try:
            key_name = QtCore.Qt.Key(event.key()).name.removeprefix("Key_")
        except ValueError:
            key_name = ""
        mapped = command_for_key(key_name, event.text())
        if mapped is None:
            super().keyPressEvent(event)
            return
        name, args = mapped
        self._commands.dispatch(name, *args)
        self._update_status()

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:  # noqa: N802
        self._pacer.stop()
        self._timer.stop()
        super().closeEvent(event)

    def _on_quit(self) -> None:
        self._pacer.stop()
        self._timer.stop()
        self.close()

    def _on_notification(self, message: str) -> None:
        self.statusBar().showMessage(message, 3000)

    def _update_status(self) -> None:
        info = self._context.diagnostics()
        msg = (
            f"t={info['time']:.3f}  freq={info['frequency']:.4f}  "
            f"amp={info['amplitude']:.2f}  steps/tick={info['steps_per_tick']}  "
            f"history={info['history_capacity']}  fps={info['fps']}"
        )
        if info["pending_frequency"]:
            msg += f"  new freq: {info['pending_frequency']}_"
        if not info["pin_scale"]:
            msg += "  [rescale]"
        if info["paused"]:
            msg += "  PAUSED"
        self._status_label.setText(msg)
        self.setWindowTitle(
            f"{APP_NAME} t={info['time']:.6f} freq={info['frequency']:.6f}"
        )
