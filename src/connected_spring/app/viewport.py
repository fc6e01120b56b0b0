"""2D chain viewport backed by VisPy."""

from __future__ import annotations

import numpy as np
from PySide6 import QtCore, QtWidgets
from vispy import app, scene

from .sim_controller import SimulationContext
from .viz_utils import (
    GRAPH_TOP,
    energy_graph_vertices,
    force_bar_extent,
    spring_segments,
    spring_shade,
    to_view_x,
)

app.use_app("pyside6")

BODY_RADIUS = (0.05, 0.1)
GRAPH_COLORS = {
    "body1": (1.0, 0.0, 0.0, 1.0),
    "body2": (0.0, 1.0, 0.0, 1.0),
    "total": (1.0, 1.0, 0.0, 1.0),
}


class ViewportWidget(QtWidgets.QWidget):
    def __init__(self, parent: QtWidgets.QWidget | None = None) -> None:
        super().__init__(parent)

        self._canvas = scene.SceneCanvas(bgcolor="white", size=(600, 300))
        # Keys go to the main window, which maps them to commands.
        self._canvas.native.setFocusPolicy(QtCore.Qt.FocusPolicy.NoFocus)
        self._view = self._canvas.central_widget.add_view()
        self._view.camera = scene.PanZoomCamera(rect=(-1.0, -1.0, 2.0, 2.0))
        self._view.camera.interactive = False

        self._force_bar = scene.visuals.Line(
            pos=np.array([[0.0, 0.9], [0.0, 0.9]], dtype=np.float32),
            color="black",
            width=4,
            parent=self._view.scene,
        )
        self._springs = [
            scene.visuals.Line(
                pos=np.zeros((2, 2), dtype=np.float32),
                width=6,
                parent=self._view.scene,
            )
            for _ in range(3)
        ]
        self._bodies = [
            scene.visuals.Ellipse(
                center=(0.0, 0.0),
                radius=BODY_RADIUS,
                color=color,
                parent=self._view.scene,
            )
            for color in ((1.0, 0.0, 0.0, 1.0), (0.0, 1.0, 0.0, 1.0))
        ]
        self._graphs = {
            name: scene.visuals.Line(
                pos=np.zeros((2, 2), dtype=np.float32),
                color=color,
                parent=self._view.scene,
            )
            for name, color in GRAPH_COLORS.items()
        }
        self._baseline = scene.visuals.Line(
            pos=np.array([[-1.0, GRAPH_TOP], [1.0, GRAPH_TOP]], dtype=np.float32),
            color=(0.3, 0.3, 0.3, 1.0),
            parent=self._view.scene,
        )

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas.native)

    def update_from(self, context: SimulationContext) -> None:
        chain = context.chain
        bar = force_bar_extent(context.elapsed_time, context.frequency)
        self._force_bar.set_data(pos=np.array([[0.0, 0.9], [bar, 0.9]], dtype=np.float32))

        segments = spring_segments(chain.b1.position, chain.b2.position, chain.bound)
        lengths = chain.spring_lengths()
        naturals = (chain.s1.natural_length, chain.s2.natural_length, chain.s3.natural_length)
        for line, (x0, x1), length, natural in zip(self._springs, segments, lengths, naturals):
            shade = spring_shade(length, natural)
            line.set_data(
                pos=np.array([[x0, 0.0], [x1, 0.0]], dtype=np.float32),
                color=(shade, shade, shade, 1.0),
            )

        for body, visual in zip((chain.b1, chain.b2), self._bodies):
            visual.center = (to_view_x(body.position, chain.bound), 0.0)

        scale = context.graph_scale
        histories = context.histories
        capacity = context.history_capacity
        for name, history in (
            ("body1", histories.body1),
            ("body2", histories.body2),
            ("total", histories.total),
        ):
            verts = energy_graph_vertices(history.values(), capacity, scale)
            visible = verts.shape[0] > 1
            if visible:
                self._graphs[name].set_data(pos=verts)
            self._graphs[name].visible = visible

        self._canvas.update()
