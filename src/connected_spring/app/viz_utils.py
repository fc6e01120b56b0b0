"""Pure helpers for viewport math.

The viewport uses normalized coordinates: x in [-1, 1] spans the anchors,
the chain sits on y = 0 and the energy graph occupies y in [-1, -0.5].
"""

from __future__ import annotations

import math

import numpy as np


GRAPH_TOP = -0.5
GRAPH_HEIGHT = 0.5
FORCE_BAR_SCALE = 0.1
MIN_SHADE = 0.1


def to_view_x(position: float, bound: float) -> float:
    return position / bound * 2.0 - 1.0


def spring_shade(length: float, natural_length: float) -> float:
    """Grey level of a spring segment; darker when compressed."""
    return float(np.clip(length / natural_length / 2.0, MIN_SHADE, 1.0))


def force_bar_extent(t: float, angular_frequency: float) -> float:
    return FORCE_BAR_SCALE * math.sin(angular_frequency * t)


def spring_segments(p1: float, p2: float, bound: float) -> np.ndarray:
    """Start/end x of the three spring segments as a (3, 2) array."""
    x1 = to_view_x(p1, bound)
    x2 = to_view_x(p2, bound)
    return np.array([[-1.0, x1], [x1, x2], [x2, 1.0]], dtype=np.float32)


def energy_graph_vertices(samples: np.ndarray, capacity: int, scale: float) -> np.ndarray:
    """Line-strip vertices for one energy history.

    The oldest sample sits at x = -1 and the graph fills rightwards until the
    window holds ``capacity`` samples. A non-positive scale (nothing recorded
    yet) draws the samples flat on the graph floor.
    """
    values = np.asarray(samples, dtype=np.float64)
    if capacity < 1:
        raise ValueError("capacity must be >= 1")
    if values.size > capacity:
        values = values[-capacity:]
    n = values.shape[0]
    if n == 0:
        return np.zeros((0, 2), dtype=np.float32)
    x = -1.0 + np.arange(n, dtype=np.float64) * (2.0 / max(capacity - 1, 1))
    if scale > 0.0:
        y = GRAPH_TOP - (1.0 - values / scale) * GRAPH_HEIGHT
    else:
        y = np.full(n, GRAPH_TOP - GRAPH_HEIGHT)
    return np.column_stack([x, y]).astype(np.float32)
