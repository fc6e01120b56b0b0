from __future__ import annotations

import numpy as np
import pytest

from connected_spring.app.viz_utils import (
    energy_graph_vertices,
    force_bar_extent,
    spring_segments,
    spring_shade,
    to_view_x,
)


def test_to_view_x() -> None:
    assert to_view_x(0.0, 30.0) == -1.0
    assert to_view_x(15.0, 30.0) == 0.0
    assert to_view_x(30.0, 30.0) == 1.0


def test_spring_shade_is_clamped() -> None:
    assert spring_shade(10.0, 10.0) == 0.5
    assert spring_shade(100.0, 10.0) == 1.0
    assert spring_shade(0.0, 10.0) == pytest.approx(0.1)
    assert spring_shade(-5.0, 10.0) == pytest.approx(0.1)


def test_spring_segments() -> None:
    segments = spring_segments(10.0, 20.0, 30.0)
    expected = [[-1.0, -1.0 / 3.0], [-1.0 / 3.0, 1.0 / 3.0], [1.0 / 3.0, 1.0]]
    assert segments.shape == (3, 2)
    assert np.allclose(segments, expected)


def test_force_bar_extent() -> None:
    assert force_bar_extent(0.0, 3.0) == 0.0
    assert force_bar_extent(np.pi / 2.0, 1.0) == pytest.approx(0.1)


def test_energy_graph_empty() -> None:
    verts = energy_graph_vertices(np.zeros(0), 5, 1.0)
    assert verts.shape == (0, 2)


def test_energy_graph_fills_from_left() -> None:
    verts = energy_graph_vertices(np.array([0.0, 5.0, 10.0]), 5, 10.0)
    assert np.allclose(verts[:, 0], [-1.0, -0.5, 0.0])
    assert np.allclose(verts[:, 1], [-1.0, -0.75, -0.5])


def test_energy_graph_zero_scale_is_flat() -> None:
    verts = energy_graph_vertices(np.array([0.0, 0.0]), 5, 0.0)
    assert np.all(np.isfinite(verts))
    assert np.allclose(verts[:, 1], -1.0)


def test_energy_graph_truncates_to_capacity() -> None:
    verts = energy_graph_vertices(np.arange(6, dtype=float), 3, 5.0)
    assert verts.shape == (3, 2)
    assert np.allclose(verts[:, 0], [-1.0, 0.0, 1.0])
    assert np.allclose(verts[:, 1], [-0.7, -0.6, -0.5])
