"""Bounded, strided sample history."""

from __future__ import annotations

from collections import deque

import numpy as np


class EnergyHistory:
    """FIFO of every ``stride``-th pushed value, at most ``capacity`` long.

    The first push is always sampled. Lowering ``capacity`` takes effect on
    the next push.
    """

    def __init__(self, stride: int, capacity: int) -> None:
        if stride < 1:
            raise ValueError("stride must be >= 1")
        self.stride = int(stride)
        self.capacity = capacity
        self._samples: deque[float] = deque()
        self._counter = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, value: int) -> None:
        if value < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = int(value)

    @property
    def pushes(self) -> int:
        return self._counter

    def push(self, value: float) -> bool:
        """Offer one per-step value. Returns True when it was sampled."""
        sampled = self._counter % self.stride == 0
        self._counter += 1
        if sampled:
            self._samples.append(float(value))
        while len(self._samples) > self._capacity:
            self._samples.popleft()
        return sampled

    def max_over_window(self) -> float:
        if not self._samples:
            return 0.0
        return max(self._samples)

    def values(self) -> np.ndarray:
        return np.fromiter(self._samples, dtype=np.float64, count=len(self._samples))

    def clear(self) -> None:
        self._samples.clear()
        self._counter = 0

    def __len__(self) -> int:
        return len(self._samples)
