"""
SegmentRecorder: records how the body stretches and contracts.

Each reading pairs the actual segment lengths with the gait's targets,
which is enough to see the wave travel and how closely springs follow.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from larvasim.observers.base import Observer

if TYPE_CHECKING:
    from larvasim.core.larva import Larva


class SegmentRecorder(Observer):
    """Records (time, actual lengths, target lengths) per update."""

    def __init__(self, larva: "Larva", name: str = ""):
        super().__init__(larva, name)
        self.times: list[float] = []
        self.actual: list[np.ndarray] = []
        self.targets: list[np.ndarray] = []

    def update(self, tick: int) -> None:
        self._tick = tick
        self.times.append(self.larva.time)
        self.actual.append(self.larva.chain.segment_lengths())
        self.targets.append(self.larva.target_lengths)

    def get_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (times, actual, targets); length arrays have shape (n, 4)."""
        if not self.times:
            n_segments = len(self.larva.natural_lengths)
            empty = np.empty((0, n_segments))
            return np.array([]), empty, empty.copy()
        return np.array(self.times), np.array(self.actual), np.array(self.targets)

    def tracking_error(self) -> np.ndarray:
        """Mean |actual - target| per segment over all readings."""
        _, actual, targets = self.get_arrays()
        if len(actual) == 0:
            return np.zeros(len(self.larva.natural_lengths))
        return np.abs(actual - targets).mean(axis=0)

    def get_measurements(self) -> dict:
        return {
            "name": self.name,
            "readings": len(self.times),
            "ticks": self._tick,
            "tracking_error": self.tracking_error().tolist(),
        }
