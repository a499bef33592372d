"""
CenterTracker: records where a larva goes.

The centroid is the larva's world anchor; the head path shows how far
the front leads the body.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from larvasim.observers.base import Observer

if TYPE_CHECKING:
    from larvasim.core.larva import Larva


class CenterTracker(Observer):
    """Records (time, center, head) once per update."""

    def __init__(self, larva: "Larva", name: str = ""):
        super().__init__(larva, name)

        # Each entry: (t, cx, cy, hx, hy)
        self.trajectory: list[tuple[float, float, float, float, float]] = []

        self._start = larva.center
        self._record_state()

    def update(self, tick: int) -> None:
        self._tick = tick
        self._record_state()

    def _record_state(self):
        center = self.larva.center
        head = self.larva.chain.head
        self.trajectory.append(
            (self.larva.time, float(center[0]), float(center[1]), float(head[0]), float(head[1]))
        )

    def get_times(self) -> np.ndarray:
        return np.array([row[0] for row in self.trajectory])

    def get_trajectory_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return centroid path as (x_array, y_array) for plotting."""
        if not self.trajectory:
            return np.array([]), np.array([])

        traj = np.array(self.trajectory)
        return traj[:, 1], traj[:, 2]

    def get_head_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        """Return head path as (x_array, y_array)."""
        if not self.trajectory:
            return np.array([]), np.array([])

        traj = np.array(self.trajectory)
        return traj[:, 3], traj[:, 4]

    def get_centers(self) -> np.ndarray:
        """Centroid path, shape (n, 2)."""
        x, y = self.get_trajectory_arrays()
        return np.column_stack([x, y])

    def distance_from_start(self) -> float:
        """Straight-line distance of the centroid from where tracking began."""
        return float(np.linalg.norm(self.larva.center - self._start))

    def get_measurements(self) -> dict:
        return {
            "name": self.name,
            "initial_center": tuple(self._start),
            "final_center": tuple(self.larva.center),
            "distance_from_start": self.distance_from_start(),
            "ticks": self._tick,
            "trajectory_length": len(self.trajectory),
        }
