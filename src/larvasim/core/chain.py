"""
Chain: the physical state of one larva body.

The chain stores ONLY physical primitives:
- Point positions (head at index 0, tail at the last index)
- Point velocities
- Natural segment lengths (fixed once at creation)
- The centroid, refreshed after every integration step

It does NOT know about gaits, intent or propulsion. Those live in the
gait and force layers and act on the chain through `apply_velocity_deltas`
and `integrate`.
"""

from __future__ import annotations

import numpy as np

from larvasim.core.forces import integrate

N_POINTS = 5
N_SEGMENTS = N_POINTS - 1


def as_vector(value, name: str = "vector") -> np.ndarray:
    """Convert a 2-sequence into a finite float vector, or raise ValueError."""
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{name} must be a 2D vector, got shape {vec.shape}")
    if not np.all(np.isfinite(vec)):
        raise ValueError(f"{name} must be finite, got {vec}")
    return vec


def unit_vector(value, name: str = "direction") -> np.ndarray:
    """Normalize a 2D vector. Zero-length input is rejected."""
    vec = as_vector(value, name)
    norm = np.hypot(vec[0], vec[1])
    if norm == 0.0:
        raise ValueError(f"{name} must have non-zero length")
    return vec / norm


def segment_lengths(points: np.ndarray) -> np.ndarray:
    """Distances between consecutive points."""
    return np.linalg.norm(np.diff(points, axis=0), axis=1)


class Chain:
    """
    Ordered point masses connected by segments.

    IMPORTANT: accessors return copies. Collaborators (renderers, observers)
    can read the body but never write into solver-owned arrays.
    """

    def __init__(self, points):
        pts = np.array(points, dtype=np.float64)
        if pts.shape != (N_POINTS, 2):
            raise ValueError(f"Chain needs {N_POINTS} planar points, got shape {pts.shape}")
        if not np.all(np.isfinite(pts)):
            raise ValueError("Chain points must be finite")

        natural = segment_lengths(pts)
        if np.any(natural <= 0.0):
            bad = int(np.argmin(natural))
            raise ValueError(f"Segment {bad} has zero length; points must be distinct")

        self._points = pts
        self._velocities = np.zeros_like(pts)
        self._natural_lengths = natural
        self._center = pts.mean(axis=0)

    @classmethod
    def from_points(cls, points) -> "Chain":
        """Build a chain from an explicit layout; natural lengths come from it."""
        return cls(points)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def points(self) -> np.ndarray:
        """Current positions, shape (5, 2). Index 0 is the head."""
        return self._points.copy()

    @property
    def velocities(self) -> np.ndarray:
        """Current velocities, shape (5, 2)."""
        return self._velocities.copy()

    @property
    def natural_lengths(self) -> np.ndarray:
        """Rest lengths of the 4 segments."""
        return self._natural_lengths.copy()

    @property
    def nominal_length(self) -> float:
        """Mean natural segment length (the scale used by repulsion)."""
        return float(self._natural_lengths.mean())

    @property
    def center(self) -> np.ndarray:
        """Centroid of the points as of the last integration step."""
        return self._center.copy()

    @property
    def head(self) -> np.ndarray:
        return self._points[0].copy()

    @property
    def tail(self) -> np.ndarray:
        return self._points[-1].copy()

    def segment_lengths(self) -> np.ndarray:
        """Current distances between adjacent points."""
        return segment_lengths(self._points)

    # ------------------------------------------------------------------
    # Mutation (solver only)
    # ------------------------------------------------------------------

    def apply_velocity_deltas(self, deltas: np.ndarray) -> None:
        """Accumulate per-point velocity changes, shape (5, 2)."""
        self._velocities += deltas

    def integrate(self, dt: float, dampening: float) -> None:
        """Advance positions, damp velocities, then refresh the centroid."""
        integrate(self._points, self._velocities, dt, dampening)
        self._center = self._points.mean(axis=0)


def create_chain(origin, segment_length: float = 1.0) -> Chain:
    """
    Lay out a straight chain starting at `origin`.

    Points are spaced `segment_length` apart along +x, head first.

    Args:
        origin: (x, y) of the head
        segment_length: Spacing between adjacent points, must be > 0

    Returns:
        Chain at rest with natural lengths equal to `segment_length`
    """
    if not np.isfinite(segment_length) or segment_length <= 0:
        raise ValueError(f"segment_length must be positive, got {segment_length}")
    start = as_vector(origin, "origin")
    offsets = np.zeros((N_POINTS, 2), dtype=np.float64)
    offsets[:, 0] = np.arange(N_POINTS) * segment_length
    return Chain(start + offsets)
