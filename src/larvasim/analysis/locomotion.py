"""
Locomotion metrics computed from recorded trajectories.

All functions take plain arrays (as produced by the observers) so they
can be reused on any recorded run.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np
from scipy import signal, stats


@dataclass
class DriftResult:
    """Linear fit of centroid position against time."""

    velocity: np.ndarray  # (vx, vy)
    intercept: np.ndarray  # (x0, y0)
    r_squared: np.ndarray  # Per axis

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))


def net_displacement(centers: np.ndarray) -> float:
    """Distance between first and last recorded position."""
    centers = np.asarray(centers, dtype=np.float64)
    if len(centers) < 2:
        return 0.0
    return float(np.linalg.norm(centers[-1] - centers[0]))


def path_length(centers: np.ndarray) -> float:
    """Total distance travelled along the recorded path."""
    centers = np.asarray(centers, dtype=np.float64)
    if len(centers) < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(centers, axis=0), axis=1).sum())


def fit_drift_velocity(times: np.ndarray, centers: np.ndarray) -> DriftResult:
    """
    Fit x(t) and y(t) with straight lines.

    The slopes are the mean crawl velocity; r² tells how steady the
    crawl was (a wobbling larva in place gives low r² and ~0 slope).

    Args:
        times: Sample times, shape (n,)
        centers: Centroid positions, shape (n, 2)

    Returns:
        DriftResult
    """
    times = np.asarray(times, dtype=np.float64)
    centers = np.asarray(centers, dtype=np.float64)
    if len(times) < 2:
        raise ValueError("Need at least two samples to fit a drift velocity")
    if len(times) != len(centers):
        raise ValueError("times and centers must have the same length")

    slopes, intercepts, r2 = [], [], []
    for axis in range(2):
        values = centers[:, axis]
        if np.ptp(values) == 0.0:
            # Constant coordinate: linregress would report nan r
            slopes.append(0.0)
            intercepts.append(float(values[0]))
            r2.append(1.0)
            continue
        fit = stats.linregress(times, values)
        slopes.append(fit.slope)
        intercepts.append(fit.intercept)
        r2.append(fit.rvalue**2)

    return DriftResult(
        velocity=np.array(slopes),
        intercept=np.array(intercepts),
        r_squared=np.array(r2),
    )


def heading_alignment(centers: np.ndarray, direction) -> float:
    """
    Cosine between net displacement and a commanded direction.

    1 means the larva went exactly where it was steered, -1 the
    opposite way. Returns 0 when it did not move.
    """
    centers = np.asarray(centers, dtype=np.float64)
    direction = np.asarray(direction, dtype=np.float64)
    if len(centers) < 2:
        return 0.0

    moved = centers[-1] - centers[0]
    norm = np.linalg.norm(moved) * np.linalg.norm(direction)
    if norm == 0.0:
        return 0.0
    return float(np.dot(moved, direction) / norm)


def segment_strain(actual: np.ndarray, natural: np.ndarray) -> np.ndarray:
    """Relative deviation (actual - natural) / natural, broadcast per segment."""
    actual = np.asarray(actual, dtype=np.float64)
    natural = np.asarray(natural, dtype=np.float64)
    return (actual - natural) / natural


def dominant_period(times: np.ndarray, values: np.ndarray) -> float:
    """
    Period of the strongest oscillation in a uniformly sampled signal.

    Uses a periodogram with the mean removed; the zero-frequency bin is
    ignored. Returns inf when the signal has no oscillation.

    Args:
        times: Uniform sample times, shape (n,)
        values: Signal, shape (n,)
    """
    times = np.asarray(times, dtype=np.float64)
    values = np.asarray(values, dtype=np.float64)
    if len(times) < 4:
        raise ValueError("Need at least four samples to estimate a period")

    fs = 1.0 / np.mean(np.diff(times))
    freqs, power = signal.periodogram(values - values.mean(), fs=fs)

    freqs, power = freqs[1:], power[1:]
    if len(power) == 0 or np.max(power) <= 0.0:
        return float("inf")
    return float(1.0 / freqs[np.argmax(power)])
