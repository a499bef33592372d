"""
Analysis layer: derived quantities for evaluating locomotion.

IMPORTANT: This is NOT seen by the solver. One-way derivation only.

- net_displacement / path_length: how far and how directly a larva moved
- fit_drift_velocity: least-squares crawl velocity of the centroid
- heading_alignment: does the larva go where it was told
- segment_strain / dominant_period: shape of the contraction wave
"""

from larvasim.analysis.locomotion import (
    DriftResult,
    net_displacement,
    path_length,
    fit_drift_velocity,
    heading_alignment,
    segment_strain,
    dominant_period,
)

__all__ = [
    "DriftResult",
    "net_displacement",
    "path_length",
    "fit_drift_velocity",
    "heading_alignment",
    "segment_strain",
    "dominant_period",
]
