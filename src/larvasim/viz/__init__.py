"""
Visualization utilities.

- Chain debug drawing (segments, head, centroid, heading)
- Centroid trajectories
- Segment length traces
"""

from larvasim.viz.chain import (
    plot_chain,
    plot_center_trajectories,
    plot_segment_lengths,
    save_figure,
)

__all__ = [
    "plot_chain",
    "plot_center_trajectories",
    "plot_segment_lengths",
    "save_figure",
]
