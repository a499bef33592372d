"""
Debug drawing for larvae.

Segments are drawn as lines, the head in red, body points in blue,
the centroid as a cyan square and the heading as a yellow arrow.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from larvasim.core.larva import Larva
    from larvasim.observers.tracker import CenterTracker
    from larvasim.observers.segments import SegmentRecorder


HEAD_COLOR = "red"
BODY_COLOR = "blue"
SEGMENT_COLOR = "green"
CENTER_COLOR = "cyan"
HEADING_COLOR = "gold"


def plot_chain(
    larva: "Larva",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 4),
    show_center: bool = True,
    show_heading: bool = True,
    title: str | None = None,
) -> tuple[Figure, Axes]:
    """
    Draw the current body of a larva.

    Args:
        larva: Larva to draw
        ax: Existing axes (creates new if None)
        show_center: Mark the centroid
        show_heading: Arrow from the head along target_direction

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    points = larva.points
    ax.plot(points[:, 0], points[:, 1], color=SEGMENT_COLOR, linewidth=2, zorder=1)
    ax.scatter(points[1:, 0], points[1:, 1], color=BODY_COLOR, s=40, zorder=2)
    ax.scatter([points[0, 0]], [points[0, 1]], color=HEAD_COLOR, s=60, zorder=3, label="Head")

    if show_center:
        center = larva.center
        ax.scatter(
            [center[0]], [center[1]],
            color=CENTER_COLOR, s=60, marker="s", zorder=3,
            edgecolors="black", linewidths=1, label="Center",
        )

    if show_heading:
        head = points[0]
        heading = larva.target_direction * larva.chain.nominal_length
        ax.annotate(
            "",
            xy=(head[0] + heading[0], head[1] + heading[1]),
            xytext=(head[0], head[1]),
            arrowprops=dict(arrowstyle="->", color=HEADING_COLOR, linewidth=2),
        )

    ax.set_aspect("equal")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if title is None:
        state = "moving" if larva.is_moving else "resting"
        title = f"Larva ({larva.config.gait}, {state}) t={larva.time:.2f}s"
    ax.set_title(title)
    ax.legend(loc="upper right", fontsize=8)

    return fig, ax


def plot_center_trajectories(
    trackers: Sequence["CenterTracker"],
    title: str = "Centroid Trajectories",
    figsize: tuple[float, float] = (8, 8),
    colors: Sequence | None = None,
    show_heads: bool = False,
) -> Figure:
    """
    Plot the centroid path of several larvae.

    Args:
        trackers: CenterTracker objects with recorded paths
        title: Plot title
        colors: Optional list of colors for each trajectory
        show_heads: Also draw the head paths as thin dashed lines

    Returns:
        Figure
    """
    fig, ax = plt.subplots(figsize=figsize)

    if colors is None:
        cmap_lines = plt.get_cmap("tab10")
        colors = [cmap_lines(i % 10) for i in range(len(trackers))]

    for i, tracker in enumerate(trackers):
        x_traj, y_traj = tracker.get_trajectory_arrays()
        color = colors[i] if i < len(colors) else "black"
        if len(x_traj) == 0:
            continue

        label = tracker.name or f"larva {i}"
        ax.plot(x_traj, y_traj, color=color, linewidth=2, zorder=2, label=label)
        ax.scatter([x_traj[0]], [y_traj[0]], color=color, s=60, marker="o", zorder=3)
        ax.scatter([x_traj[-1]], [y_traj[-1]], color=color, s=60, marker="s", zorder=3)

        if show_heads:
            hx, hy = tracker.get_head_arrays()
            ax.plot(hx, hy, color=color, linewidth=0.8, linestyle="--", alpha=0.6)

    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.legend(loc="upper right", fontsize=8)
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    return fig


def plot_segment_lengths(
    recorder: "SegmentRecorder",
    title: str = "Segment Lengths",
    figsize: tuple[float, float] = (10, 6),
) -> Figure:
    """
    Actual (solid) vs target (dashed) length of each segment over time.

    Returns:
        Figure
    """
    times, actual, targets = recorder.get_arrays()
    n_segments = actual.shape[1]

    fig, axes = plt.subplots(n_segments, 1, figsize=figsize, sharex=True)
    axes = np.atleast_1d(axes)

    for i, ax in enumerate(axes):
        ax.plot(times, actual[:, i], color="black", linewidth=1.5, label="actual")
        ax.plot(times, targets[:, i], color="red", linewidth=1.0, linestyle="--", label="target")
        ax.set_ylabel(f"seg {i}")
        ax.grid(True, alpha=0.3)

    axes[0].legend(loc="upper right", fontsize=8)
    axes[-1].set_xlabel("Time (s)")
    fig.suptitle(title)
    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
