"""Smoke tests for visualization."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from larvasim.observers import CenterTracker, SegmentRecorder
from larvasim.viz import plot_chain, plot_center_trajectories, plot_segment_lengths


def test_plot_chain(resting_larva):
    fig, ax = plot_chain(resting_larva)
    assert "peristaltic" in ax.get_title()
    plt.close(fig)


def test_plot_center_trajectories(resting_larva):
    tracker = CenterTracker(resting_larva, name="a")
    resting_larva.start_moving((-1.0, 0.0))
    for t in range(10):
        resting_larva.tick(0.01)
        tracker.update(t + 1)

    fig = plot_center_trajectories([tracker], show_heads=True)
    assert len(fig.axes) == 1
    plt.close(fig)


def test_plot_segment_lengths(resting_larva):
    recorder = SegmentRecorder(resting_larva)
    for t in range(10):
        resting_larva.tick(0.01)
        recorder.update(t + 1)

    fig = plot_segment_lengths(recorder)
    assert len(fig.axes) == 4
    plt.close(fig)
