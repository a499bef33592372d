#!/usr/bin/env python3
"""
Demo: Wandering Colony

Several larvae wander independently:

1. Each larva starts in a random direction
2. Every few seconds every larva gets a new random heading
3. Larvae never interact; each one is advanced on its own

Both gaits are mixed in the colony for comparison.

Output: output/demo_colony/colony.png
"""

import os

import matplotlib.pyplot as plt

from larvasim.core import ColonyScheduler, ColonySchedulerConfig, LarvaConfig, create_larva
from larvasim.observers import CenterTracker
from larvasim.viz import plot_center_trajectories, save_figure


def main():
    print("=" * 60)
    print("  WANDERING COLONY DEMONSTRATION")
    print("=" * 60)

    scheduler = ColonyScheduler(
        config=ColonySchedulerConfig(dt=0.01, direction_change_interval=5.0, seed=7)
    )

    print("\n1. Placing larvae...")
    origins = [(-4.0, -4.0), (4.0, -4.0), (-4.0, 4.0), (4.0, 4.0), (0.0, 0.0)]
    gaits = ["peristaltic", "three_phase", "peristaltic", "three_phase", "peristaltic"]
    trackers = []
    for i, (origin, gait) in enumerate(zip(origins, gaits)):
        larva = create_larva(origin, LarvaConfig(gait=gait, segment_length=0.8 + 0.1 * i))
        scheduler.add_larva(larva)
        tracker = CenterTracker(larva, name=f"{gait} #{i}")
        scheduler.add_observer(tracker)
        trackers.append(tracker)
        print(f"   Larva {i}: {gait} at {origin}")

    print("\n2. Running 3000 ticks...")
    scheduler.start_all()
    stats = scheduler.run(3000)
    print(f"   Simulated {stats['time']:.1f}s")
    print(f"   Mean displacement: {stats['mean_displacement']:.3f}")

    print("\n3. Creating visualization...")
    os.makedirs("output/demo_colony", exist_ok=True)
    fig = plot_center_trajectories(trackers, title="Wandering colony", show_heads=True)
    save_figure(fig, "output/demo_colony/colony.png")
    plt.close(fig)
    print("   Saved: output/demo_colony/colony.png")

    print("\n" + "=" * 60)
    print("  Colony demonstration complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
