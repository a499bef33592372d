"""
Colony Scheduler: fixed-step driver for several independent larvae.

The caller owns the loop; the scheduler only bundles the bookkeeping a
host would otherwise repeat:
- One shared dt per tick, applied to every larva in turn
- Optional wandering: every larva gets a fresh random heading each
  `direction_change_interval` seconds of simulated time
- Observers updated after all larvae have ticked

Larvae share no state, so the order in which they are advanced within
a tick does not matter.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from larvasim.core.larva import Larva
    from larvasim.observers.base import Observer

logger = logging.getLogger(__name__)


@dataclass
class ColonySchedulerConfig:
    """Configuration for the colony scheduler."""

    dt: float = 0.01  # Fixed step, seconds
    auto_move: bool = True  # Wander with random headings
    direction_change_interval: float = 5.0  # Seconds between heading changes
    seed: int | None = None  # RNG seed for headings

    def __post_init__(self):
        if not np.isfinite(self.dt) or self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if not np.isfinite(self.direction_change_interval) or self.direction_change_interval <= 0:
            raise ValueError(
                f"direction_change_interval must be positive, got {self.direction_change_interval}"
            )


def random_direction(rng: np.random.Generator) -> np.ndarray:
    """Uniformly distributed unit vector."""
    angle = rng.uniform(0.0, 2.0 * np.pi)
    return np.array([np.cos(angle), np.sin(angle)])


@dataclass
class ColonyScheduler:
    """
    Advances a group of larvae with a shared fixed step.

    Usage:
        scheduler = ColonyScheduler(config=ColonySchedulerConfig(seed=1))
        scheduler.add_larva(create_larva((0, 0)))
        scheduler.start_all()
        stats = scheduler.run(1000)
    """

    config: ColonySchedulerConfig = field(default_factory=ColonySchedulerConfig)
    larvae: list["Larva"] = field(default_factory=list)
    observers: list["Observer"] = field(default_factory=list)

    # Simulation state
    current_tick: int = field(default=0, init=False)
    time: float = field(default=0.0, init=False)

    _rng: np.random.Generator = field(default=None, init=False)
    _next_direction_change: float = field(default=0.0, init=False)

    def __post_init__(self):
        self._rng = np.random.default_rng(self.config.seed)
        self._next_direction_change = self.config.direction_change_interval

    def add_larva(self, larva: "Larva") -> None:
        self.larvae.append(larva)
        logger.debug("Added larva %d at %s", len(self.larvae) - 1, larva.center)

    def add_observer(self, observer: "Observer") -> None:
        self.observers.append(observer)

    def start_all(self, directions: Sequence | None = None) -> None:
        """
        Start every larva.

        Args:
            directions: One heading per larva; random unit vectors if None
        """
        if directions is not None and len(directions) != len(self.larvae):
            raise ValueError(
                f"Expected {len(self.larvae)} directions, got {len(directions)}"
            )

        for i, larva in enumerate(self.larvae):
            direction = random_direction(self._rng) if directions is None else directions[i]
            larva.start_moving(direction)

    def stop_all(self) -> None:
        for larva in self.larvae:
            larva.stop_moving()

    def toggle_movement(self) -> bool:
        """Flip auto_move, starting or stopping every larva. Returns the new state."""
        self.config.auto_move = not self.config.auto_move
        if self.config.auto_move:
            self.start_all()
            logger.info("Auto movement enabled")
        else:
            self.stop_all()
            logger.info("Auto movement disabled")
        return self.config.auto_move

    def randomize_directions(self) -> None:
        """Give every larva a new random heading without changing is_moving."""
        for larva in self.larvae:
            larva.set_direction(random_direction(self._rng))
        logger.debug("Changed %d larva directions at t=%.3f", len(self.larvae), self.time)

    def run(self, n_ticks: int) -> dict:
        """
        Run simulation for n ticks.

        Args:
            n_ticks: Number of ticks to run

        Returns:
            Statistics dictionary
        """
        dt = self.config.dt
        start_centers = [larva.center for larva in self.larvae]

        for _ in range(n_ticks):
            self._tick(dt)

        if self.larvae:
            speeds = [np.linalg.norm(larva.velocities, axis=1).mean() for larva in self.larvae]
            displacements = [
                np.linalg.norm(larva.center - start)
                for larva, start in zip(self.larvae, start_centers)
            ]
            mean_speed = float(np.mean(speeds))
            mean_displacement = float(np.mean(displacements))
        else:
            mean_speed = 0.0
            mean_displacement = 0.0

        return {
            "n_ticks": n_ticks,
            "time": self.time,
            "mean_speed": mean_speed,
            "mean_displacement": mean_displacement,
        }

    def _tick(self, dt: float) -> None:
        """Execute one simulation tick."""
        if self.config.auto_move and self.time >= self._next_direction_change:
            self.randomize_directions()
            self._next_direction_change = self.time + self.config.direction_change_interval

        for larva in self.larvae:
            larva.tick(dt)

        self.time += dt
        self.current_tick += 1

        for observer in self.observers:
            observer.update(self.current_tick)
