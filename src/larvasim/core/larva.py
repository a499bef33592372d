"""
Larva: movement intent + gait + forces driving one chain.

One tick runs, in this fixed order:
1. Gait advance (only while moving) → target segment lengths
2. Force terms → velocity deltas accumulated into the chain
3. Integration with damping
4. Centroid refresh

The two gaits carry different propulsion models:
- three_phase: the head spring reaches along the target direction
  (except while the tail is being dragged)
- peristaltic: contracting segments push forward and the head leads
  with a standing forward velocity

Spring relaxation and repulsion apply to both.
"""

from __future__ import annotations
from dataclasses import dataclass, fields

import numpy as np

from larvasim.core.chain import Chain, create_chain, unit_vector
from larvasim.core.forces import (
    spring_corrections,
    head_reach_correction,
    repulsion_corrections,
    contraction_propulsion,
    head_lead,
)
from larvasim.core.gait import GAITS, Gait, create_gait


@dataclass
class LarvaConfig:
    """Configuration for a larva."""

    segment_length: float = 1.0  # Nominal spacing for create_larva
    gait: str = "peristaltic"  # "peristaltic" or "three_phase"

    # Solver
    dampening: float = 0.9  # Velocity retained per tick, in [0, 1]
    restore_force: float = 5.0  # Spring correction gain

    # Head bias
    head_forward_force: float = 3.0  # Reach offset (three_phase) / lead speed (peristaltic)
    head_direction_influence: float = 0.8  # Lead passed to points 1-2

    # Peristaltic wave
    contraction_strength: float = 2.0  # Thrust gain for contracting segments
    wave_speed: float = 3.0  # Radians of phase per second
    wave_offset: float = 1.2  # Phase lag per segment index

    # Three-phase crawl
    phase_time: float = 0.5  # Dwell time per phase, seconds

    # Self-repulsion
    repulsion: bool = True
    repulsion_strength: float = 5.0
    neighbor_repulsion_divider: float = 10.0  # Adjacent points repel below L / 10
    repulsion_divider: float = 5.0  # Other points repel below L / 5

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, float) and not np.isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value}")

        if self.gait not in GAITS:
            raise ValueError(f"Unknown gait: {self.gait} (expected one of {GAITS})")
        if self.segment_length <= 0:
            raise ValueError(f"segment_length must be positive, got {self.segment_length}")
        if not 0.0 <= self.dampening <= 1.0:
            raise ValueError(f"dampening must be in [0, 1], got {self.dampening}")
        if self.restore_force < 0:
            raise ValueError(f"restore_force must be non-negative, got {self.restore_force}")
        if self.phase_time <= 0:
            raise ValueError(f"phase_time must be positive, got {self.phase_time}")
        if self.neighbor_repulsion_divider <= 0 or self.repulsion_divider <= 0:
            raise ValueError("repulsion dividers must be positive")


class Larva:
    """
    A crawling soft body.

    External code steers it with start_moving / stop_moving / set_direction
    and advances it with tick(dt). Everything it exposes is a copy.
    """

    def __init__(self, chain: Chain, config: LarvaConfig | None = None):
        self.config = config if config is not None else LarvaConfig()
        self.chain = chain
        self.gait: Gait = create_gait(self.config, chain.natural_lengths)

        self.is_moving: bool = False
        self._target_direction = np.array([1.0, 0.0])

        self.time: float = 0.0
        self.tick_count: int = 0

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def points(self) -> np.ndarray:
        return self.chain.points

    @property
    def center(self) -> np.ndarray:
        return self.chain.center

    @property
    def velocities(self) -> np.ndarray:
        return self.chain.velocities

    @property
    def natural_lengths(self) -> np.ndarray:
        return self.chain.natural_lengths

    @property
    def target_lengths(self) -> np.ndarray:
        return self.gait.target_lengths

    @property
    def target_direction(self) -> np.ndarray:
        """Unit vector the larva is steering toward."""
        return self._target_direction.copy()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_moving(self, direction) -> None:
        """Steer toward `direction` and start the gait. Zero vectors raise ValueError."""
        self._target_direction = unit_vector(direction)
        self.is_moving = True

    def stop_moving(self) -> None:
        """
        Halt the gait and rewind its clock.

        Target lengths keep their current values; the next start resumes
        from phase zero.
        """
        self.is_moving = False
        self.gait.reset()

    def set_direction(self, direction) -> None:
        """Change steering without starting or stopping. Zero vectors raise ValueError."""
        self._target_direction = unit_vector(direction)

    def tick(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        if not np.isfinite(dt) or dt < 0:
            raise ValueError(f"dt must be a non-negative finite number, got {dt}")

        if self.is_moving:
            self.gait.advance(dt)

        self.chain.apply_velocity_deltas(self.compute_velocity_deltas(dt))
        self.chain.integrate(dt, self.config.dampening)

        self.time += dt
        self.tick_count += 1

    def compute_velocity_deltas(self, dt: float) -> np.ndarray:
        """
        Sum of all force terms for the current geometry and targets.

        Does not mutate anything; tick() applies the result.
        """
        cfg = self.config
        points = self.chain.points
        targets = self.gait.target_lengths
        direction = self._target_direction

        deltas = spring_corrections(points, targets, cfg.restore_force, dt)

        if cfg.gait == "three_phase" and self.gait.head_reach_active:
            reach = cfg.head_forward_force if self.is_moving else 0.0
            deltas += head_reach_correction(
                points, targets[0], direction, reach, cfg.restore_force, dt
            )

        if cfg.repulsion:
            deltas += repulsion_corrections(
                points,
                self.chain.nominal_length,
                cfg.repulsion_strength,
                dt,
                neighbor_divider=cfg.neighbor_repulsion_divider,
                divider=cfg.repulsion_divider,
            )

        if cfg.gait == "peristaltic" and self.is_moving:
            deltas += contraction_propulsion(
                points, targets, direction, cfg.contraction_strength, dt
            )
            deltas += head_lead(
                len(points), direction, cfg.head_forward_force, cfg.head_direction_influence, dt
            )

        return deltas

    def get_measurements(self) -> dict:
        """Return a summary of the current state."""
        return {
            "time": self.time,
            "tick_count": self.tick_count,
            "is_moving": self.is_moving,
            "gait": self.config.gait,
            "center": tuple(self.center),
            "target_direction": tuple(self._target_direction),
            "segment_lengths": self.chain.segment_lengths().tolist(),
            "target_lengths": self.target_lengths.tolist(),
        }


def create_larva(
    origin=(0.0, 0.0),
    config: LarvaConfig | None = None,
    segment_length: float | None = None,
) -> Larva:
    """
    Convenience factory for a straight larva at rest.

    Args:
        origin: (x, y) of the head
        config: Larva configuration (defaults if None)
        segment_length: Override for config.segment_length

    Returns:
        Configured Larva with its head at `origin` and tail toward +x
    """
    if config is None:
        config = LarvaConfig()
    length = config.segment_length if segment_length is None else segment_length
    return Larva(create_chain(origin, length), config)
