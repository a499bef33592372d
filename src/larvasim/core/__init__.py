"""
Core simulation primitives.

This layer knows NOTHING about plotting, analysis or hosts.
It only knows:
- A chain of 5 points with velocities and natural lengths
- Gaits that produce target segment lengths over time
- Force terms that turn length errors into velocity changes
- Damped explicit integration and the centroid

Two gaits are available:
- PeristalticGait: continuous travelling contraction wave (default)
- ThreePhaseGait: discrete extend-head / drag-tail / rest cycle
"""

from larvasim.core.chain import Chain, create_chain, N_POINTS, N_SEGMENTS
from larvasim.core.gait import (
    MovementPhase,
    ThreePhaseGait,
    PeristalticGait,
    create_gait,
    peristaltic_targets,
)
from larvasim.core.larva import Larva, LarvaConfig, create_larva
from larvasim.core.scheduler import ColonyScheduler, ColonySchedulerConfig

__all__ = [
    "Chain",
    "create_chain",
    "N_POINTS",
    "N_SEGMENTS",
    "MovementPhase",
    "ThreePhaseGait",
    "PeristalticGait",
    "create_gait",
    "peristaltic_targets",
    "Larva",
    "LarvaConfig",
    "create_larva",
    "ColonyScheduler",
    "ColonySchedulerConfig",
]
