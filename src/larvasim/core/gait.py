"""
Gaits turn elapsed time into target segment lengths.

A gait never moves points. It only decides, tick by tick, which length
each segment should be pulled toward. Two policies are available:

- ThreePhaseGait: discrete Rest → ExtendingHead → DraggingTail cycle
  with a fixed dwell time per phase (a time-triggered Moore machine)
- PeristalticGait: continuous sine wave travelling head to tail with
  asymmetric shaping, contractions stronger than extensions

Gaits only advance while the larva is moving. `reset` rewinds the clock
without touching the current target lengths.
"""

from __future__ import annotations
from enum import Enum
from typing import Protocol, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from larvasim.core.larva import LarvaConfig


class MovementPhase(Enum):
    """Discrete phases of the three-phase crawl."""

    REST = "rest"
    EXTENDING_HEAD = "extending_head"
    DRAGGING_TAIL = "dragging_tail"


NEXT_PHASE = {
    MovementPhase.REST: MovementPhase.EXTENDING_HEAD,
    MovementPhase.EXTENDING_HEAD: MovementPhase.DRAGGING_TAIL,
    MovementPhase.DRAGGING_TAIL: MovementPhase.REST,
}

HEAD_EXTENSION = 2.0   # ExtendingHead: segment 0 doubles
TAIL_CONTRACTION = 0.5  # DraggingTail: last segment halves


class Gait(Protocol):
    """Protocol for target-length generators."""

    @property
    def target_lengths(self) -> np.ndarray:
        """Current target length per segment."""
        ...

    @property
    def head_reach_active(self) -> bool:
        """Whether segment 0 is free to reach forward this tick."""
        ...

    def advance(self, dt: float) -> None:
        """Move the gait clock forward by dt and refresh targets."""
        ...

    def reset(self) -> None:
        """Rewind the gait clock to zero."""
        ...


class ThreePhaseGait:
    """
    Extend the head, drag the tail, rest, repeat.

    On every transition all targets snap back to natural lengths, then
    exactly one segment is perturbed:
    - EXTENDING_HEAD: target[0] = natural[0] * 2
    - DRAGGING_TAIL: target[-1] = natural[-1] * 0.5
    - REST: no perturbation

    The timer resets to zero on each transition (no carry-over).
    """

    def __init__(self, natural_lengths: np.ndarray, phase_time: float = 0.5):
        self.natural_lengths = np.array(natural_lengths, dtype=np.float64)
        self.phase_time = phase_time
        self.phase = MovementPhase.REST
        self.time_in_phase: float = 0.0
        self._targets = self.natural_lengths.copy()

    @property
    def target_lengths(self) -> np.ndarray:
        return self._targets.copy()

    @property
    def head_reach_active(self) -> bool:
        """The head reaches forward in every phase except tail dragging."""
        return self.phase is not MovementPhase.DRAGGING_TAIL

    def advance(self, dt: float) -> None:
        self.time_in_phase += dt
        if self.time_in_phase < self.phase_time:
            return

        self.time_in_phase = 0.0
        self.phase = next_phase(self.phase)
        self._targets = phase_targets(self.phase, self.natural_lengths)

    def reset(self) -> None:
        self.time_in_phase = 0.0


def next_phase(phase: MovementPhase) -> MovementPhase:
    """Transition table lookup. An unknown phase means corrupted state."""
    if phase not in NEXT_PHASE:
        raise ValueError(f"Unknown movement phase: {phase!r}")
    return NEXT_PHASE[phase]


def phase_targets(phase: MovementPhase, natural_lengths: np.ndarray) -> np.ndarray:
    """Target lengths that a phase enforces."""
    targets = np.array(natural_lengths, dtype=np.float64)

    if phase is MovementPhase.EXTENDING_HEAD:
        targets[0] = natural_lengths[0] * HEAD_EXTENSION
    elif phase is MovementPhase.DRAGGING_TAIL:
        targets[-1] = natural_lengths[-1] * TAIL_CONTRACTION
    elif phase is MovementPhase.REST:
        pass
    else:
        raise ValueError(f"Unknown movement phase: {phase!r}")

    return targets


def peristaltic_contraction(segment_phase):
    """
    Asymmetric wave shape.

    raw = sin(phase)
    raw > 0: raw ** 0.7 * 0.4   (strong contraction)
    raw <= 0: raw * 0.2         (weak extension)
    """
    raw = np.sin(segment_phase)
    positive = np.clip(raw, 0.0, None) ** 0.7 * 0.4
    return np.where(raw > 0, positive, raw * 0.2)


def peristaltic_targets(
    natural_lengths: np.ndarray,
    phase: float,
    wave_offset: float = 1.2,
) -> np.ndarray:
    """
    Target lengths for a given wave phase.

    Segment i sees phase - i * wave_offset, so the wave travels
    head to tail.
    """
    natural = np.asarray(natural_lengths, dtype=np.float64)
    segment_phase = phase - np.arange(len(natural)) * wave_offset
    return natural * (1.0 + peristaltic_contraction(segment_phase))


class PeristalticGait:
    """
    Continuous travelling contraction wave.

    phase += wave_speed * dt on every advance; targets follow
    `peristaltic_targets`. Period in time is 2π / wave_speed.
    """

    def __init__(
        self,
        natural_lengths: np.ndarray,
        wave_speed: float = 3.0,
        wave_offset: float = 1.2,
    ):
        self.natural_lengths = np.array(natural_lengths, dtype=np.float64)
        self.wave_speed = wave_speed
        self.wave_offset = wave_offset
        self.phase: float = 0.0
        self._targets = self.natural_lengths.copy()

    @property
    def target_lengths(self) -> np.ndarray:
        return self._targets.copy()

    @property
    def head_reach_active(self) -> bool:
        return True

    def advance(self, dt: float) -> None:
        self.phase += self.wave_speed * dt
        self._targets = peristaltic_targets(self.natural_lengths, self.phase, self.wave_offset)

    def reset(self) -> None:
        self.phase = 0.0


GAITS = ("peristaltic", "three_phase")


def create_gait(config: "LarvaConfig", natural_lengths: np.ndarray) -> Gait:
    """
    Factory for the gait named by `config.gait`.

    Args:
        config: Larva configuration (gait name and timing knobs)
        natural_lengths: Rest lengths the gait perturbs

    Returns:
        A fresh gait at phase zero
    """
    if config.gait == "peristaltic":
        return PeristalticGait(natural_lengths, config.wave_speed, config.wave_offset)
    if config.gait == "three_phase":
        return ThreePhaseGait(natural_lengths, config.phase_time)
    raise ValueError(f"Unknown gait: {config.gait}")
