"""Unit tests for gaits."""

import numpy as np
import pytest

from larvasim.core.gait import (
    MovementPhase,
    ThreePhaseGait,
    PeristalticGait,
    create_gait,
    next_phase,
    phase_targets,
    peristaltic_contraction,
    peristaltic_targets,
)
from larvasim.core.larva import LarvaConfig


NATURAL = np.array([1.0, 1.0, 1.0, 1.0])


class TestThreePhaseGait:
    """Tests for the discrete Rest → ExtendingHead → DraggingTail cycle."""

    def test_starts_at_rest(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        assert gait.phase is MovementPhase.REST
        assert np.allclose(gait.target_lengths, NATURAL)

    def test_no_transition_before_phase_time(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        for _ in range(3):
            gait.advance(0.125)
        assert gait.phase is MovementPhase.REST
        assert np.isclose(gait.time_in_phase, 0.375)

    def test_extending_head_doubles_first_segment(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        for _ in range(4):
            gait.advance(0.125)

        assert gait.phase is MovementPhase.EXTENDING_HEAD
        assert gait.time_in_phase == 0.0
        assert np.allclose(gait.target_lengths, [2.0, 1.0, 1.0, 1.0])
        assert gait.head_reach_active

    def test_dragging_tail_halves_last_segment(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        for _ in range(8):
            gait.advance(0.125)

        assert gait.phase is MovementPhase.DRAGGING_TAIL
        assert np.allclose(gait.target_lengths, [1.0, 1.0, 1.0, 0.5])
        assert not gait.head_reach_active

    def test_full_cycle_returns_to_rest(self):
        natural = np.array([0.8, 1.1, 0.9, 1.3])
        gait = ThreePhaseGait(natural, phase_time=0.5)
        for _ in range(12):
            gait.advance(0.125)

        assert gait.phase is MovementPhase.REST
        assert np.allclose(gait.target_lengths, natural)

    def test_reset_keeps_phase_and_targets(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        for _ in range(6):
            gait.advance(0.125)

        gait.reset()

        assert gait.time_in_phase == 0.0
        assert gait.phase is MovementPhase.EXTENDING_HEAD
        assert np.allclose(gait.target_lengths, [2.0, 1.0, 1.0, 1.0])

    def test_unknown_phase_fails_loudly(self):
        with pytest.raises(ValueError, match="Unknown movement phase"):
            next_phase("sideways")
        with pytest.raises(ValueError, match="Unknown movement phase"):
            phase_targets("sideways", NATURAL)

    def test_corrupted_state_raises_on_advance(self):
        gait = ThreePhaseGait(NATURAL, phase_time=0.5)
        gait.phase = "sideways"
        with pytest.raises(ValueError):
            gait.advance(1.0)


class TestPeristalticShape:
    """Tests for the asymmetric wave shape."""

    def test_contraction_peak(self):
        assert np.isclose(peristaltic_contraction(np.pi / 2), 0.4)

    def test_extension_trough(self):
        assert np.isclose(peristaltic_contraction(-np.pi / 2), -0.2)

    def test_zero_crossing(self):
        assert np.isclose(peristaltic_contraction(0.0), 0.0)

    def test_contraction_stronger_than_extension(self):
        phases = np.linspace(0, 2 * np.pi, 1000, endpoint=False)
        shaped = peristaltic_contraction(phases)
        assert shaped.max() > abs(shaped.min())
        assert shaped.mean() > 0

    def test_targets_lag_per_segment(self):
        phase = 2.7
        targets = peristaltic_targets(NATURAL, phase, wave_offset=1.2)
        for i in range(4):
            head_at_earlier_phase = peristaltic_targets(NATURAL, phase - i * 1.2, wave_offset=1.2)[0]
            assert np.isclose(targets[i], head_at_earlier_phase)


class TestPeristalticGait:
    """Tests for the continuous wave gait."""

    def test_phase_advances_with_wave_speed(self):
        gait = PeristalticGait(NATURAL, wave_speed=3.0)
        gait.advance(0.1)
        assert np.isclose(gait.phase, 0.3)

    def test_periodic_in_time(self):
        natural = np.array([1.0, 1.5, 0.8, 1.2])
        wave_speed = 2.0
        steps_per_period = 100
        dt = (2 * np.pi / wave_speed) / steps_per_period
        gait = PeristalticGait(natural, wave_speed=wave_speed, wave_offset=1.2)

        for _ in range(37):
            gait.advance(dt)
        before = gait.target_lengths

        for _ in range(steps_per_period):
            gait.advance(dt)
        after = gait.target_lengths

        assert np.allclose(before, after, atol=1e-9)

    def test_reset_rewinds_phase(self):
        gait = PeristalticGait(NATURAL, wave_speed=3.0)
        gait.advance(0.5)
        targets = gait.target_lengths
        gait.reset()
        assert gait.phase == 0.0
        assert np.allclose(gait.target_lengths, targets)


class TestCreateGait:
    """Tests for the gait factory."""

    def test_peristaltic(self):
        gait = create_gait(LarvaConfig(gait="peristaltic", wave_speed=4.0), NATURAL)
        assert isinstance(gait, PeristalticGait)
        assert gait.wave_speed == 4.0

    def test_three_phase(self):
        gait = create_gait(LarvaConfig(gait="three_phase", phase_time=0.25), NATURAL)
        assert isinstance(gait, ThreePhaseGait)
        assert gait.phase_time == 0.25
