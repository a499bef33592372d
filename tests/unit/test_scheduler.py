"""Unit tests for ColonyScheduler."""

import numpy as np
import pytest

from larvasim.core.larva import LarvaConfig, create_larva
from larvasim.core.scheduler import ColonyScheduler, ColonySchedulerConfig, random_direction
from larvasim.observers import CenterTracker


def make_colony(n=3, **config_kwargs):
    scheduler = ColonyScheduler(config=ColonySchedulerConfig(**config_kwargs))
    for i in range(n):
        scheduler.add_larva(create_larva((10.0 * i, 0.0)))
    return scheduler


class TestColonySchedulerConfig:
    """Tests for ColonySchedulerConfig."""

    def test_default_config(self):
        cfg = ColonySchedulerConfig()
        assert cfg.dt == 0.01
        assert cfg.auto_move is True
        assert cfg.direction_change_interval == 5.0
        assert cfg.seed is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"dt": 0.0},
            {"dt": -1.0},
            {"direction_change_interval": 0.0},
            {"direction_change_interval": float("nan")},
            {"direction_change_interval": float("inf")},
        ],
    )
    def test_invalid_config_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ColonySchedulerConfig(**kwargs)


class TestRandomDirection:
    """Tests for random headings."""

    def test_unit_length(self, rng):
        for _ in range(20):
            assert np.isclose(np.linalg.norm(random_direction(rng)), 1.0)


class TestMovementControl:
    """Tests for start/stop/toggle/randomize."""

    def test_start_all_random(self):
        scheduler = make_colony(seed=1)
        scheduler.start_all()
        for larva in scheduler.larvae:
            assert larva.is_moving
            assert np.isclose(np.linalg.norm(larva.target_direction), 1.0)

    def test_start_all_reproducible(self):
        a = make_colony(seed=5)
        b = make_colony(seed=5)
        a.start_all()
        b.start_all()
        for la, lb in zip(a.larvae, b.larvae):
            assert np.allclose(la.target_direction, lb.target_direction)

    def test_start_all_explicit(self):
        scheduler = make_colony(n=2)
        scheduler.start_all([(0.0, 2.0), (-1.0, 0.0)])
        assert np.allclose(scheduler.larvae[0].target_direction, [0.0, 1.0])
        assert np.allclose(scheduler.larvae[1].target_direction, [-1.0, 0.0])

    def test_start_all_wrong_count(self):
        scheduler = make_colony(n=2)
        with pytest.raises(ValueError):
            scheduler.start_all([(1.0, 0.0)])

    def test_stop_all(self):
        scheduler = make_colony(seed=1)
        scheduler.start_all()
        scheduler.stop_all()
        assert not any(larva.is_moving for larva in scheduler.larvae)

    def test_toggle_movement(self):
        scheduler = make_colony(seed=1)
        scheduler.start_all()

        assert scheduler.toggle_movement() is False
        assert not any(larva.is_moving for larva in scheduler.larvae)

        assert scheduler.toggle_movement() is True
        assert all(larva.is_moving for larva in scheduler.larvae)

    def test_randomize_keeps_moving_flag(self):
        scheduler = make_colony(n=1, seed=3)
        larva = scheduler.larvae[0]
        before = larva.target_direction

        scheduler.randomize_directions()

        assert not larva.is_moving
        assert not np.allclose(larva.target_direction, before)


class TestRun:
    """Tests for run()."""

    def test_run_statistics(self):
        scheduler = make_colony(seed=2)
        scheduler.start_all()
        stats = scheduler.run(100)

        assert stats["n_ticks"] == 100
        assert np.isclose(stats["time"], 1.0)
        assert stats["mean_displacement"] > 0.0
        assert scheduler.current_tick == 100

    def test_run_empty_colony(self):
        scheduler = ColonyScheduler()
        stats = scheduler.run(10)
        assert stats["mean_speed"] == 0.0
        assert stats["mean_displacement"] == 0.0

    def test_directions_change_on_interval(self):
        scheduler = make_colony(n=1, seed=4, direction_change_interval=0.05)
        scheduler.start_all()
        before = scheduler.larvae[0].target_direction

        scheduler.run(10)

        assert not np.allclose(scheduler.larvae[0].target_direction, before)

    def test_no_direction_change_without_auto_move(self):
        scheduler = make_colony(n=1, auto_move=False, direction_change_interval=0.05)
        scheduler.start_all([(0.0, 1.0)])
        scheduler.run(20)
        assert np.allclose(scheduler.larvae[0].target_direction, [0.0, 1.0])

    def test_observers_updated_every_tick(self):
        scheduler = make_colony(n=1, seed=1)
        tracker = CenterTracker(scheduler.larvae[0])
        scheduler.add_observer(tracker)

        scheduler.run(15)

        assert len(tracker.trajectory) == 16

    def test_larvae_are_isolated(self):
        config = LarvaConfig(gait="peristaltic")
        alone = create_larva((0.0, 0.0), config)
        alone.start_moving((0.0, -1.0))
        for _ in range(200):
            alone.tick(0.01)

        scheduler = ColonyScheduler(config=ColonySchedulerConfig(auto_move=False))
        scheduler.add_larva(create_larva((0.0, 0.0), config))
        scheduler.add_larva(create_larva((0.5, 0.3), config))
        scheduler.start_all([(0.0, -1.0), (1.0, 1.0)])
        scheduler.run(200)

        assert np.allclose(scheduler.larvae[0].points, alone.points)
