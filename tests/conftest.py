"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def peristaltic_config():
    """Default continuous-wave configuration."""
    from larvasim.core import LarvaConfig
    return LarvaConfig(gait="peristaltic")


@pytest.fixture
def three_phase_config():
    """Three-phase crawl with a 0.5s dwell per phase."""
    from larvasim.core import LarvaConfig
    return LarvaConfig(gait="three_phase", phase_time=0.5)


@pytest.fixture
def resting_larva(peristaltic_config):
    """Straight larva with unit segments, head at the origin."""
    from larvasim.core import create_larva
    return create_larva(origin=(0.0, 0.0), config=peristaltic_config)


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
