"""
Shared pytest fixtures for neutron_cluster test suite.
"""
import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from neutron_cluster.cross_sections import build_default_cross_sections
from neutron_cluster.geometry import ToroidalDomain
from neutron_cluster.particle import ParticleStore
from neutron_cluster.sampling import RandomSampler


@pytest.fixture
def rng():
    """Numpy Generator with fixed seed for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sampler():
    """RandomSampler with fixed seed."""
    return RandomSampler(42)


@pytest.fixture
def xs():
    """Default critical cross-section set."""
    return build_default_cross_sections()


@pytest.fixture
def domain():
    """Default 1920 x 1080 toroidal domain."""
    return ToroidalDomain()


@pytest.fixture
def store(domain, sampler):
    """Store initialised from 50 requested neutrons (5 x 10 lattice)."""
    return ParticleStore.initialize(50, domain, sampler)
