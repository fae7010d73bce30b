"""
Tests for neutron_cluster.constants module.
"""
import pytest

from neutron_cluster.constants import (
    NU,
    SIGMA_CAPTURE,
    SIGMA_FISSION,
    NEUTRON_SPEED,
    TICK_DURATION,
    NEEDS_FLIGHT,
    DOMAIN_WIDTH,
    DOMAIN_HEIGHT,
)


class TestCrossSectionDefaults:
    def test_fission_makes_system_critical(self):
        """nu * Sigma_f == Sigma_c + Sigma_f for the default set."""
        assert NU * SIGMA_FISSION == pytest.approx(SIGMA_CAPTURE + SIGMA_FISSION)

    def test_nu_above_one(self):
        assert NU > 1.0


class TestTransportDefaults:
    def test_step_length_two_cm(self):
        assert NEUTRON_SPEED * TICK_DURATION == pytest.approx(2.0)

    def test_sentinel_is_negative(self):
        assert NEEDS_FLIGHT < 0.0

    def test_domain_is_wide(self):
        assert DOMAIN_WIDTH > DOMAIN_HEIGHT > 0.0
