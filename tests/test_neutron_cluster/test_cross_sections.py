"""
Tests for neutron_cluster.cross_sections module.
"""
import math

import pytest

from neutron_cluster.cross_sections import CrossSections, build_default_cross_sections
from neutron_cluster.errors import ConfigurationError


class TestDefaultCrossSections:
    def test_total_is_sum(self, xs):
        assert xs.total == pytest.approx(xs.scatter + xs.capture + xs.fission)

    def test_fission_derived_from_nu(self, xs):
        assert xs.fission == pytest.approx(xs.capture / (xs.nu - 1.0))

    def test_k_infinity_is_one(self, xs):
        assert xs.k_infinity == pytest.approx(1.0)

    def test_probabilities_below_one(self, xs):
        assert 0.0 < xs.capture_probability < 1.0
        assert 0.0 < xs.fission_probability < 1.0
        assert xs.capture_probability + xs.fission_probability < 1.0

    def test_mean_free_path(self, xs):
        assert xs.mean_free_path == pytest.approx(1.0 / xs.total)

    def test_is_frozen(self, xs):
        with pytest.raises(Exception):
            xs.capture = 1.0

    def test_default_values(self):
        xs = build_default_cross_sections()
        assert xs.nu == pytest.approx(2.5)
        assert xs.scatter == pytest.approx(0.27)
        assert xs.capture == pytest.approx(0.02)
        assert xs.speed == pytest.approx(2.0e6)


class TestValidation:
    @pytest.mark.parametrize("field", ["scatter", "capture", "fission", "nu", "speed"])
    def test_zero_rejected(self, field):
        values = dict(scatter=0.27, capture=0.02, fission=0.01, nu=2.5, speed=1.0)
        values[field] = 0.0
        with pytest.raises(ConfigurationError):
            CrossSections(**values)

    @pytest.mark.parametrize("field", ["scatter", "capture", "fission"])
    def test_negative_rejected(self, field):
        values = dict(scatter=0.27, capture=0.02, fission=0.01, nu=2.5)
        values[field] = -0.1
        with pytest.raises(ConfigurationError):
            CrossSections(**values)

    def test_nan_rejected(self):
        with pytest.raises(ConfigurationError):
            CrossSections(scatter=math.nan, capture=0.02, fission=0.01, nu=2.5)

    def test_nu_of_one_rejected(self):
        with pytest.raises(ConfigurationError):
            CrossSections(scatter=0.27, capture=0.02, fission=0.01, nu=1.0)

    def test_from_multiplication_rejects_nu_below_one(self):
        with pytest.raises(ConfigurationError):
            CrossSections.from_multiplication(scatter=0.27, capture=0.02, nu=0.5)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            CrossSections(scatter=0.27, capture=0.02, fission=0.01, nu=0.9)

    @pytest.mark.parametrize("value", ["abc", None, [0.2]])
    def test_non_numeric_rejected(self, value):
        with pytest.raises(ConfigurationError):
            CrossSections(scatter=value, capture=0.02, fission=0.01, nu=2.5)

    def test_numeric_strings_coerced(self):
        xs = CrossSections(scatter="0.27", capture=0.02, fission=0.01, nu=2)
        assert type(xs.scatter) is float
        assert type(xs.nu) is float
        assert xs.total == pytest.approx(0.30)
