"""Tests for the environment model."""

import math
import unittest

import pytest

from fall_sim import environment, constants as C


def _troposphere_density(h):
    T = 15.04 - 0.00649 * h
    P = 101.29 * ((T + 273.1) / 288.08) ** 5.256
    return P / (0.2869 * (T + 273.1))


def _lower_stratosphere_density(h):
    T = -56.46
    P = 22.65 * math.exp(1.73 - 0.000157 * h)
    return P / (0.2869 * (T + 273.1))


def _upper_stratosphere_density(h):
    T = -131.21 + 0.00299 * h
    P = 2.488 * ((T + 273.1) / 216.6) ** -11.388
    return P / (0.2869 * (T + 273.1))


@pytest.mark.parametrize("h", [0.0, 1.0, 500.0, 5000.0, 10999.0, 11000.0])
def test_troposphere_density(h):
    assert environment.compute_air_density(h) == pytest.approx(_troposphere_density(h), rel=1e-12)


@pytest.mark.parametrize("h", [11000.5, 15000.0, 20000.0, 25000.0])
def test_lower_stratosphere_density(h):
    assert environment.compute_air_density(h) == pytest.approx(_lower_stratosphere_density(h), rel=1e-12)


@pytest.mark.parametrize("h", [25000.5, 30000.0, 40000.0])
def test_upper_stratosphere_density(h):
    assert environment.compute_air_density(h) == pytest.approx(_upper_stratosphere_density(h), rel=1e-12)


def test_sea_level_density():
    # Close to the textbook 1.225 kg/m^3, but the model's own value
    assert environment.compute_air_density(0.0) == pytest.approx(1.2266, abs=1e-3)


def test_atmosphere_properties_keys():
    props = environment.compute_atmosphere_properties(1000.0)
    assert set(props) == {'temperature', 'pressure', 'density'}
    assert props['temperature'] == pytest.approx(15.04 - 6.49)


def test_gravity_sea_level():
    assert environment.compute_gravitational_acceleration(0.0) == C.ACCELERATION_GRAVITY_SEA_LEVEL


def test_gravity_inverse_square():
    g = environment.compute_gravitational_acceleration(C.EARTH_MEAN_RADIUS)
    assert g == pytest.approx(C.ACCELERATION_GRAVITY_SEA_LEVEL / 4.0)


def test_sample_environment():
    sample = environment.sample_environment(2000.0)
    assert sample.air_density == environment.compute_air_density(2000.0)
    assert sample.gravitational_acceleration == environment.compute_gravitational_acceleration(2000.0)
    assert environment.sea_level_environment() == environment.sample_environment(0.0)


class TestAtmosphereEdgeCases(unittest.TestCase):
    """Edge case tests for the atmosphere branches."""

    def test_boundary_jumps_are_small(self):
        """Branches meet with a small, preserved discontinuity."""
        below = environment.compute_air_density(11000.0)
        above = environment.compute_air_density(11000.0 + 1e-6)
        self.assertLess(abs(below - above), 1e-2)

        below = environment.compute_air_density(25000.0)
        above = environment.compute_air_density(25000.0 + 1e-6)
        self.assertLess(abs(below - above), 1e-2)

    def test_density_decreases_with_altitude(self):
        altitudes = [0.0, 2000.0, 8000.0, 15000.0, 22000.0, 30000.0]
        densities = [environment.compute_air_density(h) for h in altitudes]
        for lower, higher in zip(densities, densities[1:]):
            self.assertGreater(lower, higher)

    def test_gravity_decreases_with_altitude(self):
        g_surface = environment.compute_gravitational_acceleration(0.0)
        g_high = environment.compute_gravitational_acceleration(100000.0)
        self.assertGreater(abs(g_surface), abs(g_high))
        self.assertLess(g_high, 0.0)
