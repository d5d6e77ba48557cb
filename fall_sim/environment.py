"""
Falling Objects Simulation - Environment Model

Pure functions mapping altitude to air density and gravitational
acceleration. No state, no side effects.

The atmosphere is the three-branch analytic standard atmosphere:

    h <= 11 km        troposphere, linear temperature decay, power-law pressure
    11 < h <= 25 km   lower stratosphere, constant temperature, exponential pressure
    h > 25 km         upper stratosphere, linear temperature rise, power-law pressure

Density follows the equation of state rho = P / (R * T). The branches are
not exactly continuous at 11 km and 25 km; the small jumps are part of the
model's published coefficients and are reproduced as-is.
"""

from typing import NamedTuple

import numpy as np

from . import constants as C
from .types import AtmosphereProperties


class EnvironmentSample(NamedTuple):
    """Ambient values at one altitude."""
    air_density: float  # kg/m^3
    gravitational_acceleration: float  # m/s^2, signed toward the ground


def compute_atmosphere_properties(altitude: float) -> AtmosphereProperties:
    """
    Compute temperature, pressure and density at the given altitude.

    Args:
        altitude: Altitude above sea level (m)

    Returns:
        AtmosphereProperties with temperature (deg C), pressure (kPa) and
        density (kg/m^3)
    """
    if altitude <= C.TROPOSPHERE_CEILING:
        temperature = C.TROPOSPHERE_T0 - C.TROPOSPHERE_LAPSE * altitude
        pressure = C.TROPOSPHERE_P0 * (
            (temperature + C.KELVIN_OFFSET) / C.TROPOSPHERE_T_REF
        ) ** C.TROPOSPHERE_EXPONENT
    elif altitude <= C.LOWER_STRATOSPHERE_CEILING:
        temperature = C.LOWER_STRATOSPHERE_T
        pressure = C.LOWER_STRATOSPHERE_P0 * np.exp(
            C.LOWER_STRATOSPHERE_OFFSET - C.LOWER_STRATOSPHERE_DECAY * altitude
        )
    else:
        temperature = C.UPPER_STRATOSPHERE_T0 + C.UPPER_STRATOSPHERE_LAPSE * altitude
        pressure = C.UPPER_STRATOSPHERE_P0 * (
            (temperature + C.KELVIN_OFFSET) / C.UPPER_STRATOSPHERE_T_REF
        ) ** C.UPPER_STRATOSPHERE_EXPONENT

    density = pressure / (C.R_AIR * (temperature + C.KELVIN_OFFSET))
    return AtmosphereProperties(
        temperature=float(temperature),
        pressure=float(pressure),
        density=float(density),
    )


def compute_air_density(altitude: float) -> float:
    """Air density (kg/m^3) at the given altitude (m)."""
    return compute_atmosphere_properties(altitude)['density']


def compute_gravitational_acceleration(altitude: float) -> float:
    """
    Gravitational acceleration (m/s^2) at the given altitude (m).

    Inverse-square falloff from the sea-level value:
        g(h) = g0 * (R / (R + h))^2
    """
    ratio = (C.EARTH_MEAN_RADIUS / (C.EARTH_MEAN_RADIUS + altitude)) ** 2
    return C.ACCELERATION_GRAVITY_SEA_LEVEL * ratio


def sample_environment(altitude: float) -> EnvironmentSample:
    """Evaluate both environment functions at one altitude."""
    return EnvironmentSample(
        air_density=compute_air_density(altitude),
        gravitational_acceleration=compute_gravitational_acceleration(altitude),
    )


def sea_level_environment() -> EnvironmentSample:
    """Environment values at altitude 0, the reset defaults."""
    return sample_environment(0.0)
