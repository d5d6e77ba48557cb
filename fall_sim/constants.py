"""
Falling Objects Simulation - Physical Constants and Simulation Parameters

This module defines the physical constants, atmosphere model coefficients,
numerical policy and graph defaults used throughout the simulation.
"""

# =============================================================================
# EARTH PARAMETERS
# =============================================================================

# Earth mean radius (m)
EARTH_MEAN_RADIUS = 6371009.0

# Acceleration due to gravity at sea level (m/s^2), signed toward the ground
ACCELERATION_GRAVITY_SEA_LEVEL = -9.80665

# =============================================================================
# ATMOSPHERE MODEL (1960s standard Earth atmosphere, three branches)
# Temperature in degrees C, pressure in kPa, density in kg/m^3
# =============================================================================

TROPOSPHERE_CEILING = 11000.0  # m
LOWER_STRATOSPHERE_CEILING = 25000.0  # m

# Troposphere: T = 15.04 - 0.00649 h, P = 101.29 [(T + 273.1) / 288.08]^5.256
TROPOSPHERE_T0 = 15.04
TROPOSPHERE_LAPSE = 0.00649
TROPOSPHERE_P0 = 101.29
TROPOSPHERE_T_REF = 288.08
TROPOSPHERE_EXPONENT = 5.256

# Lower stratosphere: T = -56.46, P = 22.65 e^(1.73 - 0.000157 h)
LOWER_STRATOSPHERE_T = -56.46
LOWER_STRATOSPHERE_P0 = 22.65
LOWER_STRATOSPHERE_OFFSET = 1.73
LOWER_STRATOSPHERE_DECAY = 0.000157

# Upper stratosphere: T = -131.21 + 0.00299 h, P = 2.488 [(T + 273.1) / 216.6]^-11.388
UPPER_STRATOSPHERE_T0 = -131.21
UPPER_STRATOSPHERE_LAPSE = 0.00299
UPPER_STRATOSPHERE_P0 = 2.488
UPPER_STRATOSPHERE_T_REF = 216.6
UPPER_STRATOSPHERE_EXPONENT = -11.388

# Offset from degrees C to K used by the model (note: 273.1, not 273.15)
KELVIN_OFFSET = 273.1

# Specific gas constant for air in kJ/(kg K), matches pressure in kPa
R_AIR = 0.2869

# =============================================================================
# NUMERICAL POLICY
# =============================================================================

# Fractional digits kept (by truncation toward zero) on every derived value
ROUNDING_DIGITS = 6

# Manual single-step interval (s), one frame at 60 fps
STEP_DT = 1.0 / 60.0

# Default maximum duration of a headless run (s)
MAX_TIME = 120.0

# =============================================================================
# SELECTION DEFAULTS
# =============================================================================

DEFAULT_OBJECT_NAME = "Baseball"

# Initial drop altitude used by the terminal-velocity preset (m)
TERMINAL_INITIAL_ALTITUDE = 10.0

# =============================================================================
# VALUE GRAPH DEFAULTS
# =============================================================================

VG_MAX_VALUE_INTERVAL = 10.0  # initial (and base) extent of the value axis
VG_MAX_TIME_INTERVAL = 10.0  # s, initial extent and linear growth step of the time axis
VG_UPDATE_FREQUENCY = 0.05  # s of simulated time between samples
VG_PLOT_WIDTH = 300.0  # px
VG_PLOT_HEIGHT = 100.0  # px
VG_AXIS_LABEL_COUNT = 5
