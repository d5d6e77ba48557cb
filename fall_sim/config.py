"""
Falling Objects Simulation - Configuration

This module provides frozen dataclasses for dependency injection, so that
screen variants (basics, terminal velocity) are expressed as configuration
of a single clock type rather than as subclasses.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for a simulation clock.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.
    """

    # ── Environment ──────────────────────────────────────────────────────
    # If False, air density and gravity are recomputed from |position| each step
    constant_altitude: bool = True

    # ── Termination ──────────────────────────────────────────────────────
    # Clamp to the ground and disable the simulation on ground contact
    ground_stop: bool = False

    # ── Drag / parachute ─────────────────────────────────────────────────
    initial_drag_enabled: bool = False
    enable_parachute: bool = False

    # ── Initial conditions ───────────────────────────────────────────────
    initial_altitude: float = 0.0
    default_object: str = C.DEFAULT_OBJECT_NAME

    # ── Numerics ─────────────────────────────────────────────────────────
    rounding_digits: int = C.ROUNDING_DIGITS
    step_dt: float = C.STEP_DT

    # ── Misc ─────────────────────────────────────────────────────────────
    verbose: bool = True


@dataclass(frozen=True)
class SeriesConfig:
    """
    Immutable configuration for one adaptive time-series graph.

    Attributes:
        base_value_interval: Initial upper extent of the value axis; growth
            doubles it (interval * 2^n)
        base_time_interval: Initial extent of the time axis and its linear
            growth step (s)
        update_interval: Simulated time between samples (s)
        plot_width: Width of the plot area (px)
        plot_height: Height of the plot area (px)
        axis_label_count: Number of tick labels per axis
        invert: Negate samples so a falling signal plots upward
    """
    base_value_interval: float = C.VG_MAX_VALUE_INTERVAL
    base_time_interval: float = C.VG_MAX_TIME_INTERVAL
    update_interval: float = C.VG_UPDATE_FREQUENCY
    plot_width: float = C.VG_PLOT_WIDTH
    plot_height: float = C.VG_PLOT_HEIGHT
    axis_label_count: int = C.VG_AXIS_LABEL_COUNT
    invert: bool = False


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_basics_config(**overrides) -> SimulationConfig:
    """Infinite fall at sea level: constant altitude, drag initially off."""
    defaults = dict(constant_altitude=True, ground_stop=False,
                    initial_drag_enabled=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)


def create_terminal_config(**overrides) -> SimulationConfig:
    """Drop to the ground from altitude with drag on and a deployable parachute."""
    defaults = dict(constant_altitude=False, ground_stop=True,
                    initial_drag_enabled=True, enable_parachute=True,
                    initial_altitude=C.TERMINAL_INITIAL_ALTITUDE)
    defaults.update(overrides)
    return SimulationConfig(**defaults)


def create_test_config(**overrides) -> SimulationConfig:
    """Create a quiet config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(verbose=False)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
