"""
Falling Objects Simulation - Type Definitions

TypedDict definitions for structured return types.
"""

from typing import Optional, TypedDict


class AtmosphereProperties(TypedDict):
    """Return type for atmosphere model output."""
    temperature: float  # Temperature (deg C)
    pressure: float  # Pressure (kPa)
    density: float  # Density (kg/m^3)


class ForceBreakdown(TypedDict):
    """Return type for one evaluation of the force stages.

    Sign convention: positive is away from the ground. Weight is negative,
    drag opposes velocity. `drag` is None when drag is disabled, which is
    distinct from a drag force of zero.
    """
    weight: float  # Weight force (N)
    drag: Optional[float]  # Drag force (N) or None
    net: float  # Net force (N)
