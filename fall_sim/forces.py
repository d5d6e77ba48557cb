"""
Falling Objects Simulation - Force Computations

This module implements the force stages of the update chain:
- Weight (recomputed every tick, gravity varies with altitude)
- Aerodynamic drag (only when drag is enabled)
- Net force

Every value is truncated to the configured number of fractional digits
as soon as it is computed.
"""

from typing import Optional

import numpy as np

from . import constants as C
from .environment import EnvironmentSample
from .state import BodyState
from .types import ForceBreakdown
from .utils import truncate_value


def compute_weight_force(gravitational_acceleration: float, mass: float,
                         digits: int = C.ROUNDING_DIGITS) -> float:
    """
    Compute the weight of the body.

    W = g(h) * m, negative since g is signed toward the ground.
    """
    return truncate_value(gravitational_acceleration * mass, digits)


def compute_drag_force(drag_coefficient: float, air_density: float, velocity: float,
                       reference_area: float, digits: int = C.ROUNDING_DIGITS) -> float:
    """
    Compute aerodynamic drag, opposing the velocity.

    |F_drag| = 0.5 * Cd * rho * v^2 * A

    Returns:
        Signed drag force (N): positive for a falling body, negative for a
        rising one, zero at rest
    """
    drag = 0.5 * (drag_coefficient * air_density * velocity ** 2 * reference_area)
    if velocity > 0.0:
        drag = -drag
    return truncate_value(drag, digits)


def compute_net_force(weight_force: float, drag_force: Optional[float],
                      digits: int = C.ROUNDING_DIGITS) -> float:
    """
    Compute the net force.

    With drag absent (None) the net force is the weight alone; otherwise the
    sum of weight and signed drag.
    """
    if drag_force is None:
        net = weight_force
    else:
        net = weight_force + drag_force
    return truncate_value(net, digits)


def compute_forces(body: BodyState, environment: EnvironmentSample,
                   drag_enabled: bool, digits: int = C.ROUNDING_DIGITS) -> ForceBreakdown:
    """
    Evaluate the weight, drag and net force stages in order.

    Args:
        body: Current body state (velocity from the start of the step)
        environment: Air density and gravity at the body's altitude
        drag_enabled: Whether drag acts on the body
        digits: Truncation digits

    Returns:
        ForceBreakdown; `drag` is None when drag is disabled
    """
    weight = compute_weight_force(environment.gravitational_acceleration, body.mass, digits)
    drag = None
    if drag_enabled:
        drag = compute_drag_force(body.drag_coefficient, environment.air_density,
                                  body.velocity, body.reference_area, digits)
    net = compute_net_force(weight, drag, digits)
    return ForceBreakdown(weight=weight, drag=drag, net=net)


def compute_terminal_velocity(mass: float, drag_coefficient: float, reference_area: float,
                              air_density: float,
                              gravitational_acceleration: float = C.ACCELERATION_GRAVITY_SEA_LEVEL) -> float:
    """
    Speed at which drag balances weight.

    v_t = sqrt(2 m |g| / (rho Cd A))

    Returns:
        Terminal speed (m/s, unsigned); infinity without drag
    """
    denominator = air_density * drag_coefficient * reference_area
    if denominator <= 0.0:
        return float('inf')
    return float(np.sqrt(2.0 * mass * abs(gravitational_acceleration) / denominator))
