"""
Falling Objects Simulation - Numerical Integration

This module implements the update chain that advances the body by one step
with the semi-implicit (symplectic) Euler method:

    F = W + D             forces from the start of the step
    a = F / m
    v <- v + a * dt
    x <- x + v * dt       with the UPDATED velocity

Each stage re-derives from the current step's values and every result is
truncated before the next stage reads it.
"""

from . import constants as C
from .environment import EnvironmentSample
from .forces import compute_forces
from .state import BodyState
from .utils import truncate_value
from .validation import check_timestep


def semi_implicit_euler_step(body: BodyState, environment: EnvironmentSample, dt: float,
                             drag_enabled: bool = False,
                             digits: int = C.ROUNDING_DIGITS) -> BodyState:
    """
    Advance the body in place by one time step.

    A combusted body is left untouched.

    Args:
        body: Body state to update
        environment: Air density and gravity to use for this step
        dt: Time step (s)
        drag_enabled: Whether drag acts on the body
        digits: Truncation digits

    Returns:
        The same body, updated

    Raises:
        ValueError: If dt <= 0
    """
    check_timestep(dt)
    if body.combusted:
        return body

    forces = compute_forces(body, environment, drag_enabled, digits)
    body.weight_force = forces['weight']
    body.drag_force = forces['drag'] if forces['drag'] is not None else 0.0
    body.net_force = forces['net']

    body.acceleration = truncate_value(body.net_force / body.mass, digits)
    body.velocity = truncate_value(body.velocity + body.acceleration * dt, digits)
    body.position = truncate_value(body.position + body.velocity * dt, digits)
    return body
