"""
Falling Objects Simulation - Validation Checks

This module implements the construction-time precondition checks on object
parameters and the runtime anomaly check on the body's velocity.

Preconditions raise ValidationError once, when a body is created. The
anomaly check never raises: it reports a physically impossible state so the
caller can transition into the terminal combusted state.
"""


class ValidationError(Exception):
    """Raised when object parameters violate a construction precondition."""
    pass


def check_object_parameters(mass: float, drag_coefficient: float,
                            reference_area: float) -> bool:
    """
    Check that an object's physical parameters are usable.

    Args:
        mass: Mass (kg), must be positive
        drag_coefficient: Drag coefficient, must be non-negative
        reference_area: Reference area (m^2), must be positive

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not mass > 0.0:
        raise ValidationError(f"Mass must be positive, got {mass} kg")
    if not drag_coefficient >= 0.0:
        raise ValidationError(
            f"Drag coefficient must be non-negative, got {drag_coefficient}"
        )
    if not reference_area > 0.0:
        raise ValidationError(
            f"Reference area must be positive, got {reference_area} m^2"
        )
    return True


def check_timestep(dt: float) -> bool:
    """
    Check that an integration time step is positive.

    Raises:
        ValueError: If dt <= 0
    """
    if not dt > 0.0:
        raise ValueError(f"Time step dt must be positive, got {dt}")
    return True


def is_velocity_anomalous(velocity: float, sim_enabled: bool) -> bool:
    """
    Detect a falling object moving away from the ground.

    A dropped object can only move upward through a numerical artifact:
    a low-mass object pushed past its terminal velocity (by toggling drag
    mid-fall or a large dt) overshoots under drag and its velocity flips
    sign. Only reported while the simulation is enabled.
    """
    return velocity > 0.0 and sim_enabled
