"""
Falling Objects Simulation - Body State

This module defines the state of the single falling body: its physical
parameters, kinematic variables and the forces acting on it. The state is
owned exclusively by the simulation clock and mutated once per tick by the
integrator.

Sign convention: position is a signed altitude (0 = ground), and every
vector quantity is positive away from the ground.
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .objects import OBJECT_REGISTRY, ObjectParameters, lookup_object, name_to_key
from .validation import check_object_parameters


@dataclass
class BodyState:
    """
    State of one falling body.

    Attributes:
        parameters: Registry entry the body was created from
        mass: Mass (kg)
        drag_coefficient: Drag coefficient
        reference_area: Reference area (m^2), changes while a parachute is deployed
        initial_altitude: Altitude restored on reset (m)
        position: Signed altitude (m)
        velocity: Velocity (m/s)
        acceleration: Acceleration (m/s^2)
        weight_force: Weight (N)
        drag_force: Drag (N), 0 while drag is disabled
        net_force: Net force (N)
        combusted: Terminal anomaly flag; no physical update until reset

    Raises:
        ValidationError: If mass, drag coefficient or reference area is invalid
    """

    parameters: ObjectParameters
    mass: Optional[float] = None
    drag_coefficient: Optional[float] = None
    reference_area: Optional[float] = None
    initial_altitude: float = 0.0
    position: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0
    weight_force: float = 0.0
    drag_force: float = 0.0
    net_force: float = 0.0
    combusted: bool = False

    def __post_init__(self):
        """Fill unset physical parameters from the registry entry, then validate them."""
        if self.mass is None:
            self.mass = self.parameters.mass
        if self.drag_coefficient is None:
            self.drag_coefficient = self.parameters.drag_coefficient
        if self.reference_area is None:
            self.reference_area = self.parameters.reference_area
        check_object_parameters(self.mass, self.drag_coefficient, self.reference_area)

    @property
    def name(self) -> str:
        return self.parameters.name

    @property
    def key(self) -> str:
        """Registry key of the body's object type."""
        return name_to_key(self.parameters.name)

    @property
    def altitude(self) -> float:
        """Unsigned altitude used to query the environment (m)."""
        return abs(self.position)

    def reset(self) -> None:
        """Restore parameters and kinematics to their construction values."""
        self.mass = self.parameters.mass
        self.drag_coefficient = self.parameters.drag_coefficient
        self.reference_area = self.parameters.reference_area
        self.position = self.initial_altitude
        self.velocity = 0.0
        self.acceleration = 0.0
        self.weight_force = 0.0
        self.drag_force = 0.0
        self.net_force = 0.0
        self.combusted = False

    def copy(self) -> 'BodyState':
        return replace(self)

    def __str__(self) -> str:
        return (
            f"BodyState({self.name}, "
            f"x={self.position:.3f}m, "
            f"v={self.velocity:.3f}m/s, "
            f"a={self.acceleration:.3f}m/s^2"
            f"{', combusted' if self.combusted else ''})"
        )


def create_body_state(object_name: str, initial_altitude: float = 0.0,
                      registry: Mapping[str, ObjectParameters] = OBJECT_REGISTRY) -> BodyState:
    """
    Create the state for a newly selected object.

    Args:
        object_name: Display name or registry key of the object
        initial_altitude: Starting altitude (m)
        registry: Object registry to look the parameters up in

    Returns:
        BodyState at rest at the initial altitude

    Raises:
        ValidationError: If the object is unknown or has invalid parameters
    """
    params = lookup_object(object_name, registry)
    return BodyState(
        parameters=params,
        initial_altitude=initial_altitude,
        position=initial_altitude,
    )
