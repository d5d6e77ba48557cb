"""
Falling Objects Simulation - Object Registry

Immutable registry of the objects that can be dropped, keyed by an
upper-case identifier derived from the object's display name.
"""

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from . import constants as C
from .validation import ValidationError, check_object_parameters


@dataclass(frozen=True)
class ObjectParameters:
    """
    Physical parameters of one object type.

    Attributes:
        name: Display name
        mass: Mass (kg)
        drag_coefficient: Dimensionless drag coefficient
        reference_area: Frontal reference area (m^2)
        width: Characteristic width (m), used to size the parachute
        height: Characteristic height (m), equal to width for round objects
    """
    name: str
    mass: float
    drag_coefficient: float
    reference_area: float
    width: float
    height: float

    @property
    def parachute_area(self) -> float:
        """Reference area of a parachute twice the width of the object (m^2)."""
        return math.pi * self.width ** 2


def _entry(name: str, mass: float, reference_area: float, drag_coefficient: float,
           size) -> Tuple[str, ObjectParameters]:
    if isinstance(size, tuple):
        width, height = size
    else:
        width = height = size
    params = ObjectParameters(name=name, mass=mass, drag_coefficient=drag_coefficient,
                              reference_area=reference_area, width=width, height=height)
    return name_to_key(name), params


def name_to_key(object_name: str) -> str:
    """
    Convert a display name ("Ping Pong Ball") to its registry key ("PING_PONG_BALL").

    Unicode left-to-right embedding marks that localized strings may carry
    are stripped.
    """
    return (object_name.strip().upper()
            .replace(' ', '_')
            .replace('\u202a', '')
            .replace('\u202c', ''))


OBJECT_REGISTRY: Mapping[str, ObjectParameters] = MappingProxyType(dict([
    _entry("Badminton Shuttlecock", 0.00515, 0.0033, 0.61, (0.064, 0.083)),
    _entry("Baseball", 0.14, 0.042, 0.3, 0.23),
    _entry("Bowling Ball", 7.25, 1.47, 0.5, 0.218),
    _entry("Football", 0.411, 0.023, 0.055, (0.171, 0.228)),
    _entry("Golf Ball", 0.045, 0.00143, 0.3, 0.043),
    _entry("Model Rocket", 0.0402, 0.00049, 0.75, (0.113, 0.345)),
    _entry("Ping Pong Ball", 0.0027, 0.0013, 0.5, 0.04),
    _entry("Scale Sports Car", 283.63, 2.04, 0.32, (1.82, 4.37)),
]))

OBJECT_NAMES = tuple(params.name for params in OBJECT_REGISTRY.values())


def lookup_object(object_name: str,
                  registry: Mapping[str, ObjectParameters] = OBJECT_REGISTRY) -> ObjectParameters:
    """
    Look up an object's parameters by display name or registry key.

    Raises:
        ValidationError: If the object is unknown or its parameters are invalid
    """
    key = name_to_key(object_name)
    try:
        params = registry[key]
    except KeyError:
        raise ValidationError(
            f"Unknown object type: {object_name!r} (known: {', '.join(sorted(registry))})"
        ) from None
    check_object_parameters(params.mass, params.drag_coefficient, params.reference_area)
    return params


def default_object() -> ObjectParameters:
    """Parameters of the object selected on entering the simulation."""
    return lookup_object(C.DEFAULT_OBJECT_NAME)
