"""
Falling Objects Simulation - Simulation Clock

The clock owns the single falling body and the environment values applied to
it, and orchestrates one integration tick:

    1. Refresh air density / gravity from |position| (variable altitude only)
    2. Run the body's update chain
    3. Combustion check: a body moving away from the ground is flagged
       combusted and the simulation disabled
    4. Ground stop: clamp the body to the ground and disable the simulation
    5. Accumulate elapsed time

State machine:

    PAUSED <-> RUNNING        play() / pause()
    any    ->  DISABLED       ground contact, combustion (forces PAUSED)
    any    ->  PAUSED         reset() (re-enables)

    Setting enabled = True on a combusted body is ignored, so reset() is the
    only way out of a combustion anomaly.
"""

from enum import Enum, auto
import logging
from typing import Mapping, Optional

from .config import SimulationConfig, create_default_config
from .environment import EnvironmentSample, sample_environment, sea_level_environment
from .events import Event
from .integrators import semi_implicit_euler_step
from .objects import OBJECT_REGISTRY, ObjectParameters, name_to_key
from .state import BodyState, create_body_state
from .validation import is_velocity_anomalous

logger = logging.getLogger(__name__)


class ClockPhase(Enum):
    PAUSED = auto()
    RUNNING = auto()
    DISABLED = auto()  # absorbing until reset(), always paused


class SimulationClock:
    """
    Drives one falling body under a fixed screen configuration.

    Events:
        on_running_changed(running), on_enabled_changed(enabled),
        on_combusted(), on_ground_contact(), on_stepped(elapsed_time),
        on_reset(), on_object_changed(key)
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 registry: Mapping[str, ObjectParameters] = OBJECT_REGISTRY):
        self.config = config or create_default_config()
        self.registry = registry

        self.on_running_changed = Event('running_changed')
        self.on_enabled_changed = Event('enabled_changed')
        self.on_combusted = Event('combusted')
        self.on_ground_contact = Event('ground_contact')
        self.on_stepped = Event('stepped')
        self.on_reset = Event('reset')
        self.on_object_changed = Event('object_changed')

        self._running = False
        self._enabled = True
        self.elapsed_time = 0.0

        env = sea_level_environment()
        self.air_density = env.air_density
        self.gravitational_acceleration = env.gravitational_acceleration
        self.drag_enabled = self.config.initial_drag_enabled
        self.parachute_deployed = False

        self.body: BodyState = create_body_state(
            self.config.default_object, self.config.initial_altitude, registry
        )

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._running

    @running.setter
    def running(self, value: bool) -> None:
        value = bool(value) and self._enabled
        if value != self._running:
            self._running = value
            self.on_running_changed.emit(value)

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        value = bool(value)
        if value and self.body.combusted:
            # Combustion is only cleared by reset()
            return
        if value != self._enabled:
            self._enabled = value
            self.on_enabled_changed.emit(value)
        if not value:
            # Disabling always pauses
            self.running = False

    @property
    def phase(self) -> ClockPhase:
        if not self._enabled:
            return ClockPhase.DISABLED
        return ClockPhase.RUNNING if self._running else ClockPhase.PAUSED

    @property
    def environment(self) -> EnvironmentSample:
        return EnvironmentSample(self.air_density, self.gravitational_acceleration)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Start running. Has no effect while disabled."""
        self.running = True

    def pause(self) -> None:
        self.running = False

    def toggle_play(self) -> bool:
        """Flip between running and paused, returning the new running flag."""
        self.running = not self._running
        return self._running

    def step(self, dt: float) -> bool:
        """
        Advance by dt if running and enabled; called from the periodic tick.

        Returns:
            True if the simulation advanced
        """
        if not (self._running and self._enabled) or self.body.combusted:
            return False
        self.advance(dt)
        return True

    def manual_step(self, dt: Optional[float] = None) -> bool:
        """
        Advance once regardless of the running flag (step button).

        Args:
            dt: Time step (s), defaults to config.step_dt

        Returns:
            True if the simulation advanced (only while enabled)
        """
        if not self._enabled or self.body.combusted:
            return False
        self.advance(self.config.step_dt if dt is None else dt)
        return True

    def advance(self, dt: float) -> None:
        """Perform one integration tick of length dt (s); a combusted body does not advance."""
        body = self.body
        if body.combusted:
            return

        if not self.config.constant_altitude:
            env = sample_environment(body.altitude)
            self.air_density = env.air_density
            self.gravitational_acceleration = env.gravitational_acceleration

        semi_implicit_euler_step(body, self.environment, dt,
                                 drag_enabled=self.drag_enabled,
                                 digits=self.config.rounding_digits)

        if is_velocity_anomalous(body.velocity, self._enabled):
            body.combusted = True
            logger.warning(f"Combustion anomaly at t={self.elapsed_time + dt:.3f}s: "
                           f"{body.name} velocity flipped to {body.velocity:.3f} m/s")
            self.on_combusted.emit()
            self.enabled = False

        if self.config.ground_stop and body.position <= 0.0:
            body.position = 0.0
            if self._enabled:
                logger.info(f"Ground contact at t={self.elapsed_time + dt:.3f}s, "
                            f"v={body.velocity:.3f} m/s")
                self.on_ground_contact.emit()
            self.enabled = False

        self.elapsed_time += dt
        self.on_stepped.emit(self.elapsed_time)

    def reset(self) -> None:
        """Return to the initial paused state with a fresh body and sea-level environment."""
        self.elapsed_time = 0.0
        env = sea_level_environment()
        self.air_density = env.air_density
        self.gravitational_acceleration = env.gravitational_acceleration
        self.drag_enabled = self.config.initial_drag_enabled
        self.parachute_deployed = False

        self.body.initial_altitude = self.config.initial_altitude
        self.body.reset()

        self.running = False
        self.enabled = True
        logger.debug(f"Clock reset: {self.body}")
        self.on_reset.emit()

    # ------------------------------------------------------------------
    # Configuration changes
    # ------------------------------------------------------------------

    def select_object(self, object_name: str) -> None:
        """
        Replace the body with a new object type and reset.

        Selecting the current object again does nothing.

        Raises:
            ValidationError: If the object is unknown or has invalid parameters
        """
        key = name_to_key(object_name)
        if key == self.body.key:
            return
        self.body = create_body_state(key, self.config.initial_altitude, self.registry)
        logger.info(f"Selected object: {self.body.name} (m={self.body.mass} kg, "
                    f"Cd={self.body.drag_coefficient}, A={self.body.reference_area} m^2)")
        self.reset()
        self.on_object_changed.emit(key)

    def set_drag_enabled(self, enabled: bool) -> None:
        """Toggle drag; takes effect from the next step."""
        self.drag_enabled = bool(enabled)

    def deploy_parachute(self, deployed: bool = True) -> None:
        """
        Deploy or stow the parachute.

        A deployed parachute replaces the body's reference area with that of a
        canopy twice the object's width.

        Raises:
            ValueError: If the configuration does not enable the parachute
        """
        if not self.config.enable_parachute:
            raise ValueError("Parachute is not enabled for this configuration")
        self.parachute_deployed = bool(deployed)
        params = self.body.parameters
        self.body.reference_area = params.parachute_area if deployed else params.reference_area

    def set_initial_altitude(self, altitude: float) -> bool:
        """
        Move the body to a new starting altitude (m).

        Only acts while paused; the call is ignored while running.

        Returns:
            True if the body was moved

        Raises:
            ValueError: If altitude is negative
        """
        if altitude < 0.0:
            raise ValueError(f"Initial altitude must be non-negative, got {altitude}")
        if self._running:
            return False
        self.body.initial_altitude = float(altitude)
        self.body.position = float(altitude)
        return True

    def __repr__(self) -> str:
        return (f"SimulationClock(t={self.elapsed_time:.3f}s, phase={self.phase.name}, "
                f"body={self.body})")
