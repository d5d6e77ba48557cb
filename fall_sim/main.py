"""
Falling Objects Simulation - Headless Runner

This module drives a simulation clock from a fixed-step loop instead of an
animation frame source, logging per-step telemetry:
- Single drop from the configured initial conditions
- Termination on ground contact, combustion or maximum time
- Optional position/velocity/acceleration graphs fed on their own cadence
"""

from dataclasses import dataclass, field
import logging
import time
from typing import List, Optional, Tuple

from . import constants as C
from .clock import SimulationClock
from .config import SeriesConfig, SimulationConfig, create_default_config
from .graphs import PVAGraphs
from .state import BodyState

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    position: List[float] = field(default_factory=list)
    velocity: List[float] = field(default_factory=list)
    acceleration: List[float] = field(default_factory=list)
    weight_force: List[float] = field(default_factory=list)
    drag_force: List[float] = field(default_factory=list)
    net_force: List[float] = field(default_factory=list)
    air_density: List[float] = field(default_factory=list)
    gravitational_acceleration: List[float] = field(default_factory=list)

    def append(self, clock: SimulationClock):
        """Log data from the current timestep."""
        body = clock.body
        self.time.append(clock.elapsed_time)
        self.position.append(body.position)
        self.velocity.append(body.velocity)
        self.acceleration.append(body.acceleration)
        self.weight_force.append(body.weight_force)
        self.drag_force.append(body.drag_force)
        self.net_force.append(body.net_force)
        self.air_density.append(clock.air_density)
        self.gravitational_acceleration.append(clock.gravitational_acceleration)

    def __len__(self) -> int:
        return len(self.time)


@dataclass
class DropResult:
    """Everything produced by one headless drop."""
    clock: SimulationClock
    graphs: PVAGraphs
    log: SimulationLog
    reason: str

    @property
    def body(self) -> BodyState:
        return self.clock.body


def check_termination(clock: SimulationClock, max_time: float) -> Tuple[bool, str]:
    """
    Check whether a headless run should stop.

    Returns:
        (should_terminate, reason)
    """
    if clock.body.combusted:
        return True, "Combustion anomaly"
    if not clock.enabled:
        return True, "Ground contact"
    if clock.elapsed_time >= max_time:
        return True, f"Maximum simulation time reached ({max_time:.1f}s)"
    return False, ""


def simulate_drop(object_name: Optional[str] = None, config: Optional[SimulationConfig] = None,
                  dt: Optional[float] = None, max_time: float = C.MAX_TIME,
                  verbose: Optional[bool] = None, drag_enabled: Optional[bool] = None,
                  parachute: bool = False,
                  series_config: Optional[SeriesConfig] = None) -> DropResult:
    """
    Drop one object and run until it terminates.

    Args:
        object_name: Object to drop (default from config)
        config: SimulationConfig instance. If None a default is created.
        dt: Time step (default config.step_dt)
        max_time: Maximum simulated time (s)
        verbose: Print a status table. Overrides config.verbose if given.
        drag_enabled: Override the configured initial drag state
        parachute: Deploy the parachute before the drop
        series_config: Configuration for the PVA graphs

    Returns:
        DropResult with the clock, graphs, log and termination reason
    """
    if config is None:
        config = create_default_config()
    if dt is None:
        dt = config.step_dt
    if verbose is None:
        verbose = config.verbose

    clock = SimulationClock(config)
    if object_name is not None:
        clock.select_object(object_name)
    graphs = PVAGraphs(clock, series_config)
    if drag_enabled is not None:
        clock.set_drag_enabled(drag_enabled)
    if parachute:
        clock.deploy_parachute(True)

    log = SimulationLog()

    logger.info(f"Starting drop: object={clock.body.name}, dt={dt:.4f}s, "
                f"max_time={max_time}s, drag={clock.drag_enabled}")
    logger.debug(f"Initial state: {clock.body}")

    if verbose:
        print("\n" + "=" * 72)
        print(f"FALLING OBJECT DROP | {clock.body.name} | dt={dt:.4f}s | T_max={max_time}s")
        print("=" * 72)
        print(f"{'Time (s)':^10} | {'Pos (m)':^12} | {'Vel (m/s)':^12} | {'Acc (m/s2)':^12} | {'Drag (N)':^12}")
        print("-" * 72)

    start_time = time.time()
    last_print_time = 0.0
    clock.play()

    while True:
        should_terminate, reason = check_termination(clock, max_time)
        if should_terminate:
            break

        clock.step(dt)
        log.append(clock)

        if verbose and clock.elapsed_time - last_print_time >= 1.0:
            _print_status(clock)
            last_print_time = clock.elapsed_time

    elapsed = time.time() - start_time
    logger.info(f"Drop terminated: {reason}")
    _log_completion(clock, len(log), elapsed)
    if verbose:
        print(f"\nTermination: {reason}")

    return DropResult(clock=clock, graphs=graphs, log=log, reason=reason)


def run_drop(object_name: Optional[str] = None, config: Optional[SimulationConfig] = None,
             dt: Optional[float] = None, max_time: float = C.MAX_TIME,
             verbose: Optional[bool] = None, drag_enabled: Optional[bool] = None) -> tuple:
    """
    Drop one object headlessly.

    Returns:
        (final_body, log, termination_reason) tuple
    """
    result = simulate_drop(object_name, config=config, dt=dt, max_time=max_time,
                           verbose=verbose, drag_enabled=drag_enabled)
    return result.body, result.log, result.reason


def _print_status(clock: SimulationClock):
    """Print a formatted status row."""
    body = clock.body
    msg = (f"{clock.elapsed_time:10.2f} | {body.position:12.3f} | "
           f"{body.velocity:12.3f} | {body.acceleration:12.3f} | {body.drag_force:12.4f}")
    print(msg)
    logger.debug(msg)


def _log_completion(clock: SimulationClock, steps: int, elapsed: float):
    """Log completion statistics."""
    logger.info(f"Drop complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {clock.body}")
