"""
Falling Objects Simulation Package

Simulates a single body falling through the atmosphere under gravity and
drag, and maintains auto-scaling time-series graphs of its motion.

Modules:
    - constants: Physical constants and simulation parameters
    - objects: Immutable registry of droppable objects
    - environment: Air density and gravity as functions of altitude
    - state: Body state dataclass
    - forces: Weight, drag and net force
    - integrators: Semi-implicit Euler update chain
    - validation: Construction preconditions and anomaly detection
    - events: Observer interface
    - config: Simulation and graph configuration
    - clock: Simulation clock (play/pause/step/reset, termination)
    - series: Adaptive auto-scaling time-series engine
    - graphs: Position/velocity/acceleration graph bundle
    - main: Headless runner
    - plotting: matplotlib rendering of graphs and run logs
    - cli: Command-line entry point
"""

from .state import BodyState, create_body_state
from .clock import SimulationClock, ClockPhase
from .series import TimeSeriesEngine, SeriesBound, SeriesPhase
from .graphs import PVAGraphs
from .main import run_drop, simulate_drop, DropResult, SimulationLog
from .config import (
    SimulationConfig, SeriesConfig, create_default_config,
    create_basics_config, create_terminal_config, create_test_config,
)
from .objects import OBJECT_REGISTRY, ObjectParameters, lookup_object
from .validation import ValidationError

__version__ = "1.0.0"
__author__ = "Falling Objects Simulation Team"

__all__ = [
    'BodyState',
    'create_body_state',
    'SimulationClock',
    'ClockPhase',
    'TimeSeriesEngine',
    'SeriesBound',
    'SeriesPhase',
    'PVAGraphs',
    'run_drop',
    'simulate_drop',
    'DropResult',
    'SimulationLog',
    'SimulationConfig',
    'SeriesConfig',
    'create_default_config',
    'create_basics_config',
    'create_terminal_config',
    'create_test_config',
    'OBJECT_REGISTRY',
    'ObjectParameters',
    'lookup_object',
    'ValidationError',
]
