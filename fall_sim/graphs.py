"""
Falling Objects Simulation - Position / Velocity / Acceleration Graphs

Bundles three time-series engines fed from a simulation clock. The bundle
subscribes to the clock's step and reset events; each engine then applies
its own sampling cadence.
"""

from typing import Callable, Dict, Optional

from .clock import SimulationClock
from .config import SeriesConfig
from .series import TimeSeriesEngine


class PVAGraphs:
    """
    Position, velocity and acceleration graphs for one clock.

    Without an explicit config the engines negate every sample, so the
    signals of a falling body plot upward.
    """

    def __init__(self, clock: SimulationClock, config: Optional[SeriesConfig] = None):
        self.clock = clock
        if config is None:
            # Negated so a fall plots up the screen
            config = SeriesConfig(invert=True)
        self.position = TimeSeriesEngine(config, name='position')
        self.velocity = TimeSeriesEngine(config, name='velocity')
        self.acceleration = TimeSeriesEngine(config, name='acceleration')

        # Read through the clock so a newly selected body is picked up
        self._sources: Dict[str, Callable[[], float]] = {
            'position': lambda: self.clock.body.position,
            'velocity': lambda: self.clock.body.velocity,
            'acceleration': lambda: self.clock.body.acceleration,
        }
        self._unsubscribers = [
            clock.on_stepped.subscribe(self.sample),
            clock.on_reset.subscribe(self.reset),
        ]

    @property
    def engines(self) -> Dict[str, TimeSeriesEngine]:
        return {
            'position': self.position,
            'velocity': self.velocity,
            'acceleration': self.acceleration,
        }

    def sample(self, elapsed_time: float) -> None:
        """Offer the current body values to every engine."""
        for name, engine in self.engines.items():
            engine.update(elapsed_time, self._sources[name]())

    def reset(self) -> None:
        for engine in self.engines.values():
            engine.reset()

    def detach(self) -> None:
        """Stop listening to the clock."""
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
