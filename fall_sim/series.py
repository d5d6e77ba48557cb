"""
Falling Objects Simulation - Adaptive Time-Series Engine

Maintains a real-time plot of one scalar signal against elapsed simulation
time whose axis bounds are not known up front.

Axis growth:
    value axis   exponential, independently above and below:
                 max = base * 2^(++upper_power), min = -base * 2^(lower_power++)
    time axis    linear, max += base_time_interval

Rendering cost:
    Any bound change makes the existing pixel path meaningless, so the engine
    re-projects every buffered sample (full replot) and raises a one-shot
    replot flag. Otherwise only the newest sample is projected and appended.
    Because the value axis doubles, full replots of a monotonically growing
    signal become exponentially rarer.

Projection (pixels, origin at the bottom-left of the plot area):
    x = (t - t_min) * time_scale,   time_scale  = plot_width  / (t_max - t_min)
    y = (v - v_min) * value_scale,  value_scale = plot_height / (v_max - v_min)
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import List, Optional, Tuple

import numpy as np

from .config import SeriesConfig
from .events import Event

logger = logging.getLogger(__name__)


class SeriesPhase(Enum):
    EMPTY = auto()
    STEADY = auto()
    RESCALING = auto()  # transient, during a full replot


@dataclass
class SeriesBound:
    """Current [min, max] extent of one plotted axis."""
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def as_tuple(self) -> Tuple[float, float]:
        return (self.min, self.max)


class TimeSeriesEngine:
    """
    Growable axis bounds, scale factors and point buffer for one signal.

    Events:
        on_replotted(engine): the whole path was re-derived
        on_appended(engine, point): one projected point was appended
    """

    def __init__(self, config: Optional[SeriesConfig] = None, name: str = 'value'):
        self.config = config or SeriesConfig()
        self.name = name
        self.on_replotted = Event(f'{name}.replotted')
        self.on_appended = Event(f'{name}.appended')
        self.reset()

    def reset(self) -> None:
        """Clear the buffer, bounds and growth counters back to a single interval."""
        cfg = self.config
        self.value_bound = SeriesBound(0.0, cfg.base_value_interval)
        self.time_bound = SeriesBound(0.0, cfg.base_time_interval)
        self._upper_power = 0
        self._lower_power = 0
        self.last_sample_time = 0.0
        self._times: List[float] = []
        self._values: List[float] = []
        self._path: List[Tuple[float, float]] = []
        self.replot_needed = False
        self.replot_count = 0
        self.append_count = 0
        self.phase = SeriesPhase.EMPTY
        self._update_scales()

    # ------------------------------------------------------------------
    # Read-only observation
    # ------------------------------------------------------------------

    @property
    def samples(self) -> List[Tuple[float, float]]:
        """Buffered (time, value) samples in insertion order."""
        return list(zip(self._times, self._values))

    @property
    def times(self) -> np.ndarray:
        return np.asarray(self._times, dtype=np.float64)

    @property
    def values(self) -> np.ndarray:
        return np.asarray(self._values, dtype=np.float64)

    @property
    def path(self) -> List[Tuple[float, float]]:
        """Currently rendered path in pixel coordinates."""
        return list(self._path)

    @property
    def zero_line(self) -> float:
        """Height of the value axis' zero line above the bottom of the plot (px)."""
        return self.origin_location * self.config.plot_height

    def __len__(self) -> int:
        return len(self._times)

    def value_ticks(self, count: Optional[int] = None) -> np.ndarray:
        """Evenly spaced tick values across the value axis."""
        return np.linspace(self.value_bound.min, self.value_bound.max,
                           count or self.config.axis_label_count)

    def time_ticks(self, count: Optional[int] = None) -> np.ndarray:
        """Evenly spaced tick values across the time axis."""
        return np.linspace(self.time_bound.min, self.time_bound.max,
                           count or self.config.axis_label_count)

    def consume_replot(self) -> bool:
        """Return the one-shot replot flag and clear it."""
        needed = self.replot_needed
        self.replot_needed = False
        return needed

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def update(self, elapsed_time: float, value: float) -> bool:
        """
        Offer a sample from the current tick; taken only on the sampling cadence.

        A sample is taken once elapsed_time - last_sample_time exceeds the
        update interval. Simulated time drives the cadence, not wall time.

        Returns:
            True if the sample was buffered
        """
        if elapsed_time - self.last_sample_time <= self.config.update_interval:
            return False
        self.last_sample_time = elapsed_time
        return self.add_sample(elapsed_time, value) is not None

    def add_sample(self, time: float, value: float) -> Optional[bool]:
        """
        Buffer one sample, bypassing the cadence check.

        Returns:
            True if the sample caused a full replot, False if it was appended,
            None if it was rejected (non-finite)
        """
        if self.config.invert:
            value = -value
        if not (np.isfinite(time) and np.isfinite(value)):
            logger.warning(f"{self.name}: dropping non-finite sample ({time}, {value})")
            return None

        time = float(time)
        value = float(value)
        self._times.append(time)
        self._values.append(value)

        # Evaluate both axes; no short-circuit
        value_grew = self._grow_value_axis(value)
        time_grew = self._grow_time_axis(time)

        if value_grew or time_grew:
            self.phase = SeriesPhase.RESCALING
            self.replot()
            rescaled = True
        else:
            self._append_point(time, value)
            rescaled = False
        self.phase = SeriesPhase.STEADY
        return rescaled

    # ------------------------------------------------------------------
    # Axis growth
    # ------------------------------------------------------------------

    def _grow_value_axis(self, value: float) -> bool:
        base = self.config.base_value_interval
        grew = False
        while value > self.value_bound.max:
            self._upper_power += 1
            self.value_bound.max = base * 2 ** self._upper_power
            grew = True
        while value < self.value_bound.min:
            self.value_bound.min = -base * 2 ** self._lower_power
            self._lower_power += 1
            grew = True
        return grew

    def _grow_time_axis(self, time: float) -> bool:
        grew = False
        while time > self.time_bound.max:
            self.time_bound.max += self.config.base_time_interval
            grew = True
        return grew

    def _update_scales(self) -> None:
        self.value_scale = self.config.plot_height / self.value_bound.span
        self.time_scale = self.config.plot_width / self.time_bound.span
        self.origin_location = abs(self.value_bound.min) / self.value_bound.span

    # ------------------------------------------------------------------
    # Projection
    # ------------------------------------------------------------------

    def project(self, time, value):
        """Map model (time, value) to plot pixels; accepts scalars or arrays."""
        x = (np.asarray(time, dtype=np.float64) - self.time_bound.min) * self.time_scale
        y = (np.asarray(value, dtype=np.float64) - self.value_bound.min) * self.value_scale
        return x, y

    def replot(self) -> None:
        """Recompute scales and re-project every buffered sample from scratch."""
        self._update_scales()
        xs, ys = self.project(self.times, self.values)
        self._path = list(zip(xs.tolist(), ys.tolist()))
        self.replot_needed = True
        self.replot_count += 1
        logger.debug(f"{self.name}: replot #{self.replot_count} of {len(self._path)} points, "
                     f"value={self.value_bound.as_tuple()}, time={self.time_bound.as_tuple()}")
        self.on_replotted.emit(self)

    def _append_point(self, time: float, value: float) -> None:
        x, y = self.project(time, value)
        point = (float(x), float(y))
        self._path.append(point)
        self.append_count += 1
        self.on_appended.emit(self, point)

    def __repr__(self) -> str:
        return (f"TimeSeriesEngine({self.name!r}, n={len(self)}, "
                f"value={self.value_bound.as_tuple()}, time={self.time_bound.as_tuple()})")
