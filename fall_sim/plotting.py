"""
Falling Objects Simulation - Plot Rendering

Renders time-series engines and headless run logs to image files with
matplotlib. Axis limits and ticks come from each engine's current bounds,
so the saved figure matches what a live graph shows.
"""

import os
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from .graphs import PVAGraphs
from .main import SimulationLog
from .series import TimeSeriesEngine

UNITS = {
    'position': 'm',
    'velocity': 'm/s',
    'acceleration': 'm/s²',
}

COLORS = {
    'position': 'tab:blue',
    'velocity': 'tab:red',
    'acceleration': 'tab:green',
}


def plot_series(engine: TimeSeriesEngine, ax: Optional[Axes] = None) -> Axes:
    """
    Draw one engine's buffered samples within its current bounds.

    Args:
        engine: Series to draw
        ax: Axes to draw on; a new figure is created if None

    Returns:
        The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 2.5))

    color = COLORS.get(engine.name, 'black')
    ax.plot(engine.times, engine.values, color=color, linewidth=1.5)
    ax.axhline(0.0, color='gray', linewidth=0.8)
    ax.set_xlim(*engine.time_bound.as_tuple())
    ax.set_ylim(*engine.value_bound.as_tuple())
    ax.set_xticks(engine.time_ticks())
    ax.set_yticks(engine.value_ticks())
    unit = UNITS.get(engine.name)
    ax.set_ylabel(f"{engine.name} ({unit})" if unit else engine.name)
    ax.set_xlabel("time (s)")
    ax.grid(True, alpha=0.3)
    return ax


def generate_pva_plots(graphs: PVAGraphs, output_dir: str,
                       filename: str = "pva_graphs.png") -> str:
    """
    Save the position, velocity and acceleration graphs as one figure.

    Returns:
        Path of the saved image
    """
    os.makedirs(output_dir, exist_ok=True)
    fig, axes = plt.subplots(3, 1, figsize=(7, 8), sharex=False)
    for ax, engine in zip(axes, graphs.engines.values()):
        plot_series(engine, ax)
    fig.suptitle(f"{graphs.clock.body.name}: position, velocity, acceleration")
    fig.tight_layout()
    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def generate_force_plot(log: SimulationLog, output_dir: str,
                        filename: str = "forces.png") -> str:
    """
    Save weight, drag and net force against time from a run log.

    Returns:
        Path of the saved image
    """
    os.makedirs(output_dir, exist_ok=True)
    fig, ax = plt.subplots(figsize=(7, 3.5))
    ax.plot(log.time, log.weight_force, label="weight")
    ax.plot(log.time, log.drag_force, label="drag")
    ax.plot(log.time, log.net_force, label="net", linestyle='--')
    ax.axhline(0.0, color='gray', linewidth=0.8)
    ax.set_xlabel("time (s)")
    ax.set_ylabel("force (N)")
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    path = os.path.join(output_dir, filename)
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path


def generate_all_plots(graphs: PVAGraphs, log: SimulationLog, output_dir: str) -> List[str]:
    """Save every figure for one run, returning the saved paths."""
    return [
        generate_pva_plots(graphs, output_dir),
        generate_force_plot(log, output_dir),
    ]
