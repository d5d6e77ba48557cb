import pytest

from fall_sim import config
from fall_sim.clock import SimulationClock
from fall_sim.config import SeriesConfig
from fall_sim.graphs import PVAGraphs


@pytest.fixture
def clock():
    return SimulationClock(config.create_test_config())


@pytest.fixture
def graphs(clock):
    return PVAGraphs(clock, SeriesConfig(update_interval=0.1))


def run(clock, steps, dt=0.03):
    for _ in range(steps):
        clock.manual_step(dt)


def test_engines_sample_on_cadence(clock, graphs):
    run(clock, 20)
    for engine in graphs.engines.values():
        assert len(engine) == 5
    assert graphs.position.values[-1] == clock.body.position
    assert graphs.velocity.values[-1] == clock.body.velocity
    assert graphs.acceleration.values[-1] == clock.body.acceleration


def test_falling_body_grows_lower_bounds(clock, graphs):
    run(clock, 20)
    assert graphs.velocity.value_bound.min < 0.0
    assert graphs.acceleration.value_bound.min == -10.0
    assert graphs.acceleration.value_bound.max == graphs.acceleration.config.base_value_interval


def test_clock_reset_resets_engines(clock, graphs):
    run(clock, 20)
    clock.reset()
    for engine in graphs.engines.values():
        assert len(engine) == 0
        assert engine.last_sample_time == 0.0


def test_object_change_resets_engines(clock, graphs):
    run(clock, 20)
    clock.select_object("GOLF_BALL")
    assert len(graphs.position) == 0
    run(clock, 4)
    assert graphs.position.values[-1] == clock.body.position


def test_detach(clock, graphs):
    graphs.detach()
    run(clock, 20)
    assert len(graphs.position) == 0
    assert len(clock.on_stepped) == 0


def test_default_config_plots_fall_upward(clock):
    graphs = PVAGraphs(clock)
    assert graphs.velocity.config.invert is True
    run(clock, 20)
    assert graphs.velocity.values[-1] == -clock.body.velocity
    assert graphs.velocity.values[-1] > 0.0
    assert graphs.acceleration.value_bound.min == 0.0
    assert graphs.acceleration.value_bound.max == 10.0
