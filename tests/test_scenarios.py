"""
End-to-end drop scenarios.

Each scenario drives a clock (or a bare body) through a known situation and
checks the physically expected outcome.
"""

import pytest

from fall_sim import config
from fall_sim import constants as C
from fall_sim.clock import SimulationClock
from fall_sim.config import SeriesConfig
from fall_sim.environment import EnvironmentSample
from fall_sim.forces import compute_terminal_velocity
from fall_sim.integrators import semi_implicit_euler_step
from fall_sim.objects import ObjectParameters
from fall_sim.series import TimeSeriesEngine
from fall_sim.state import create_body_state

DT = 1.0 / 60.0


def test_free_fall_one_second():
    clock = SimulationClock(config.create_basics_config(verbose=False))
    clock.play()
    for _ in range(60):
        clock.step(DT)

    body = clock.body
    assert body.velocity == pytest.approx(-9.80665, abs=1e-3)
    # Semi-implicit Euler overshoots 0.5 g t^2 by 0.5 g dt t
    assert body.position == pytest.approx(C.ACCELERATION_GRAVITY_SEA_LEVEL * DT ** 2 * 1830, abs=1e-3)
    assert body.position == pytest.approx(-4.903, abs=0.1)
    assert body.drag_force == 0.0
    assert clock.enabled is True


def test_baseball_terminal_velocity():
    env = EnvironmentSample(air_density=1.225, gravitational_acceleration=-9.80665)
    body = create_body_state("Baseball")
    vt = compute_terminal_velocity(body.mass, body.drag_coefficient, body.reference_area,
                                   env.air_density, env.gravitational_acceleration)
    assert vt == pytest.approx(13.3378, abs=1e-3)

    for _ in range(3600):
        semi_implicit_euler_step(body, env, DT, drag_enabled=True)
        assert -vt - 1e-2 <= body.velocity <= 0.0

    assert body.velocity == pytest.approx(-vt, abs=1e-2)
    assert body.net_force == pytest.approx(0.0, abs=1e-4)
    assert body.combusted is False


def test_graph_value_axis_doubles():
    engine = TimeSeriesEngine(SeriesConfig(base_value_interval=30.0))
    maxima = []
    replots_at = []
    for i in range(101):
        if engine.add_sample(i * 0.05, float(i)):
            replots_at.append(i)
        if not maxima or maxima[-1] != engine.value_bound.max:
            maxima.append(engine.value_bound.max)
    assert maxima == [30.0, 60.0, 120.0]
    assert replots_at == [31, 61]
    assert engine.value_bound.min == 0.0


def test_ground_stop_clamps_on_contact_step():
    clock = SimulationClock(config.create_terminal_config(initial_altitude=2.0, verbose=False))
    contacts = []
    clock.on_ground_contact.subscribe(lambda: contacts.append(clock.elapsed_time))
    clock.play()

    previous = clock.body.position
    steps = 0
    while clock.enabled:
        previous = clock.body.position
        clock.step(DT)
        steps += 1
        assert steps < 600

    assert previous > 0.0
    assert clock.body.position == 0.0
    assert clock.running is False
    assert len(contacts) == 1

    # Further ticks do nothing
    t = clock.elapsed_time
    assert clock.step(DT) is False
    assert clock.elapsed_time == t


def test_light_object_large_step_combusts():
    feather = ObjectParameters("Feather", 0.005, 0.61, 0.0033, 0.064, 0.083)
    clock = SimulationClock(
        config.create_test_config(default_object="Feather", initial_drag_enabled=True),
        registry={"FEATHER": feather},
    )
    combusted = []
    clock.on_combusted.subscribe(lambda: combusted.append(clock.elapsed_time))

    assert clock.manual_step(1.0) is True
    assert clock.body.velocity < 0.0
    assert clock.body.combusted is False

    assert clock.manual_step(1.0) is True
    assert clock.body.velocity > 0.0
    assert clock.body.combusted is True
    assert clock.enabled is False
    assert len(combusted) == 1

    frozen = clock.body.copy()
    for _ in range(3):
        assert clock.manual_step(1.0) is False
    clock.play()
    assert clock.step(1.0) is False
    assert clock.body == frozen

    clock.reset()
    assert clock.body.combusted is False
    assert clock.enabled is True
    assert clock.body.position == 0.0


def test_combusted_clock_cannot_be_re_enabled():
    feather = ObjectParameters("Feather", 0.005, 0.61, 0.0033, 0.064, 0.083)
    clock = SimulationClock(
        config.create_test_config(default_object="Feather", initial_drag_enabled=True),
        registry={"FEATHER": feather},
    )
    combusted = []
    clock.on_combusted.subscribe(lambda: combusted.append(clock.elapsed_time))
    clock.manual_step(1.0)
    clock.manual_step(1.0)
    assert clock.body.combusted is True
    assert clock.elapsed_time == 2.0

    clock.enabled = True
    assert clock.enabled is False
    clock.play()
    assert clock.step(1.0) is False
    assert clock.manual_step(1.0) is False

    # Even a direct tick leaves time and the body alone
    frozen = clock.body.copy()
    clock.advance(1.0)
    assert clock.elapsed_time == 2.0
    assert clock.body == frozen
    assert len(combusted) == 1

    clock.reset()
    clock.enabled = True
    assert clock.enabled is True
    assert clock.manual_step(1.0) is True
