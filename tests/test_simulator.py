"""Tests for the Simulator controller."""

import numpy as np
import pytest
from galaxy_dynamics import Simulator
from galaxy_dynamics.errors import ValidationError
from galaxy_dynamics.interactions import InteractionParams
from galaxy_dynamics.presets import build_galaxy
from galaxy_dynamics.utils import Config


@pytest.fixture
def sim():
    simulator = Simulator(dt=0.05)
    simulator.add_galaxy(build_galaxy("milky-way-like", n_particles=100, seed=1, offset=[-20.0, 0.0, 0.0]))
    simulator.add_galaxy(build_galaxy("andromeda-like", n_particles=100, seed=2, offset=[20.0, 0.0, 0.0]))
    return simulator


def test_step_advances_time(sim):
    sim.step()
    sim.step(0.1)
    assert sim.step_count == 2
    assert sim.time == pytest.approx(0.15)


def test_physics_runs_before_interactions(sim):
    calls = []
    a, b = sim.galaxies
    engine = sim.add_interaction(InteractionParams("tidal", distance=100.0), a, b)

    def record(name, update):
        def wrapper(dt):
            calls.append(name)
            update(dt)
        return wrapper

    a.update = record("a", a.update)
    b.update = record("b", b.update)
    engine.update = record("engine", engine.update)

    sim.step()
    sim.step()

    assert calls == ["a", "b", "engine"] * 2


def test_completed_engines_are_removed(sim):
    finished = []
    sim.on_interaction_complete = lambda s, engine: finished.append(engine)
    engine = sim.add_interaction(InteractionParams("harassment", duration=0.1), sim.galaxies[0])

    sim.step()
    assert sim.engines == [engine]
    sim.step()

    assert sim.engines == []
    assert finished == [engine]


def test_cancel_interaction(sim):
    engine = sim.add_interaction(InteractionParams("collision"), sim.galaxies[1])
    sim.step()
    sim.cancel_interaction(engine)
    assert sim.engines == []
    # Cancelling twice is harmless
    sim.cancel_interaction(engine)


def test_interactions_need_registered_galaxies(sim):
    stranger = build_galaxy("cartwheel", n_particles=10, seed=0)
    with pytest.raises(ValidationError):
        sim.add_interaction(InteractionParams("tidal"), sim.galaxies[0], stranger)


def test_pause_and_resume(sim):
    sim.pause()
    sim.run(5)
    assert sim.step_count == 0
    sim.resume()
    sim.run(3)
    assert sim.step_count == 3


def test_step_callback(sim):
    seen = []
    sim.on_step_callback = lambda s: seen.append(s.step_count)
    sim.run(3)
    assert seen == [1, 2, 3]


def test_non_finite_step_is_skipped(sim):
    positions = sim.galaxies[0].field.position.copy()
    sim.step(float("inf"))
    assert sim.step_count == 0
    assert np.array_equal(sim.galaxies[0].field.position, positions)


@pytest.mark.parametrize("dt", [0.0, -0.1, float("nan")])
def test_set_timestep_rejects_invalid(sim, dt):
    with pytest.raises(ValidationError):
        sim.set_timestep(dt)
    assert sim.dt == 0.05


def test_profiling(sim):
    assert sim.get_timing() == {"physics_ms": None, "interactions_ms": None}
    sim.set_profiling(True)
    sim.step()
    timing = sim.get_timing()
    assert timing["physics_ms"] >= 0.0
    assert timing["interactions_ms"] >= 0.0


def test_merger_conserves_particles(sim):
    a, b = sim.galaxies
    sim.add_interaction(InteractionParams("merger", strength=1.0, duration=1.0), a, b)
    sim.run(25)
    assert sim.engines == []
    assert sum(sim.particle_counts()) == 200
    assert a.count > 100


def test_from_config():
    config = Config(
        dt=0.05,
        seed=11,
        galaxies=[
            {"type": "milky-way-like", "n_particles": 80, "offset": [-15.0, 0.0, 0.0]},
            {"type": "m87-like", "n_particles": 60, "physics": {"dust_density": 0.0}},
        ],
        interactions=[
            {"kind": "tidal", "galaxy_a": 0, "galaxy_b": 1, "distance": 40.0},
            {"kind": "stripping", "galaxy_a": 1, "strength": 2.0, "duration": 0.5},
        ],
    )

    sim = Simulator.from_config(config)

    assert sim.dt == 0.05
    assert sim.particle_counts() == [80, 60]
    assert sim.galaxies[1].params.dust_density == 0.0
    assert [engine.params.kind for engine in sim.engines] == ["tidal", "stripping"]
    assert sim.engines[0].galaxy_b is sim.galaxies[1]

    sim.run(20)
    assert [engine.params.kind for engine in sim.engines] == ["tidal"]
    assert sim.particle_counts()[1] <= 60


def test_from_config_is_reproducible():
    config = Config(
        seed=3,
        galaxies=[{"type": "flocculent-spiral", "n_particles": 50}],
        interactions=[{"kind": "collision", "duration": 1.0}],
    )

    first = Simulator.from_config(config)
    second = Simulator.from_config(config)
    first.run(10)
    second.run(10)

    assert np.array_equal(first.galaxies[0].field.position, second.galaxies[0].field.position)
    assert np.array_equal(first.galaxies[0].field.velocity, second.galaxies[0].field.velocity)
